"""Redaction of sensitive context fields and error-message secrets.

Two independent tools live here:

- ``redact_fields`` replaces the values of named context keys.
- ``sanitize_message`` scrubs secrets embedded in free text (typically an
  exception message) with an ordered pipeline of ``SanitizeRule`` objects.

The rule order is fixed. The bearer rule runs first; the authorization rule
skips values that start with ``Bearer ``, quoted or not, so a header such
as ``authorization="Bearer abc"`` is only rewritten once. Bearer values stop
before a quote, leaving the closing quote of such a header in place.
Every key/value rule refuses to match a value that is already the
sentinel, so the output of an earlier rule is never rewritten by a later
one and sanitizing twice gives the same string as sanitizing once.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from contextlog.core.models import DEFAULT_REDACT_FIELDS, REDACTED, LogContext

# Quoted values may contain delimiters; unquoted ones stop at whitespace , ;
_VALUE = r"""(?:"[^"]*"|'[^']*'|[^\s,;]+)"""
_NOT_REDACTED = re.escape(REDACTED)


@dataclass(frozen=True)
class SanitizeRule:
    """One substitution step of the message sanitizer.

    Attributes:
        name: Short rule name, used in diagnostics and tests.
        pattern: Compiled pattern with ``key`` and ``sep`` groups.
        replacement: Replacement template keeping the key and delimiter.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = rf"\g<key>\g<sep>{REDACTED}"

    def apply(self, message: str) -> str:
        return self.pattern.sub(self.replacement, message)


def _key_value_rule(name: str, key: str, value_guard: str = "") -> SanitizeRule:
    """Build a ``key=value`` / ``key: value`` rule.

    Args:
        name: Rule name.
        key: Regex for the key name (matched case-insensitively).
        value_guard: Extra negative lookahead applied before the value.
    """
    pattern = re.compile(
        rf"(?P<key>{key})(?P<sep>[=:]\s*)(?!{_NOT_REDACTED}){value_guard}{_VALUE}",
        re.IGNORECASE,
    )
    return SanitizeRule(name=name, pattern=pattern)


SANITIZE_RULES: tuple[SanitizeRule, ...] = (
    # Bearer tokens; must run before "authorization"
    SanitizeRule(
        name="bearer",
        pattern=re.compile(
            rf"(?P<key>Bearer)(?P<sep>\s+)(?!{_NOT_REDACTED})[^\s\"']+", re.IGNORECASE
        ),
    ),
    # Also rewrites the tail of access_token / refresh_token keys
    _key_value_rule("token", r"token"),
    _key_value_rule("secret", r"secret"),
    _key_value_rule("password", r"password"),
    _key_value_rule("api_key", r"api[_-]?key"),
    # Skips "Bearer ..." values, quoted or not, already handled by the bearer rule
    _key_value_rule(
        "authorization", r"authorization", value_guard=r"(?!['\"]?Bearer\s)"
    ),
    _key_value_rule("access_token", r"access[_-]?token"),
    _key_value_rule("refresh_token", r"refresh[_-]?token"),
)


def sanitize_message(
    message: str, rules: Iterable[SanitizeRule] = SANITIZE_RULES
) -> str:
    """Remove secrets from a free-text message.

    Args:
        message: Text to scrub, typically an exception message.
        rules: Ordered rules to apply (default: SANITIZE_RULES).

    Returns:
        The message with every recognised secret value replaced by
        "[REDACTED]". Empty or non-matching input is returned unchanged.
    """
    if not message:
        return message
    for rule in rules:
        message = rule.apply(message)
    return message


def redact_fields(
    context: Mapping[str, Any],
    fields: Iterable[str] = DEFAULT_REDACT_FIELDS,
) -> LogContext:
    """Replace the values of sensitive keys with the redaction sentinel.

    Matching is exact and case-sensitive on the key. Nested values are not
    inspected. Key order and all other values are preserved.

    Args:
        context: Context mapping to redact.
        fields: Key names to redact.

    Returns:
        A new dict; the input is not modified.
    """
    redacted = dict(context)
    for field_name in fields:
        if field_name in redacted:
            redacted[field_name] = REDACTED
    return redacted

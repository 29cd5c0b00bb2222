"""Tests for context field redaction and message sanitization."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contextlog.core.models import CORE_REDACT_FIELDS, REDACTED
from contextlog.core.redaction import (
    SANITIZE_RULES,
    redact_fields,
    sanitize_message,
)

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]

secret_values = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-.",
    min_size=1,
    max_size=20,
)
quoted_values = st.text(
    alphabet="0123456789 ,;=:", min_size=1, max_size=20
)
secret_keys = st.sampled_from(
    ["token", "secret", "password", "api_key", "access_token", "refresh_token"]
)


class TestRedactFields:
    """Tests for redact_fields()."""

    @pytest.mark.tra("Redaction.Fields.Replace")
    def test_replaces_matching_keys(self) -> None:
        """Values of configured keys become the sentinel."""
        result = redact_fields({"password": "hunter2", "user": "bob"})
        assert result == {"password": REDACTED, "user": "bob"}

    @pytest.mark.tra("Redaction.Fields.CaseSensitive")
    def test_matching_is_case_sensitive(self) -> None:
        """Only exact key names are redacted."""
        result = redact_fields({"Password": "x", "apiKey": "y"})
        assert result == {"Password": "x", "apiKey": REDACTED}

    @pytest.mark.tra("Redaction.Fields.Order")
    def test_preserves_key_order(self) -> None:
        """Key order is unchanged after redaction."""
        result = redact_fields({"a": 1, "token": "t", "b": 2})
        assert list(result) == ["a", "token", "b"]

    @pytest.mark.tra("Redaction.Fields.NoRecursion")
    def test_does_not_recurse_into_nested_values(self) -> None:
        """Nested mappings are passed through untouched."""
        nested = {"password": "inner"}
        result = redact_fields({"auth": nested})
        assert result["auth"] is nested

    @pytest.mark.tra("Redaction.Fields.Copy")
    def test_does_not_mutate_input(self) -> None:
        """The input mapping is left unchanged."""
        context = {"secret": "s"}
        redact_fields(context)
        assert context == {"secret": "s"}

    @pytest.mark.tra("Redaction.Fields.Custom")
    def test_custom_field_list(self) -> None:
        """Only the given field names are redacted."""
        result = redact_fields({"password": "p", "ssn": "1"}, fields=["ssn"])
        assert result == {"password": "p", "ssn": REDACTED}

    @pytest.mark.tra("Redaction.Fields.Idempotent")
    @given(
        context=st.dictionaries(
            st.sampled_from([*CORE_REDACT_FIELDS, "user", "path", "count"]),
            st.one_of(st.text(max_size=10), st.integers()),
        )
    )
    def test_redaction_is_idempotent(self, context: dict) -> None:
        """Redacting twice gives the same result as redacting once."""
        once = redact_fields(context)
        assert redact_fields(once) == once

    @pytest.mark.tra("Redaction.Fields.OnlyConfigured")
    @given(
        context=st.dictionaries(
            st.sampled_from([*CORE_REDACT_FIELDS, "user", "path", "count"]),
            st.integers(),
        )
    )
    def test_only_configured_keys_change(self, context: dict) -> None:
        """Redacted keys hold the sentinel and every other value is unchanged."""
        result = redact_fields(context)
        for key, value in context.items():
            if key in CORE_REDACT_FIELDS:
                assert result[key] == REDACTED
            else:
                assert result[key] == value


class TestSanitizeMessage:
    """Tests for sanitize_message()."""

    @pytest.mark.tra("Redaction.Sanitize.Empty")
    def test_empty_string_unchanged(self) -> None:
        assert sanitize_message("") == ""

    @pytest.mark.tra("Redaction.Sanitize.NoMatch")
    def test_no_match_unchanged(self) -> None:
        message = "connection refused by upstream"
        assert sanitize_message(message) == message

    @pytest.mark.tra("Redaction.Sanitize.Bearer")
    def test_bearer_token(self) -> None:
        assert (
            sanitize_message("sent Bearer eyJhbGciOi.abc.def")
            == "sent Bearer [REDACTED]"
        )

    @pytest.mark.tra("Redaction.Sanitize.BearerNotDoubled")
    def test_authorization_bearer_redacted_once(self) -> None:
        """authorization=Bearer x is handled by the bearer rule only."""
        assert (
            sanitize_message("authorization=Bearer abc123")
            == "authorization=Bearer [REDACTED]"
        )

    @pytest.mark.tra("Redaction.Sanitize.AuthorizationHeader")
    def test_authorization_header_with_bearer(self) -> None:
        assert (
            sanitize_message("Authorization: Bearer abc123")
            == "Authorization: Bearer [REDACTED]"
        )

    @pytest.mark.tra("Redaction.Sanitize.AuthorizationQuotedBearer")
    @pytest.mark.parametrize("quote", ["\"", "'"])
    def test_quoted_authorization_bearer_redacted_once(self, quote: str) -> None:
        message = f"authorization: {quote}Bearer abc123{quote}"
        expected = f"authorization: {quote}Bearer [REDACTED]{quote}"
        assert sanitize_message(message) == expected
        assert sanitize_message(expected) == expected

    @pytest.mark.tra("Redaction.Sanitize.QuotedBearer")
    def test_quoted_bearer_keeps_closing_quote(self) -> None:
        assert (
            sanitize_message("header='Bearer eyJ.abc' rejected")
            == "header='Bearer [REDACTED]' rejected"
        )

    @pytest.mark.tra("Redaction.Sanitize.AuthorizationBasic")
    def test_authorization_non_bearer(self) -> None:
        assert (
            sanitize_message("authorization=Basic dXNlcjpwYXNz")
            == "authorization=[REDACTED] dXNlcjpwYXNz"
        )

    @pytest.mark.tra("Redaction.Sanitize.KeepsKeyAndDelimiter")
    def test_keeps_key_case_and_delimiter(self) -> None:
        assert sanitize_message("Password: hunter2") == "Password: [REDACTED]"
        assert sanitize_message("TOKEN=abc") == "TOKEN=[REDACTED]"

    @pytest.mark.tra("Redaction.Sanitize.Quoted")
    def test_quoted_values_with_delimiters(self) -> None:
        assert (
            sanitize_message('failed: secret="my secret, value" at step 2')
            == "failed: secret=[REDACTED] at step 2"
        )
        assert sanitize_message("password='a b;c'") == "password=[REDACTED]"

    @pytest.mark.tra("Redaction.Sanitize.UnquotedTerminators")
    def test_unquoted_value_stops_at_delimiters(self) -> None:
        assert (
            sanitize_message("token=abc,user=bob;password=pw next")
            == "token=[REDACTED],user=bob;password=[REDACTED] next"
        )

    @pytest.mark.tra("Redaction.Sanitize.ApiKeyVariants")
    def test_api_key_variants(self) -> None:
        assert sanitize_message("api_key=1") == "api_key=[REDACTED]"
        assert sanitize_message("api-key=1") == "api-key=[REDACTED]"
        assert sanitize_message("apikey:1") == "apikey:[REDACTED]"

    @pytest.mark.tra("Redaction.Sanitize.AccessRefresh")
    def test_access_and_refresh_tokens(self) -> None:
        assert (
            sanitize_message("access_token=a refresh_token=b")
            == "access_token=[REDACTED] refresh_token=[REDACTED]"
        )
        assert sanitize_message("accessToken=a") == "accessToken=[REDACTED]"

    @pytest.mark.tra("Redaction.Sanitize.Multiple")
    def test_multiple_secret_kinds(self) -> None:
        message = (
            "request failed: Bearer tok1 password=pw1 api_key='k 1' secret:s1"
        )
        result = sanitize_message(message)
        for raw in ("tok1", "pw1", "k 1", "s1"):
            assert raw not in result
        assert result.count(REDACTED) == 4

    @pytest.mark.tra("Redaction.Sanitize.RuleOrder")
    def test_bearer_rule_runs_first(self) -> None:
        names = [rule.name for rule in SANITIZE_RULES]
        assert names[0] == "bearer"
        assert names.index("authorization") > names.index("bearer")

    @pytest.mark.tra("Redaction.Sanitize.Unquoted")
    @given(key=secret_keys, value=secret_values)
    def test_unquoted_secret_is_removed(self, key: str, value: str) -> None:
        assert sanitize_message(f"{key}={value}") == f"{key}={REDACTED}"

    @pytest.mark.tra("Redaction.Sanitize.QuotedProperty")
    @given(key=secret_keys, value=quoted_values)
    def test_quoted_secret_is_removed(self, key: str, value: str) -> None:
        assert sanitize_message(f'{key}="{value}"') == f"{key}={REDACTED}"

    @pytest.mark.tra("Redaction.Sanitize.AuthorizationProperty")
    @given(value=secret_values)
    def test_authorization_secret_is_removed(self, value: str) -> None:
        assert sanitize_message(f"authorization={value}") == f"authorization={REDACTED}"

    @pytest.mark.tra("Redaction.Sanitize.Idempotent")
    @given(key=secret_keys, value=secret_values, tail=st.sampled_from(["", " ok", ", x"]))
    def test_sanitizing_twice_is_stable(self, key: str, value: str, tail: str) -> None:
        once = sanitize_message(f"error {key}: {value}{tail}")
        assert sanitize_message(once) == once

"""BDD step definitions for child logger context features."""

import json
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from contextlog.adapters.transports.in_memory import InMemoryTransport
from contextlog.core.logger import DelegatingLogger, Logger


@dataclass
class ContextScenario:
    """Shared state between steps in a context scenario."""

    transport: InMemoryTransport = field(default_factory=InMemoryTransport)
    logger: Logger | None = None
    child: DelegatingLogger | None = None


@pytest.fixture
def ctx() -> ContextScenario:
    """Fresh scenario context for each test."""
    return ContextScenario()


# === Given ===


@given("a logger writing to memory")
def given_logger(ctx: ContextScenario) -> None:
    ctx.logger = Logger(ctx.transport, level="debug")


@given(parsers.parse('the logger has global context "{key}" set to "{value}"'))
def given_global_context(ctx: ContextScenario, key: str, value: str) -> None:
    assert ctx.logger is not None
    ctx.logger.set_context({key: value})


@given(parsers.parse('a child logger with context "{key}" set to "{value}"'))
def given_child(ctx: ContextScenario, key: str, value: str) -> None:
    assert ctx.logger is not None
    ctx.child = ctx.logger.child({key: value})


# === When ===


@when(parsers.parse('the child logs "{message}" with context "{key}" set to "{value}"'))
def when_child_logs(ctx: ContextScenario, message: str, key: str, value: str) -> None:
    assert ctx.child is not None
    ctx.child.info(message, {key: value})


@when(parsers.parse('the child sets context "{key}" to "{value}"'))
def when_child_sets_context(ctx: ContextScenario, key: str, value: str) -> None:
    assert ctx.child is not None
    ctx.child.set_context({key: value})


@when(parsers.parse('the parent sets context "{key}" to "{value}"'))
def when_parent_sets_context(ctx: ContextScenario, key: str, value: str) -> None:
    assert ctx.logger is not None
    ctx.logger.set_context({key: value})


@when(parsers.parse('the parent logs "{message}"'))
def when_parent_logs(ctx: ContextScenario, message: str) -> None:
    assert ctx.logger is not None
    ctx.logger.info(message)


# === Then ===


@then(parsers.parse("the last entry context is {expected}"))
def then_last_context(ctx: ContextScenario, expected: str) -> None:
    entries = ctx.transport.entries
    assert entries, "no entries were written"
    assert entries[-1].context == json.loads(expected)

"""Tests for ValidationPipeline."""

from __future__ import annotations

import asyncio

import pytest

from verdict import MessageKeyDefinition, Outcome, ValidationPipeline, error, ok

REQUIRED = MessageKeyDefinition.create("user.username.required")
TOO_SHORT = (
    MessageKeyDefinition.create("user.username.too_short")
    .with_string_parameter("username")
    .with_int_parameter("min_length")
)
TAKEN = MessageKeyDefinition.create("user.username.taken").with_string_parameter("username")


def required(name: str) -> Outcome[None]:
    return ok() if name else error(REQUIRED)


def min_length(name: str) -> Outcome[None]:
    return ok() if len(name) >= 3 else error(TOO_SHORT, name, 3)


async def not_taken(name: str) -> Outcome[None]:
    await asyncio.sleep(0)
    return error(TAKEN, name) if name == "admin" else ok()


def username_pipeline() -> ValidationPipeline[str]:
    return ValidationPipeline[str]().add_rule(required).add_rule(min_length)


# ═════════════════════════════════════════════════════════════════════════════
# Sync validation
# ═════════════════════════════════════════════════════════════════════════════


def test_valid_value_is_returned() -> None:
    """A value passing every rule comes back as the success value."""
    assert username_pipeline().validate("alice").value == "alice"


def test_every_rule_runs() -> None:
    """Failures from all rules are accumulated in registration order."""
    r = username_pipeline().validate("")
    assert [m.key_definition.key for m in r.messages] == [
        "user.username.required",
        "user.username.too_short",
    ]


def test_single_failure_renders_parameters() -> None:
    """Rendered diagnostics carry the formatted arguments."""
    r = username_pipeline().validate("jo")
    assert r.to_string_with_parameters() == "ValidationKey: user.username.too_short Parameters: jo, 3"


def test_empty_pipeline_accepts_anything() -> None:
    """No rules means success."""
    assert ValidationPipeline[int]().validate(5).value == 5


def test_rule_count_and_repr() -> None:
    """Sync and async rules are counted separately."""
    p = username_pipeline().add_rule(not_taken)
    assert p.rule_count == 3
    assert repr(p) == "ValidationPipeline(sync=2, async=1)"


# ═════════════════════════════════════════════════════════════════════════════
# Async rules
# ═════════════════════════════════════════════════════════════════════════════


def test_validate_runs_async_rules_from_sync_code() -> None:
    """validate() drives async rules to completion without a running loop."""
    p = username_pipeline().add_rule(not_taken)
    r = p.validate("admin")
    assert [m.key_definition.key for m in r.messages] == ["user.username.taken"]
    assert p.validate("alice").value == "alice"


class ReservedNames:
    """Callable rule object with an async __call__."""

    def __init__(self, *names: str) -> None:
        self.names = names

    async def __call__(self, name: str) -> Outcome[None]:
        await asyncio.sleep(0)
        return error(TAKEN, name) if name in self.names else ok()


def test_callable_with_async_call_is_an_async_rule() -> None:
    """Objects with an async __call__ are awaited, not treated as sync rules."""
    p = username_pipeline().add_rule(ReservedNames("root", "admin"))
    assert repr(p) == "ValidationPipeline(sync=2, async=1)"
    assert [m.parameters for m in p.validate("root").messages] == [("root",)]
    assert p.validate("alice").value == "alice"


@pytest.mark.asyncio
async def test_validate_async_merges_sync_and_async_rules() -> None:
    """Sync rule messages come first, then async rule messages."""
    p = (
        ValidationPipeline[str]()
        .add_rule(min_length)
        .add_async_rule(lambda name: not_taken(name))
        .add_rule(not_taken)
    )
    r = await p.validate_async("ad")
    assert r.is_success is False
    assert [m.key_definition.key for m in r.messages] == ["user.username.too_short"]

    r = await p.validate_async("admin")
    assert [m.key_definition.key for m in r.messages] == ["user.username.taken", "user.username.taken"]


@pytest.mark.asyncio
async def test_validate_inside_running_loop() -> None:
    """Calling the sync entry point from async code still works."""
    p = username_pipeline().add_rule(not_taken)
    assert p.validate("bob").value == "bob"

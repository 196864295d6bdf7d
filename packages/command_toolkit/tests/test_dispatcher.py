from __future__ import annotations

import logging

import pytest
from command_toolkit import (
    CommandArgument,
    CommandContext,
    CommandNotFoundError,
    Dispatcher,
    Err,
    ExecutionState,
    Ok,
    OutputKind,
    Permissions,
    Settings,
)
from doubles import CountingCheck, CountingEntryPoint, RecordingErrorHandler


def _context(name: str = "ping") -> CommandContext[dict]:
    return CommandContext(data={}, command_name=name, interaction={"id": "123"})


@pytest.mark.asyncio
async def test_dispatch_executes_registered_command() -> None:
    dispatcher = Dispatcher(settings=Settings())

    @dispatcher.command("ping", "Reply with pong")
    async def ping(_ctx):
        return "pong"

    result = await dispatcher.dispatch("ping", _context())

    assert result.state is ExecutionState.COMMAND_FINISHED
    assert result.result == Ok("pong")
    assert dispatcher.registry.require("ping") is ping


@pytest.mark.asyncio
async def test_decorator_collects_metadata() -> None:
    dispatcher = Dispatcher(settings=Settings())
    check = CountingCheck()
    handler = RecordingErrorHandler()

    @dispatcher.command(
        "kick",
        arguments=[CommandArgument("member", "Member to kick")],
        checks=[check],
        error_handler=handler,
        required_permissions=Permissions.KICK_MEMBERS,
    )
    async def kick(_ctx):
        """Kick a member."""
        return None

    assert kick.description == "Kick a member."
    assert kick.checks == (check,)
    assert kick.error_handler is handler
    assert kick.required_permissions == Permissions.KICK_MEMBERS
    assert [arg.name for arg in kick.arguments] == ["member"]


@pytest.mark.asyncio
async def test_unknown_command_raises() -> None:
    dispatcher = Dispatcher(settings=Settings())

    with pytest.raises(CommandNotFoundError):
        await dispatcher.dispatch("missing", _context("missing"))


@pytest.mark.asyncio
async def test_before_hook_rejection_skips_command() -> None:
    seen: list[str] = []

    async def before(_ctx, name: str) -> bool:
        seen.append(name)
        return False

    entry = CountingEntryPoint()
    check = CountingCheck()
    dispatcher = Dispatcher(settings=Settings(), before=before)
    dispatcher.command("ping", checks=[check])(entry)

    result = await dispatcher.dispatch("ping", _context())

    assert result.state is ExecutionState.BEFORE_HOOK_FAILED
    assert result.output.kind is OutputKind.NOT_EXECUTED
    assert seen == ["ping"]
    assert check.calls == 0
    assert entry.calls == 0


@pytest.mark.asyncio
async def test_before_hook_approval_runs_command() -> None:
    entry = CountingEntryPoint(Ok("ran"))
    dispatcher = Dispatcher(settings=Settings(), before=lambda _ctx, _name: True)
    dispatcher.command("ping")(entry)

    result = await dispatcher.dispatch("ping", _context())

    assert result.result == Ok("ran")
    assert entry.calls == 1


@pytest.mark.asyncio
async def test_after_hook_takes_present_results() -> None:
    taken: list[tuple[str, object]] = []

    async def after(_ctx, name, result) -> None:
        taken.append((name, result))

    dispatcher = Dispatcher(settings=Settings(), after=after)
    dispatcher.command("ok")(CountingEntryPoint(Ok(1)))
    dispatcher.command("fail")(CountingEntryPoint(Err("bad")))

    finished = await dispatcher.dispatch("ok", _context("ok"))
    errored = await dispatcher.dispatch("fail", _context("fail"))

    assert finished.state is ExecutionState.COMMAND_FINISHED
    assert finished.output.kind is OutputKind.TAKEN_BY_AFTER_HOOK
    assert errored.state is ExecutionState.COMMAND_ERRORED
    assert errored.output.kind is OutputKind.TAKEN_BY_AFTER_HOOK
    assert taken == [("ok", Ok(1)), ("fail", Err("bad"))]


@pytest.mark.asyncio
async def test_after_hook_skipped_when_error_handler_took_value() -> None:
    calls: list[object] = []
    handler = RecordingErrorHandler()
    dispatcher = Dispatcher(settings=Settings(), after=lambda *args: calls.append(args))
    dispatcher.command("fail", error_handler=handler)(CountingEntryPoint(Err("bad")))
    dispatcher.command("blocked", checks=[CountingCheck(False)])(CountingEntryPoint())

    errored = await dispatcher.dispatch("fail", _context("fail"))
    blocked = await dispatcher.dispatch("blocked", _context("blocked"))

    assert errored.output.kind is OutputKind.TAKEN_BY_ERROR_HANDLER_HOOK
    assert blocked.output.kind is OutputKind.NOT_EXECUTED
    assert calls == []
    assert len(handler.calls) == 1


@pytest.mark.asyncio
async def test_outcome_is_logged_by_state(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = Dispatcher(settings=Settings())
    dispatcher.command("ping")(CountingEntryPoint(Ok("pong")))
    dispatcher.command("fail")(CountingEntryPoint(Err("db-timeout")))

    with caplog.at_level(logging.INFO, logger="command_toolkit.dispatcher"):
        await dispatcher.dispatch("ping", _context())
        await dispatcher.dispatch("fail", _context("fail"))

    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (
        logging.INFO,
        "Command 'ping' ended with state=command_finished output=present",
    ) in messages
    assert (
        logging.WARNING,
        "Command 'fail' ended with state=command_errored: db-timeout",
    ) in messages


@pytest.mark.asyncio
async def test_outcome_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = Dispatcher(settings=Settings(log_outcomes=False))
    dispatcher.command("ping")(CountingEntryPoint(Ok("pong")))

    with caplog.at_level(logging.INFO, logger="command_toolkit.dispatcher"):
        await dispatcher.dispatch("ping", _context())

    assert not [r for r in caplog.records if "ended with state" in r.getMessage()]


def test_dispatcher_loads_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMAND_TOOLKIT_LOG_OUTCOMES", "false")

    dispatcher = Dispatcher()

    assert dispatcher.settings.log_outcomes is False


@pytest.mark.asyncio
async def test_err_none_is_logged_as_failure(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = Dispatcher(settings=Settings())
    dispatcher.command("void")(CountingEntryPoint(Err(None)))

    with caplog.at_level(logging.INFO, logger="command_toolkit.dispatcher"):
        await dispatcher.dispatch("void", _context("void"))

    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.WARNING, "Command 'void' ended with state=command_errored: None") in messages

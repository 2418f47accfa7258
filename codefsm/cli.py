"""CLI entry point for the codefsm sample panel."""

import logging
import sys
from typing import Iterable, List, Tuple

import click

from codefsm.core.hooks import LoggingHook
from codefsm.runtime.controller import Controller, DispatchKind, DispatchResult
from codefsm.runtime.executor import Executor
from codefsm.samples.panel import DEMO_SEQUENCE, build_panel_machine

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def format_result(result: DispatchResult) -> str:
    """Render a dispatch result as a single console line."""
    if result.kind is DispatchKind.TRANSITIONED:
        return f"Transitioned to {result.to_state} on {result.event_code}"
    if result.kind is DispatchKind.RESET:
        return f"Reset to {result.to_state} on {result.event_code}"
    return f"Invalid transition {result.event_code} on {result.from_state}"


class ConsoleHook:
    """
    Echoes each dispatch result followed by the commands it executed.

    Entry commands run before on_dispatch fires, so their output is held back
    until the result line has been printed.
    """

    def __init__(self) -> None:
        self._pending: List[Tuple[str, str]] = []

    def record_command(self, name: str, code: str) -> None:
        self._pending.append((name, code))

    def on_dispatch(self, result: DispatchResult) -> None:
        click.echo(format_result(result))
        for name, code in self._pending:
            click.echo(f"  Executing command {name} ({code})")
        self._pending.clear()


def _run_codes(codes: Iterable[str]) -> List[DispatchResult]:
    console = ConsoleHook()
    machine = build_panel_machine(emit=console.record_command)
    controller = Controller(machine, hooks=[console, LoggingHook()])
    return Executor(controller).run_sequence(codes)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="CODEFSM_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level):
    """Drive the secret panel state machine."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format="%(levelname)s %(name)s: %(message)s")


@cli.command()
def demo():
    """Run the built-in demo event sequence."""
    _run_codes(DEMO_SEQUENCE)


@cli.command()
@click.argument("codes", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Exit with status 1 if any code is rejected")
def run(codes, strict):
    """Dispatch the given event CODES in order."""
    results = _run_codes(codes)
    if strict and not all(result.accepted for result in results):
        sys.exit(1)


@cli.command()
def states():
    """List the sample's states, transitions and reset events."""
    machine = build_panel_machine()
    for state in machine.states:
        marker = " (start)" if state is machine.start else ""
        click.echo(f"{state.name}{marker}")
        for command in state.entry_commands:
            click.echo(f"  entry {command.name} ({command.code})")
        for code, transition in state.transitions.items():
            click.echo(f"  {code} -> {transition.target.name}")
        for code in state.reset_events:
            click.echo(f"  {code} -> reset")


if __name__ == "__main__":
    cli()

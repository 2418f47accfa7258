# codefsm/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field

from codefsm.core.errors import ConfigurationError
from codefsm.interfaces.types import CommandAction, EventCode


def _require_text(kind: str, attribute: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{kind} {attribute} must be a non-empty string")


@dataclass(frozen=True)
class Event:
    """
    Represents a stimulus within the state machine. Only the code takes part in
    dispatch; two events sharing a code are indistinguishable to the engine.
    """

    name: str
    code: EventCode

    def __post_init__(self) -> None:
        _require_text("Event", "name", self.name)
        _require_text("Event", "code", self.code)


@dataclass(frozen=True)
class Command:
    """
    A named, coded side effect executed when its owning state is entered.

    The action is excluded from equality and hashing, so two commands with the
    same name and code compare equal whatever callback they carry.
    """

    name: str
    code: str
    action: CommandAction = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_text("Command", "name", self.name)
        _require_text("Command", "code", self.code)
        if not callable(self.action):
            raise ConfigurationError(f"Command {self.name} action must be callable")

    def execute(self) -> None:
        """
        Invoke the action once. Exceptions raised by the action propagate unchanged.
        """
        self.action()

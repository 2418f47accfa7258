# codefsm/runtime/controller.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from codefsm.core.errors import ConfigurationError
from codefsm.core.hooks import HookManager
from codefsm.core.state_machine import StateMachine
from codefsm.core.states import State
from codefsm.interfaces.types import EventCode

logger = logging.getLogger(__name__)


class DispatchKind(Enum):
    """
    Outcome of resolving one event code against the current state.
    """

    TRANSITIONED = auto()  # A transition of the current state matched
    RESET = auto()  # No transition matched, a reset event did
    REJECTED = auto()  # Neither table knows the code


@dataclass(frozen=True)
class DispatchResult:
    kind: DispatchKind
    from_state: str
    to_state: Optional[str]
    event_code: EventCode

    @property
    def accepted(self) -> bool:
        return self.kind is not DispatchKind.REJECTED


class Controller:
    """
    One run of a state machine. The controller owns the current-state pointer
    and resolves event codes against the current state's transition table,
    then its reset events.

    A controller has no internal locking; concurrent calls to `handle` on the
    same controller must be serialized by the caller. Controllers sharing one
    StateMachine are independent of each other.
    """

    def __init__(self, state_machine: StateMachine, hooks: Optional[Iterable[object]] = None) -> None:
        """
        The controller starts in the machine's start state without running
        that state's entry commands.

        :param state_machine: The shared, read-only machine definition.
        :param hooks: Optional hook objects (see HookProtocol).
        """
        if state_machine is None:
            raise ConfigurationError("Controller requires a state machine")
        self._state_machine = state_machine
        self._current_state: State = state_machine.start
        self._hooks = HookManager(hooks)

    @property
    def state_machine(self) -> StateMachine:
        return self._state_machine

    @property
    def current_state(self) -> State:
        """Get the current state."""
        return self._current_state

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    def handle(self, event_code: EventCode) -> DispatchResult:
        """
        Dispatch one event code.

        Transition lookup strictly precedes reset lookup. On a match the
        current state changes first, then the new state's entry commands run
        in order; a failing command propagates after on_error hooks, leaving
        the controller in the new state. An unknown code is returned as a
        REJECTED result and changes nothing.

        :param event_code: The code of the incoming event.
        :return: The dispatch outcome.
        """
        source = self._current_state
        target = source.target_for(event_code)
        if target is not None:
            kind = DispatchKind.TRANSITIONED
        elif source.has_reset_event(event_code):
            kind = DispatchKind.RESET
            target = self._state_machine.start
        else:
            result = DispatchResult(DispatchKind.REJECTED, source.name, None, event_code)
            logger.debug("Invalid transition %s on %s", event_code, source.name)
            self._hooks.execute_on_dispatch(result)
            return result

        logger.debug("%s %s -> %s on %s", kind.name, source.name, target.name, event_code)
        self._enter(target)
        result = DispatchResult(kind, source.name, target.name, event_code)
        self._hooks.execute_on_dispatch(result)
        return result

    def reset(self) -> None:
        """
        Point the controller back at the start state without running commands.
        """
        self._current_state = self._state_machine.start

    def _enter(self, state: State) -> None:
        self._current_state = state
        try:
            state.execute_entry_commands()
        except Exception as error:
            self._hooks.execute_on_error(error)
            raise
        self._hooks.execute_on_enter(state)

# codefsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple

from codefsm.core.errors import ConfigurationError, StateNotFoundError, ValidationError
from codefsm.core.events import Command, Event
from codefsm.core.states import State
from codefsm.core.validations import Validator
from codefsm.interfaces.types import EventCode, ValidationResult

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Entry-point handle for a state machine definition. The definition is the
    graph of states reachable from `start`; constructing the machine freezes
    every one of those states, so a single StateMachine can be shared read-only
    by any number of controllers.
    """

    def __init__(self, start: State, validator: Optional[Validator] = None) -> None:
        """
        :param start: The state every run begins in and every reset returns to.
        :param validator: Optional validator used by `validate()`.
        :raises ConfigurationError: If no start state is given.
        """
        if start is None:
            raise ConfigurationError("StateMachine must have a start state.")
        self._start = start
        self._validator = validator or Validator()
        self._states = self._collect_reachable(start)
        for state in self._states:
            state.freeze()
        logger.debug("State machine rooted at %s frozen with %d states", start.name, len(self._states))

    @staticmethod
    def _collect_reachable(start: State) -> Tuple[State, ...]:
        """Breadth-first walk over transition targets, in discovery order."""
        seen = {start}
        order = [start]
        pending = deque([start])
        while pending:
            state = pending.popleft()
            for transition in state.transitions.values():
                target = transition.target
                if target not in seen:
                    seen.add(target)
                    order.append(target)
                    pending.append(target)
        return tuple(order)

    @property
    def start(self) -> State:
        """The start state."""
        return self._start

    @property
    def states(self) -> Tuple[State, ...]:
        """All states reachable from the start state, start first."""
        return self._states

    @property
    def event_codes(self) -> Tuple[EventCode, ...]:
        """Every code used as a transition trigger or reset event, in first-seen order."""
        codes: Dict[EventCode, None] = {}
        for state in self._states:
            for code in state.transitions:
                codes.setdefault(code, None)
            for code in state.reset_events:
                codes.setdefault(code, None)
        return tuple(codes)

    def get_state(self, name: str) -> State:
        """
        Look up a reachable state by name.

        :raises StateNotFoundError: If no reachable state has that name.
        """
        for state in self._states:
            if state.name == name:
                return state
        raise StateNotFoundError(f"State {name} is not reachable from {self._start.name}")

    def validate(self, declared: Optional[Iterable[State]] = None) -> List[ValidationResult]:
        """Expose the validator's findings for this machine."""
        return self._validator.validate_state_machine(self, declared)


class StateMachineBuilder:
    """
    Builds a StateMachine from states referenced by name. The builder is
    single-use: once `build()` returns, further configuration is rejected.
    """

    def __init__(self, validator: Optional[Validator] = None) -> None:
        self._states: Dict[str, State] = {}
        self._start: Optional[str] = None
        self._global_resets: List[Tuple[Event, bool]] = []
        self._validator = validator or Validator()
        self._built = False

    def add_state(self, name: str, entry_commands: Iterable[Command] = ()) -> "StateMachineBuilder":
        """
        Declare a state.

        :param name: Unique state name.
        :param entry_commands: Commands to run, in order, when the state is entered.
        :raises ConfigurationError: If the name is already declared.
        """
        self._ensure_open()
        if name in self._states:
            raise ConfigurationError(f"State {name} is already declared")
        state = State(name)
        for command in entry_commands:
            state.add_entry_command(command)
        self._states[name] = state
        return self

    def add_entry_command(self, state_name: str, command: Command) -> "StateMachineBuilder":
        self._ensure_open()
        self._lookup(state_name).add_entry_command(command)
        return self

    def add_transition(self, source_name: str, event: Event, target_name: str) -> "StateMachineBuilder":
        """
        Connect two declared states.

        :raises StateNotFoundError: If either state is not declared.
        """
        self._ensure_open()
        source = self._lookup(source_name)
        source.add_transition(event, self._lookup(target_name))
        return self

    def add_reset_event(self, event: Event, *state_names: str) -> "StateMachineBuilder":
        """
        Register `event` as a reset event on each named state.
        """
        self._ensure_open()
        states = [self._lookup(name) for name in state_names]
        for state in states:
            state.add_reset_event(event)
        return self

    def add_global_reset_event(self, event: Event, include_start: bool = False) -> "StateMachineBuilder":
        """
        Register `event` as a reset event on every declared state when the
        machine is built, optionally including the start state.
        """
        self._ensure_open()
        self._global_resets.append((event, include_start))
        return self

    def set_start(self, name: str) -> "StateMachineBuilder":
        self._ensure_open()
        self._lookup(name)
        self._start = name
        return self

    def build(self, strict: bool = False) -> StateMachine:
        """
        Freeze the declared states into a StateMachine.

        :param strict: Raise on validation findings instead of logging them.
        :raises ConfigurationError: If no start state was set.
        :raises ValidationError: If `strict` and the validator reports findings.
        """
        self._ensure_open()
        if self._start is None:
            raise ConfigurationError("StateMachineBuilder needs a start state before build()")
        start = self._states[self._start]

        for event, include_start in self._global_resets:
            for state in self._states.values():
                if state is start and not include_start:
                    continue
                if not state.has_reset_event(event.code):
                    state.add_reset_event(event)

        machine = StateMachine(start, validator=self._validator)
        self._built = True

        results = machine.validate(self._states.values())
        if results:
            if strict:
                raise ValidationError("\n".join(result.message for result in results))
            for result in results:
                logger.warning(result.message)
        return machine

    def _lookup(self, name: str) -> State:
        try:
            return self._states[name]
        except KeyError:
            raise StateNotFoundError(f"State {name} has not been declared") from None

    def _ensure_open(self) -> None:
        if self._built:
            raise ConfigurationError("StateMachineBuilder has already built its machine")

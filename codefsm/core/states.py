# codefsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Union

from codefsm.core.errors import ConfigurationError
from codefsm.core.events import Command, Event
from codefsm.core.transitions import Transition
from codefsm.interfaces.types import EventCode

logger = logging.getLogger(__name__)


class State:
    """
    Represents a state in the state machine. A state owns the commands run on
    entry, the transitions it leaves through (keyed by event code), and the
    event codes that send the machine back to its start state.

    States are configured imperatively and then frozen by the StateMachine
    that reaches them; a frozen state rejects further configuration.
    """

    def __init__(self, name: str) -> None:
        """
        :param name: Name identifying this state.
        :raises ConfigurationError: If the name is empty or not a string.
        """
        if not isinstance(name, str) or not name:
            raise ConfigurationError("State name must be a non-empty string")
        self._name = name
        self._entry_commands: Union[List[Command], tuple] = []
        self._transitions: Mapping[EventCode, Transition] = {}
        self._reset_events: Mapping[EventCode, Event] = {}
        self._frozen = False

    @property
    def name(self) -> str:
        """The name of the state."""
        return self._name

    @property
    def entry_commands(self) -> Sequence[Command]:
        """Commands executed, in order, every time this state is entered."""
        return tuple(self._entry_commands)

    @property
    def transitions(self) -> Mapping[EventCode, Transition]:
        """Read-only view of the transition table keyed by event code."""
        return MappingProxyType(dict(self._transitions)) if not self._frozen else self._transitions

    @property
    def reset_events(self) -> Mapping[EventCode, Event]:
        """Read-only view of the reset events keyed by event code."""
        return MappingProxyType(dict(self._reset_events)) if not self._frozen else self._reset_events

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_entry_command(self, command: Command) -> None:
        """
        Append a command to run when this state is entered.

        :param command: The command to attach.
        :raises ConfigurationError: If the state is frozen or command is missing.
        """
        self._ensure_mutable()
        if command is None:
            raise ConfigurationError(f"State {self._name} cannot add a missing entry command")
        self._entry_commands.append(command)

    def add_transition(self, event: Event, target: "State") -> Transition:
        """
        Register a transition to `target` fired by `event`'s code. Registering
        the same code twice replaces the earlier transition.

        :param event: The triggering event.
        :param target: The destination state.
        :return: The created transition.
        :raises ConfigurationError: If the target or event is missing, or the state is frozen.
        """
        self._ensure_mutable()
        if target is None:
            raise ConfigurationError(f"State {self._name} cannot add a transition without a target state")
        if event is None:
            raise ConfigurationError(f"State {self._name} cannot add a transition without a trigger event")
        transition = Transition(self, event, target)
        previous = self._transitions.get(event.code)
        if previous is not None:
            logger.warning(
                "State %s: transition on %s to %s replaces transition to %s",
                self._name,
                event.code,
                target.name,
                previous.target.name,
            )
        self._transitions[event.code] = transition
        return transition

    def add_reset_event(self, event: Event) -> None:
        """
        Register an event whose code returns the machine to its start state
        when no transition in this state matches it.

        :param event: The reset event.
        :raises ConfigurationError: If the event is missing or the state is frozen.
        """
        self._ensure_mutable()
        if event is None:
            raise ConfigurationError(f"State {self._name} cannot add a missing reset event")
        if event.code in self._reset_events:
            logger.warning("State %s: reset event %s registered twice", self._name, event.code)
        self._reset_events[event.code] = event

    def has_transition(self, event_code: EventCode) -> bool:
        return event_code in self._transitions

    def has_reset_event(self, event_code: EventCode) -> bool:
        return event_code in self._reset_events

    def transition_for(self, event_code: EventCode) -> Optional[Transition]:
        return self._transitions.get(event_code)

    def target_for(self, event_code: EventCode) -> Optional["State"]:
        """
        Return the state the given code leads to, or None if no transition uses it.
        """
        transition = self._transitions.get(event_code)
        return transition.target if transition is not None else None

    def execute_entry_commands(self) -> None:
        """
        Run every entry command in the order added. A failing command stops
        the remaining ones; nothing already run is undone.
        """
        for command in self._entry_commands:
            command.execute()

    def freeze(self) -> None:
        """
        Make this state's configuration read-only. Freezing twice is harmless.
        """
        if self._frozen:
            return
        self._entry_commands = tuple(self._entry_commands)
        self._transitions = MappingProxyType(dict(self._transitions))
        self._reset_events = MappingProxyType(dict(self._reset_events))
        self._frozen = True

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError(f"State {self._name} is frozen and cannot be reconfigured")

    def __repr__(self) -> str:
        return f"State({self._name!r})"

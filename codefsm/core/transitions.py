# codefsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING

from codefsm.core.errors import ConfigurationError
from codefsm.core.events import Event
from codefsm.interfaces.types import EventCode

if TYPE_CHECKING:
    from codefsm.core.states import State


class Transition:
    """
    Defines the edge taken from a source state to a target state when the
    trigger event's code is dispatched. Transitions are created by
    `State.add_transition` and never change afterwards.
    """

    __slots__ = ("_source", "_trigger", "_target")

    def __init__(self, source: "State", trigger: Event, target: "State") -> None:
        """
        :param source: The origin State of this transition.
        :param trigger: The event whose code fires this transition.
        :param target: The destination State of this transition.
        :raises ConfigurationError: If any argument is missing.
        """
        if source is None or target is None:
            raise ConfigurationError("Transition must have a valid source and target state.")
        if trigger is None:
            raise ConfigurationError("Transition must have a trigger event.")
        self._source = source
        self._trigger = trigger
        self._target = target

    @property
    def source(self) -> "State":
        """
        The source state of the transition.
        """
        return self._source

    @property
    def trigger(self) -> Event:
        """The event that fires this transition."""
        return self._trigger

    @property
    def target(self) -> "State":
        """
        The target state of the transition.
        """
        return self._target

    @property
    def event_code(self) -> EventCode:
        return self._trigger.code

    def __repr__(self) -> str:
        return f"Transition({self._source.name!r} -{self._trigger.code}-> {self._target.name!r})"

# codefsm/factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Functional constructors for callers that prefer plain functions to classes.
"""

from typing import Iterable, Optional

from codefsm.core.events import Command, Event
from codefsm.core.state_machine import StateMachine
from codefsm.core.states import State
from codefsm.interfaces.types import CommandAction
from codefsm.runtime.controller import Controller


def new_event(name: str, code: str) -> Event:
    return Event(name, code)


def new_command(name: str, code: str, action: CommandAction) -> Command:
    return Command(name, code, action)


def new_state(name: str) -> State:
    return State(name)


def new_state_machine(start: State) -> StateMachine:
    """Wrap `start` in a StateMachine, freezing every state it reaches."""
    return StateMachine(start)


def new_controller(state_machine: StateMachine, hooks: Optional[Iterable[object]] = None) -> Controller:
    return Controller(state_machine, hooks=hooks)

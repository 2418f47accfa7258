"""
Core definition model: events, commands, states, transitions and the
state machine that freezes them into a shareable graph.
"""

from .errors import ConfigurationError, FSMError, StateNotFoundError, ValidationError
from .events import Command, Event
from .transitions import Transition
from .states import State
from .validations import Validator
from .state_machine import StateMachine, StateMachineBuilder
from .hooks import HookManager, HookProtocol, LoggingHook

__all__ = [
    # Errors
    "FSMError",
    "ConfigurationError",
    "StateNotFoundError",
    "ValidationError",
    # Definition model
    "Event",
    "Command",
    "Transition",
    "State",
    "StateMachine",
    "StateMachineBuilder",
    "Validator",
    # Hooks
    "HookManager",
    "HookProtocol",
    "LoggingHook",
]

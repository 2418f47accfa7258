"""codefsm: event-code driven finite state machine engine

States own the commands run when they are entered, a table of transitions
keyed by event code, and a set of reset event codes that send the machine
back to its start state. A Controller resolves each incoming code against
the current state: transitions first, then resets, otherwise the code is
rejected and nothing changes.

Logging:
    Modules log through ``logging.getLogger(__name__)`` and never install
    handlers; configure logging in the application.

Thread Safety:
    A StateMachine is frozen on construction and may be shared between
    threads. A Controller is not locked; serialize calls on each one.
"""

from codefsm.core import (
    Command,
    ConfigurationError,
    Event,
    FSMError,
    HookManager,
    HookProtocol,
    LoggingHook,
    State,
    StateMachine,
    StateMachineBuilder,
    StateNotFoundError,
    Transition,
    ValidationError,
    Validator,
)
from codefsm.factory import new_command, new_controller, new_event, new_state, new_state_machine
from codefsm.runtime import Controller, DispatchKind, DispatchResult, EventQueue, Executor

__version__ = "0.1.0"

__all__ = [
    "Command",
    "ConfigurationError",
    "Controller",
    "DispatchKind",
    "DispatchResult",
    "Event",
    "EventQueue",
    "Executor",
    "FSMError",
    "HookManager",
    "HookProtocol",
    "LoggingHook",
    "State",
    "StateMachine",
    "StateMachineBuilder",
    "StateNotFoundError",
    "Transition",
    "ValidationError",
    "Validator",
    "new_command",
    "new_controller",
    "new_event",
    "new_state",
    "new_state_machine",
]

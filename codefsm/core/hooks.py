# codefsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from codefsm.core.states import State
    from codefsm.runtime.controller import DispatchResult

logger = logging.getLogger(__name__)


@runtime_checkable
class HookProtocol(Protocol):
    """
    Lifecycle listener. Every method is optional: the manager only calls the
    ones a hook object actually defines.
    """

    def on_enter(self, state: "State") -> None:
        ...

    def on_dispatch(self, result: "DispatchResult") -> None:
        ...

    def on_error(self, error: Exception) -> None:
        ...


class HookManager:
    """
    Manages the registration and execution of hooks that listen to dispatch
    lifecycle events (on_enter, on_dispatch, on_error). Users can attach logging,
    monitoring, or custom side effects without altering core logic.
    """

    def __init__(self, hooks: Optional[Iterable[object]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[object] = list(hooks or [])

    @property
    def hooks(self) -> List[object]:
        return list(self._hooks)

    def register_hook(self, hook: object) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the HookProtocol methods.
        """
        self._hooks.append(hook)

    def execute_on_enter(self, state: "State") -> None:
        """
        Run all hooks' on_enter logic after a state's entry commands ran.
        """
        for hook in self._hooks:
            if hasattr(hook, "on_enter"):
                hook.on_enter(state)

    def execute_on_dispatch(self, result: "DispatchResult") -> None:
        """
        Run all hooks' on_dispatch logic once an event code has been resolved.
        """
        for hook in self._hooks:
            if hasattr(hook, "on_dispatch"):
                hook.on_dispatch(result)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when an entry command fails.
        """
        for hook in self._hooks:
            if hasattr(hook, "on_error"):
                hook.on_error(error)


class LoggingHook:
    """
    Hook that reports every dispatch through the logging system.
    """

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def on_dispatch(self, result: "DispatchResult") -> None:
        if result.accepted:
            self._log.info(
                "%s: %s -> %s on %s", result.kind.name, result.from_state, result.to_state, result.event_code
            )
        else:
            self._log.warning("Rejected %s on %s", result.event_code, result.from_state)

    def on_error(self, error: Exception) -> None:
        self._log.error("Entry command failed: %s", error)

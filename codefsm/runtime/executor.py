# codefsm/runtime/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from codefsm.interfaces.types import EventCode
from codefsm.runtime.controller import Controller, DispatchResult
from codefsm.runtime.event_queue import EventQueue

logger = logging.getLogger(__name__)


class Executor:
    """
    Feeds event codes to a controller one at a time, collecting the results.
    Each code is dispatched to completion before the next one is taken.
    """

    def __init__(
        self,
        controller: Controller,
        event_queue: Optional[EventQueue] = None,
        halt_on_rejection: bool = False,
    ) -> None:
        """
        :param controller: Controller that receives the codes.
        :param event_queue: Queue providing codes to `run()`; a new empty one by default.
        :param halt_on_rejection: Stop at the first rejected code.
        """
        self.controller = controller
        self.event_queue = event_queue if event_queue is not None else EventQueue()
        self.halt_on_rejection = halt_on_rejection
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> List[DispatchResult]:
        """
        Drain the event queue, dispatching each code in order, until the queue
        is empty, `stop()` is called, or a rejection halts the run.

        :return: The results of every dispatched code.
        """
        results: List[DispatchResult] = []
        self._running = True
        try:
            while self._running:
                event_code = self.event_queue.dequeue()
                if event_code is None:
                    break
                if not self._dispatch(event_code, results):
                    break
        finally:
            self._running = False
        return results

    def run_sequence(self, event_codes: Iterable[EventCode]) -> List[DispatchResult]:
        """
        Dispatch the given codes in order, bypassing the queue.
        """
        results: List[DispatchResult] = []
        self._running = True
        try:
            for event_code in event_codes:
                if not self._running or not self._dispatch(event_code, results):
                    break
        finally:
            self._running = False
        return results

    def stop(self) -> None:
        """
        Make a running `run()` or `run_sequence()` return after the current code.
        """
        self._running = False

    def _dispatch(self, event_code: EventCode, results: List[DispatchResult]) -> bool:
        result = self.controller.handle(event_code)
        results.append(result)
        if self.halt_on_rejection and not result.accepted:
            logger.info("Halting after rejected code %s on %s", event_code, result.from_state)
            return False
        return True

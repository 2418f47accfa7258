# codefsm/runtime/event_queue.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterable, Optional

from codefsm.interfaces.types import EventCode


class EventQueue:
    """
    A FIFO of event codes waiting to be dispatched. Producers on any thread may
    enqueue; a single consumer (usually an Executor) dequeues.
    """

    def __init__(self, codes: Iterable[EventCode] = ()) -> None:
        """
        :param codes: Optional initial codes, queued in order.
        """
        self._lock = threading.Lock()
        self._queue: Deque[EventCode] = deque(codes)

    def enqueue(self, event_code: EventCode) -> None:
        """
        Add an event code to the back of the queue.

        :param event_code: The code to enqueue.
        """
        with self._lock:
            self._queue.append(event_code)

    def extend(self, event_codes: Iterable[EventCode]) -> None:
        with self._lock:
            self._queue.extend(event_codes)

    def dequeue(self) -> Optional[EventCode]:
        """
        Remove and return the next event code, or None if the queue is empty.
        """
        with self._lock:
            if self._queue:
                return self._queue.popleft()
            return None

    def clear(self) -> None:
        """
        Remove all event codes from the queue.
        """
        with self._lock:
            self._queue.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

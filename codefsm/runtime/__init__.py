"""
Runtime package: controllers that dispatch event codes, and helpers that
feed them streams of codes.
"""

from .controller import Controller, DispatchKind, DispatchResult
from .event_queue import EventQueue
from .executor import Executor

__all__ = ["Controller", "DispatchKind", "DispatchResult", "EventQueue", "Executor"]

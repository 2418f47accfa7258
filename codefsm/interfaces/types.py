# codefsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Dict, NamedTuple

EventCode = str
StateName = str


class ValidationResult(NamedTuple):
    severity: str
    message: str
    context: Dict[str, Any]


# Callback Types
CommandAction = Callable[[], None]

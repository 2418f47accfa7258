# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List, Tuple

import pytest

from codefsm.core.events import Command, Event
from codefsm.runtime.controller import Controller
from codefsm.samples.panel import build_panel_machine


class CommandRecorder:
    """Collects (name, code) pairs in the order commands execute."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, name: str, code: str) -> None:
        self.calls.append((name, code))

    def command(self, name: str, code: str) -> Command:
        return Command(name, code, lambda: self(name, code))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recorder():
    """A fresh CommandRecorder."""
    return CommandRecorder()


@pytest.fixture
def go_event():
    return Event("Go", "GO")


@pytest.fixture
def panel_machine(recorder):
    """The secret panel sample, recording executed commands."""
    return build_panel_machine(emit=recorder)


@pytest.fixture
def panel_controller(panel_machine):
    return Controller(panel_machine)

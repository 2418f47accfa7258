import logging
import unittest
from unittest.mock import Mock

import pytest

from codefsm.core.errors import ConfigurationError
from codefsm.core.events import Command, Event
from codefsm.core.states import State
from codefsm.core.transitions import Transition


class StateTests(unittest.TestCase):
    """Test cases for the State class."""

    def setUp(self):
        self.idle = State("Idle")
        self.active = State("Active")
        self.door_closed = Event("DoorClosed", "DRCL")
        self.door_opened = Event("DoorOpened", "DROP")

    def test_initialization(self):
        self.assertEqual(self.idle.name, "Idle")
        self.assertEqual(self.idle.entry_commands, ())
        self.assertEqual(dict(self.idle.transitions), {})
        self.assertEqual(dict(self.idle.reset_events), {})
        self.assertFalse(self.idle.frozen)

    def test_initialization_empty_name(self):
        with self.assertRaises(ConfigurationError):
            State("")

    def test_add_transition(self):
        transition = self.idle.add_transition(self.door_closed, self.active)
        self.assertIsInstance(transition, Transition)
        self.assertIs(transition.source, self.idle)
        self.assertIs(transition.target, self.active)
        self.assertTrue(self.idle.has_transition("DRCL"))
        self.assertIs(self.idle.target_for("DRCL"), self.active)
        self.assertIs(self.idle.transition_for("DRCL"), transition)

    def test_add_transition_missing_target_fails_fast(self):
        with self.assertRaises(ConfigurationError):
            self.idle.add_transition(self.door_closed, None)  # type: ignore
        self.assertFalse(self.idle.has_transition("DRCL"))

    def test_target_for_unknown_code(self):
        self.assertIsNone(self.idle.target_for("NOPE"))
        self.assertIsNone(self.idle.transition_for("NOPE"))

    def test_duplicate_transition_last_write_wins(self):
        """Test that re-registering a code shadows the earlier transition."""
        other = State("Other")
        self.idle.add_transition(self.door_closed, self.active)
        with self.assertLogs("codefsm.core.states", level=logging.WARNING):
            self.idle.add_transition(Event("AlsoClosed", "DRCL"), other)
        self.assertIs(self.idle.target_for("DRCL"), other)
        self.assertEqual(len(self.idle.transitions), 1)

    def test_add_reset_event(self):
        self.active.add_reset_event(self.door_opened)
        self.assertTrue(self.active.has_reset_event("DROP"))
        self.assertFalse(self.active.has_transition("DROP"))
        self.assertIs(self.active.reset_events["DROP"], self.door_opened)

    def test_add_missing_reset_event(self):
        with self.assertRaises(ConfigurationError):
            self.active.add_reset_event(None)  # type: ignore

    def test_code_in_both_tables_is_tolerated(self):
        self.active.add_transition(self.door_opened, self.idle)
        self.active.add_reset_event(self.door_opened)
        self.assertTrue(self.active.has_transition("DROP"))
        self.assertTrue(self.active.has_reset_event("DROP"))

    def test_entry_commands_run_in_order(self):
        calls = []
        for name in ("c1", "c2", "c3"):
            self.idle.add_entry_command(Command(name, name.upper(), lambda name=name: calls.append(name)))
        self.idle.execute_entry_commands()
        self.idle.execute_entry_commands()
        self.assertEqual(calls, ["c1", "c2", "c3", "c1", "c2", "c3"])

    def test_failing_command_stops_remaining(self):
        """Test that commands after a failing one are not run and earlier ones are not undone."""
        first, last = Mock(), Mock()
        self.idle.add_entry_command(Command("first", "F", first))
        self.idle.add_entry_command(Command("boom", "B", Mock(side_effect=RuntimeError("boom"))))
        self.idle.add_entry_command(Command("last", "L", last))
        with self.assertRaises(RuntimeError):
            self.idle.execute_entry_commands()
        first.assert_called_once()
        last.assert_not_called()

    def test_transitions_view_is_read_only(self):
        self.idle.add_transition(self.door_closed, self.active)
        with self.assertRaises(TypeError):
            self.idle.transitions["X"] = None  # type: ignore


class FrozenStateTests(unittest.TestCase):
    """Test cases for frozen states."""

    def setUp(self):
        self.idle = State("Idle")
        self.active = State("Active")
        self.idle.add_transition(Event("DoorClosed", "DRCL"), self.active)
        self.idle.freeze()

    def test_frozen_flag(self):
        self.assertTrue(self.idle.frozen)

    def test_freeze_twice(self):
        self.idle.freeze()
        self.assertTrue(self.idle.frozen)

    def test_frozen_state_keeps_configuration(self):
        self.assertIs(self.idle.target_for("DRCL"), self.active)

    def test_frozen_state_rejects_transition(self):
        with self.assertRaises(ConfigurationError):
            self.idle.add_transition(Event("LightOn", "LTON"), self.active)

    def test_frozen_state_rejects_reset_event(self):
        with self.assertRaises(ConfigurationError):
            self.idle.add_reset_event(Event("DoorOpened", "DROP"))

    def test_frozen_state_rejects_entry_command(self):
        with self.assertRaises(ConfigurationError):
            self.idle.add_entry_command(Command("LockDoor", "LKDR", Mock()))


@pytest.mark.parametrize("code", ["DRCL", "drcl", " DRCL", "DRCL "])
def test_codes_match_exactly(code):
    """Only exact code equality matches a transition."""
    idle, active = State("Idle"), State("Active")
    idle.add_transition(Event("DoorClosed", "DRCL"), active)
    assert idle.has_transition(code) == (code == "DRCL")

"""Unit tests for the Transition class."""

import unittest

from codefsm.core.errors import ConfigurationError
from codefsm.core.events import Event
from codefsm.core.states import State
from codefsm.core.transitions import Transition


class TestTransition(unittest.TestCase):
    """Test cases for the Transition class."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.source = State("source")
        self.target = State("target")
        self.event = Event("Go", "GO")

    def test_transition_creation(self):
        transition = Transition(self.source, self.event, self.target)
        self.assertIs(transition.source, self.source)
        self.assertIs(transition.trigger, self.event)
        self.assertIs(transition.target, self.target)
        self.assertEqual(transition.event_code, "GO")

    def test_transition_validation(self):
        """Test transition validation rules."""
        with self.assertRaises(ConfigurationError):
            Transition(None, self.event, self.target)  # type: ignore
        with self.assertRaises(ConfigurationError):
            Transition(self.source, self.event, None)  # type: ignore
        with self.assertRaises(ConfigurationError):
            Transition(self.source, None, self.target)  # type: ignore

    def test_transition_is_read_only(self):
        transition = Transition(self.source, self.event, self.target)
        with self.assertRaises(AttributeError):
            transition.target = self.source  # type: ignore
        with self.assertRaises(AttributeError):
            transition.extra = 1  # type: ignore

    def test_self_transition(self):
        transition = Transition(self.source, self.event, self.source)
        self.assertIs(transition.source, transition.target)

    def test_repr(self):
        self.assertEqual(repr(Transition(self.source, self.event, self.target)), "Transition('source' -GO-> 'target')")

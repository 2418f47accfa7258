# codefsm/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from codefsm.core.errors import ValidationError
from codefsm.interfaces.types import ValidationResult

if TYPE_CHECKING:
    from codefsm.core.state_machine import StateMachine
    from codefsm.core.states import State

WARNING = "warning"


class Validator:
    """
    Performs an optional analysis of a state machine definition. Dispatch never
    depends on it: every finding describes a graph the engine still runs, but
    one that probably does not behave as its author intended.
    """

    def __init__(self) -> None:
        """
        Initialize the validator with the default rule set.
        """
        self._rules = _DefaultValidationRules

    def validate_state_machine(
        self, machine: "StateMachine", declared: Optional[Iterable["State"]] = None
    ) -> List[ValidationResult]:
        """
        Collect findings for the machine.

        :param machine: The state machine to analyse.
        :param declared: Every state the caller created, if known. Only used to
            report declared states the start state cannot reach.
        :return: A list of findings, empty when nothing looks wrong.
        """
        results: List[ValidationResult] = []
        if declared is not None:
            results.extend(self._rules.unreachable_states(machine, declared))
        results.extend(self._rules.overlapping_codes(machine))
        results.extend(self._rules.duplicate_state_names(machine))
        results.extend(self._rules.conflicting_event_names(machine))
        return results

    def check(self, machine: "StateMachine", declared: Optional[Iterable["State"]] = None) -> None:
        """
        Like validate_state_machine, but raise instead of returning findings.

        :raises ValidationError: If any finding is reported.
        """
        results = self.validate_state_machine(machine, declared)
        if results:
            raise ValidationError("\n".join(result.message for result in results))


class _DefaultValidationRules:
    """
    Built-in rules. Each returns a list of findings for one kind of problem.
    """

    @staticmethod
    def unreachable_states(machine: "StateMachine", declared: Iterable["State"]) -> List[ValidationResult]:
        reachable = set(machine.states)
        return [
            ValidationResult(
                WARNING,
                f"State {state.name} is not reachable from start state {machine.start.name}.",
                {"state": state.name},
            )
            for state in declared
            if state not in reachable
        ]

    @staticmethod
    def overlapping_codes(machine: "StateMachine") -> List[ValidationResult]:
        results = []
        for state in machine.states:
            for code in state.transitions:
                if state.has_reset_event(code):
                    results.append(
                        ValidationResult(
                            WARNING,
                            f"State {state.name} registers {code} as both a transition and a reset event; "
                            "the transition takes precedence.",
                            {"state": state.name, "code": code},
                        )
                    )
        return results

    @staticmethod
    def duplicate_state_names(machine: "StateMachine") -> List[ValidationResult]:
        seen: Dict[str, int] = {}
        for state in machine.states:
            seen[state.name] = seen.get(state.name, 0) + 1
        return [
            ValidationResult(WARNING, f"{count} reachable states are named {name}.", {"state": name})
            for name, count in seen.items()
            if count > 1
        ]

    @staticmethod
    def conflicting_event_names(machine: "StateMachine") -> List[ValidationResult]:
        names_by_code: Dict[str, set] = {}
        for state in machine.states:
            for code, transition in state.transitions.items():
                names_by_code.setdefault(code, set()).add(transition.trigger.name)
            for code, event in state.reset_events.items():
                names_by_code.setdefault(code, set()).add(event.name)
        return [
            ValidationResult(
                WARNING,
                f"Event code {code} is shared by events {sorted(names)}.",
                {"code": code, "names": sorted(names)},
            )
            for code, names in names_by_code.items()
            if len(names) > 1
        ]

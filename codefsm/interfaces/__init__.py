from codefsm.interfaces.types import CommandAction, EventCode, StateName, ValidationResult

__all__ = ["CommandAction", "EventCode", "StateName", "ValidationResult"]

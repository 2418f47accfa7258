# codefsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class FSMError(Exception):
    """
    Base exception class for errors within the state machine library.
    """


class ConfigurationError(FSMError):
    """
    Raised when a state machine definition is built in violation of its contract,
    such as a missing target state or a mutation of a frozen state.
    """


class StateNotFoundError(FSMError):
    """
    Raised when a requested state does not exist in the machine or builder.
    """


class ValidationError(FSMError):
    """
    Raised when strict validation detects configuration problems.
    """

import pytest

from codefsm.core.errors import ConfigurationError, FSMError, StateNotFoundError, ValidationError


@pytest.mark.parametrize("error_class", [ConfigurationError, StateNotFoundError, ValidationError])
def test_errors_share_a_base(error_class):
    error = error_class("message")
    assert isinstance(error, FSMError)
    assert str(error) == "message"


def test_catching_base_class():
    with pytest.raises(FSMError):
        raise StateNotFoundError("missing")

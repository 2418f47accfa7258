from unittest.mock import Mock

import codefsm
from codefsm import DispatchKind, new_command, new_controller, new_event, new_state, new_state_machine


def test_functional_api_builds_a_working_machine():
    lock = Mock()
    idle, active = new_state("Idle"), new_state("Active")
    idle.add_entry_command(new_command("LockPanel", "LKPL", lock))
    active.add_reset_event(new_event("DoorOpened", "DROP"))
    idle.add_transition(new_event("DoorClosed", "DRCL"), active)

    controller = new_controller(new_state_machine(idle))
    assert controller.handle("DRCL").kind is DispatchKind.TRANSITIONED
    assert controller.handle("DROP").kind is DispatchKind.RESET
    lock.assert_called_once_with()


def test_new_controller_accepts_hooks():
    hook = Mock()
    controller = new_controller(new_state_machine(new_state("Idle")), hooks=[hook])
    controller.handle("NOPE")
    hook.on_dispatch.assert_called_once()


def test_package_exports():
    assert codefsm.__version__ == "0.1.0"
    for name in codefsm.__all__:
        assert hasattr(codefsm, name)

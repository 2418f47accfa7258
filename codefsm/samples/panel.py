# codefsm/samples/panel.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Secret panel controller: the panel unlocks once the door is closed and both
the light is switched on and the drawer is opened, in either order. Opening
the door aborts back to Idle; closing the panel re-arms it.
"""

from typing import Callable, Optional, Tuple

from codefsm.core.events import Command, Event
from codefsm.core.state_machine import StateMachine, StateMachineBuilder

CommandEmitter = Callable[[str, str], None]

IDLE = "Idle"
ACTIVE = "Active"
WAIT_FOR_DRAWER = "WaitForDrawer"
WAIT_FOR_LIGHT = "WaitForLight"
UNLOCKED_PANEL = "UnlockedPanel"

DOOR_CLOSED = Event("DoorClosed", "DRCL")
LIGHT_ON = Event("LightOn", "LTON")
DRAWER_OPENED = Event("DrawerOpened", "DWOP")
PANEL_CLOSED = Event("PanelClosed", "PNCL")
DOOR_OPENED = Event("DoorOpened", "DROP")

# Driver sequence: two unlock paths, each re-armed by PNCL, then a rejected
# code in Idle and an abort from Active.
DEMO_SEQUENCE: Tuple[str, ...] = (
    "DRCL", "LTON", "DWOP", "PNCL",
    "DRCL", "DWOP", "LTON", "PNCL",
    "DWOP",
    "DRCL", "DROP",
)


def _ignore(name: str, code: str) -> None:
    pass


def _command(name: str, code: str, emit: CommandEmitter) -> Command:
    return Command(name, code, lambda: emit(name, code))


def build_panel_machine(emit: Optional[CommandEmitter] = None, strict: bool = False) -> StateMachine:
    """
    Build the panel state machine.

    :param emit: Called with (name, code) whenever a command executes.
    :param strict: Passed to StateMachineBuilder.build.
    """
    emit = emit or _ignore
    builder = StateMachineBuilder()
    builder.add_state(
        IDLE,
        entry_commands=[_command("UnlockDoor", "ULDR", emit), _command("LockPanel", "LKPL", emit)],
    )
    builder.add_state(ACTIVE)
    builder.add_state(WAIT_FOR_DRAWER)
    builder.add_state(WAIT_FOR_LIGHT)
    builder.add_state(
        UNLOCKED_PANEL,
        entry_commands=[_command("UnlockPanel", "ULPL", emit), _command("LockDoor", "LKDR", emit)],
    )

    builder.add_transition(IDLE, DOOR_CLOSED, ACTIVE)
    builder.add_transition(ACTIVE, LIGHT_ON, WAIT_FOR_DRAWER)
    builder.add_transition(ACTIVE, DRAWER_OPENED, WAIT_FOR_LIGHT)
    builder.add_transition(WAIT_FOR_DRAWER, DRAWER_OPENED, UNLOCKED_PANEL)
    builder.add_transition(WAIT_FOR_LIGHT, LIGHT_ON, UNLOCKED_PANEL)

    builder.add_global_reset_event(DOOR_OPENED)
    builder.add_reset_event(PANEL_CLOSED, UNLOCKED_PANEL)

    builder.set_start(IDLE)
    return builder.build(strict=strict)

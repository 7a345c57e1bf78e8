"""undo-fsm - Finite state machine with undo/redo history."""
from __future__ import annotations

from undo_fsm.machine import StateMachine
from undo_fsm.types import (
    NORMAL_STATE,
    InvalidStateError,
    MachineConfig,
    StateDef,
    UnhandledEventError,
)

__all__ = [
    "StateMachine",
    "MachineConfig",
    "StateDef",
    "NORMAL_STATE",
    "InvalidStateError",
    "UnhandledEventError",
]

"""StateMachine - event-driven transitions with undo/redo history."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from undo_fsm.types import (
    NORMAL_STATE,
    InvalidStateError,
    MachineConfig,
    StateDef,
    UnhandledEventError,
)

logger = logging.getLogger(__name__)

ConfigArg = MachineConfig | Mapping[str, Any]


class StateMachine:
    """Tracks one current state and a linear history of visited states.

    Every forward move (``change_state``, ``trigger``, ``reset``) appends to
    the history and closes the redo window. ``undo`` walks the history back
    and opens the window; ``redo`` replays undone states while it is open.

    The history is seeded with ``"normal"`` whatever the initial state is,
    and ``reset`` always targets ``"normal"``.

    Construction does not validate the configuration unless ``strict`` is
    set; otherwise unknown names surface as errors when first used.
    """

    def __init__(self, config: ConfigArg, strict: bool = False) -> None:
        if not isinstance(config, MachineConfig):
            config = MachineConfig.from_dict(config)
        if strict:
            config.validate()
        self._config = config
        self._states: Mapping[str, StateDef] = config.states
        self._current: StateDef | None = self._states.get(config.initial)
        self._history: list[str] = [NORMAL_STATE]
        self._redo: list[str] = []
        self._step: int = 1
        self._redo_open: bool = False

    def __repr__(self) -> str:
        return f"StateMachine(state={self.get_state()!r}, step={self._step})"

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def redo_stack(self) -> tuple[str, ...]:
        return tuple(self._redo)

    @property
    def step(self) -> int:
        return self._step

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 1

    @property
    def can_redo(self) -> bool:
        return self._redo_open and bool(self._redo)

    def get_state(self) -> str | None:
        """Name of the active state, or None if it is not a configured one."""
        for name, definition in self._states.items():
            if definition is self._current:
                return name
        return None

    def change_state(self, name: str) -> None:
        """Enter ``name``. Raises InvalidStateError if it is not configured."""
        if name not in self._states:
            logger.debug("Rejected change to unknown state %r", name)
            raise InvalidStateError(name, f"Unknown state {name!r}")
        previous = self.get_state()
        self._current = self._states[name]
        self._history.append(self.get_state())
        self._step += 1
        self._redo_open = False
        logger.debug("State %r -> %r (step %d)", previous, name, self._step)

    def trigger(self, event: str) -> None:
        """Follow the current state's transition for ``event``.

        Raises UnhandledEventError if the current state has none, and
        InvalidStateError if the transition targets an unknown state.
        """
        target = self._current.target(event) if self._current is not None else None
        if target is None:
            state = self.get_state()
            logger.debug("Event %r not handled in state %r", event, state)
            raise UnhandledEventError(
                event, state, f"State {state!r} has no transition for event {event!r}"
            )
        self.change_state(target)
        self._redo_open = False

    def reset(self) -> None:
        """Enter the ``"normal"`` state."""
        logger.debug("Resetting to %r", NORMAL_STATE)
        self.change_state(NORMAL_STATE)

    def get_states(self, event: str | None = None) -> list[str]:
        """All state names, or only those with a transition for ``event``."""
        if not event:
            return list(self._states)
        return [
            name for name, definition in self._states.items()
            if event in definition.transitions
        ]

    def undo(self) -> bool:
        """Step back one history entry. Returns False if there is none."""
        if len(self._history) <= 1:
            return False
        undone = self._history.pop()
        self._redo.append(undone)
        self._current = self._states.get(self._history[-1])
        self._step -= 1
        self._redo_open = True
        logger.debug("Undid %r, now in %r", undone, self._history[-1])
        return True

    def redo(self) -> bool:
        """Replay the last undone state. Returns False if redo is unavailable."""
        if not (self._redo and self._redo_open):
            return False
        redone = self._redo.pop()
        self._history.append(redone)
        self._current = self._states.get(self._history[-1])
        self._step += 1
        logger.debug("Redid %r", redone)
        return True

    def clear_history(self) -> None:
        """Forget history and redo entries. The current state is kept."""
        self._history = []
        self._redo = []
        self._step = 0
        self._redo_open = False
        logger.debug("History cleared in state %r", self.get_state())

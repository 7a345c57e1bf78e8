"""State definitions, machine configuration and errors."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

# History seed and reset target, independent of the configured initial state.
NORMAL_STATE = "normal"


class InvalidStateError(KeyError):
    """Raised when a state name is not present in the configuration."""

    def __init__(self, state: str, message: str) -> None:
        self.state = state
        super().__init__(message)


class UnhandledEventError(KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, event: str, state: str | None, message: str) -> None:
        self.event = event
        self.state = state
        super().__init__(message)


@dataclass(frozen=True)
class StateDef:
    """Immutable state definition.

    Attributes:
        transitions: Maps event names to destination state names.
    """

    transitions: Mapping[str, str] = field(default_factory=dict)

    def target(self, event: str) -> str | None:
        return self.transitions.get(event)


@dataclass(frozen=True)
class MachineConfig:
    """Immutable machine configuration.

    The machine never mutates it, so one config may back several machines.

    Attributes:
        states: State name to definition, in declaration order.
        initial: Name of the state the machine starts in.
    """

    states: Mapping[str, StateDef]
    initial: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MachineConfig:
        """Build from ``{"states": {name: {"transitions": {...}}}, "initial": name}``.

        State entries that are already StateDef instances are kept as-is.
        """
        states = {
            name: entry if isinstance(entry, StateDef)
            else StateDef(transitions=dict(entry.get("transitions", {})))
            for name, entry in data["states"].items()
        }
        return cls(states=states, initial=data["initial"])

    def validate(self) -> None:
        """Check that the initial state and every transition target exist.

        Raises InvalidStateError on the first unknown name.
        """
        if self.initial not in self.states:
            raise InvalidStateError(
                self.initial, f"Initial state {self.initial!r} is not defined"
            )
        for name, definition in self.states.items():
            for event, target in definition.transitions.items():
                if target not in self.states:
                    raise InvalidStateError(
                        target,
                        f"Transition {name!r} --{event}--> {target!r} "
                        f"targets an undefined state",
                    )

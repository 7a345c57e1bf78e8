"""Integration scenarios for undo-fsm."""
import pytest
from undo_fsm import StateMachine, UnhandledEventError


CONFIG = {
    "states": {
        "normal": {"transitions": {"go": "running"}},
        "running": {"transitions": {"stop": "normal"}},
    },
    "initial": "normal",
}


class TestScenarios:
    """End-to-end sequences over a two-state machine."""

    def test_go_stop_then_undo_to_seed(self):
        """Transitions forward, then undo back until history is exhausted."""
        # Arrange
        fsm = StateMachine(CONFIG)
        assert fsm.get_state() == "normal"

        # Act & Assert
        fsm.trigger("go")
        assert fsm.get_state() == "running"
        fsm.trigger("stop")
        assert fsm.get_state() == "normal"

        assert fsm.undo() is True
        assert fsm.get_state() == "running"
        assert fsm.undo() is True
        assert fsm.get_state() == "normal"
        assert fsm.undo() is False

    def test_undo_redo_restores_forward_step(self):
        """go, undo, redo ends in 'running'."""
        # Arrange
        fsm = StateMachine(CONFIG)

        # Act
        fsm.trigger("go")
        fsm.undo()
        fsm.redo()

        # Assert
        assert fsm.get_state() == "running"

    def test_new_transition_closes_redo_window(self):
        """go, undo, go again: redo is no longer available."""
        # Arrange
        fsm = StateMachine(CONFIG)

        # Act
        fsm.trigger("go")
        fsm.undo()
        fsm.trigger("go")

        # Assert
        assert fsm.redo() is False
        assert fsm.get_state() == "running"

    def test_forward_move_keeps_undone_entries_for_later(self):
        """go, undo, enter 'running', undo: both undone entries replay."""
        # Arrange
        fsm = StateMachine(CONFIG)
        fsm.trigger("go")
        fsm.undo()
        fsm.change_state("running")

        # Act
        fsm.undo()

        # Assert
        assert fsm.redo() is True
        assert fsm.redo() is True
        assert fsm.history == ("normal", "running", "running")

    def test_unhandled_event_mid_sequence(self):
        """A rejected event does not disturb history or redo."""
        # Arrange
        fsm = StateMachine(CONFIG)
        fsm.trigger("go")
        fsm.undo()

        # Act
        with pytest.raises(UnhandledEventError):
            fsm.trigger("stop")

        # Assert - redo still available
        assert fsm.redo() is True
        assert fsm.get_state() == "running"

    def test_long_session(self):
        """Mixed operations keep history and current state in step."""
        # Arrange
        fsm = StateMachine(CONFIG)
        for _ in range(5):
            fsm.trigger("go")
            fsm.trigger("stop")

        # Act & Assert
        assert len(fsm.history) == 11
        assert fsm.step == 11

        for _ in range(3):
            assert fsm.undo() is True
        assert fsm.get_state() == "running"
        assert fsm.history[-1] == fsm.get_state()

        for _ in range(3):
            assert fsm.redo() is True
        assert fsm.get_state() == "normal"
        assert fsm.history[-1] == fsm.get_state()
        assert fsm.redo() is False

        fsm.reset()
        assert fsm.history[-2:] == ("normal", "normal")

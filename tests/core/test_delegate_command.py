"""
Unit Tests for DelegateCommand.

Tests for:
- can_execute / execute semantics
- can-execute-changed listeners
- Object-based entry points used by bindings
"""
import pytest
from unittest.mock import MagicMock

from pixellab.core.commands import DelegateCommand, ICommand


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:
    """Tests for DelegateCommand construction."""

    def test_is_icommand(self):
        assert isinstance(DelegateCommand(lambda: None), ICommand)

    def test_execute_is_required(self):
        with pytest.raises(TypeError):
            DelegateCommand(None)

    def test_predicate_must_be_callable(self):
        with pytest.raises(TypeError):
            DelegateCommand(lambda: None, True)

    def test_predicate_is_read_only(self):
        predicate = MagicMock(return_value=True)
        command = DelegateCommand(lambda: None, predicate)

        assert command.predicate is predicate
        with pytest.raises(AttributeError):
            command.predicate = lambda: False


# =============================================================================
# can_execute / execute
# =============================================================================

class TestCanExecute:
    """Tests for can_execute()."""

    def test_without_predicate_is_true(self):
        command = DelegateCommand(lambda: None)
        assert command.can_execute() is True

    def test_uses_predicate_result(self):
        state = {"enabled": False}
        command = DelegateCommand(lambda: None, lambda: state["enabled"])

        assert command.can_execute() is False
        state["enabled"] = True
        assert command.can_execute() is True

    def test_is_repeatable(self):
        command = DelegateCommand(lambda: None, lambda: False)
        assert [command.can_execute() for _ in range(3)] == [False, False, False]

    def test_does_not_run_action(self):
        action = MagicMock()
        DelegateCommand(action).can_execute()
        action.assert_not_called()

    def test_predicate_error_propagates(self):
        command = DelegateCommand(lambda: None, MagicMock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError, match="boom"):
            command.can_execute()


class TestExecute:
    """Tests for execute()."""

    def test_runs_action_once(self):
        action = MagicMock()
        DelegateCommand(action).execute()
        action.assert_called_once_with()

    def test_ignores_predicate(self):
        action = MagicMock()
        predicate = MagicMock(return_value=False)
        command = DelegateCommand(action, predicate)

        command.execute()

        action.assert_called_once_with()
        predicate.assert_not_called()

    def test_action_error_propagates(self):
        command = DelegateCommand(MagicMock(side_effect=ValueError("bad")))
        with pytest.raises(ValueError, match="bad"):
            command.execute()


# =============================================================================
# Change notification
# =============================================================================

class TestCanExecuteChanged:
    """Tests for change listeners."""

    def test_notify_calls_listeners_in_order(self):
        command = DelegateCommand(lambda: None)
        calls = []
        command.add_can_execute_changed(lambda: calls.append(1))
        command.add_can_execute_changed(lambda: calls.append(2))

        command.notify_can_execute_changed()

        assert calls == [1, 2]

    def test_listeners_get_no_arguments(self):
        command = DelegateCommand(lambda: None)
        listener = MagicMock()
        command.add_can_execute_changed(listener)

        command.notify_can_execute_changed()

        listener.assert_called_once_with()

    def test_removed_listener_not_called(self):
        command = DelegateCommand(lambda: None)
        kept = MagicMock()
        removed = MagicMock()
        command.add_can_execute_changed(kept)
        command.add_can_execute_changed(removed)
        command.remove_can_execute_changed(removed)

        command.notify_can_execute_changed()

        kept.assert_called_once_with()
        removed.assert_not_called()

    def test_remove_unknown_listener(self):
        command = DelegateCommand(lambda: None)
        command.remove_can_execute_changed(MagicMock())

    def test_clear_releases_all_listeners(self):
        command = DelegateCommand(lambda: None)
        listeners = [MagicMock(), MagicMock()]
        for listener in listeners:
            command.add_can_execute_changed(listener)

        command.clear_can_execute_changed()
        command.notify_can_execute_changed()

        for listener in listeners:
            listener.assert_not_called()
        assert len(command.can_execute_changed) == 0

    def test_signal_is_per_instance(self):
        first = DelegateCommand(lambda: None)
        second = DelegateCommand(lambda: None)
        listener = MagicMock()
        first.can_execute_changed.connect(listener)

        second.notify_can_execute_changed()

        listener.assert_not_called()

    def test_binding_requeries_after_notify(self):
        state = {"dirty": False}
        command = DelegateCommand(lambda: None, lambda: state["dirty"])
        enabled = []
        command.add_can_execute_changed(lambda: enabled.append(command.can_execute()))

        state["dirty"] = True
        command.notify_can_execute_changed()

        assert enabled == [True]


# =============================================================================
# Object-based entry points
# =============================================================================

class TestObjectEntryPoints:
    """Tests for can_execute_object / execute_object."""

    def test_parameter_is_ignored(self):
        action = MagicMock()
        command = DelegateCommand(action, lambda: True)

        assert command.can_execute_object("anything") is True
        command.execute_object(42)

        action.assert_called_once_with()

    def test_defaults_to_no_parameter(self):
        action = MagicMock()
        command = DelegateCommand(action, lambda: False)

        assert command.can_execute_object() is False
        command.execute_object()
        action.assert_called_once_with()

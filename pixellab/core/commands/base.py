"""
Command Pattern - Base Interfaces.

Provides:
- ICommand: Object-based command interface consumed by UI bindings
- InvalidArgumentError: Raised when a command receives a parameter of the wrong type
"""
from abc import ABC, abstractmethod
from typing import Any, Callable

from pixellab.core.events import Signal


class InvalidArgumentError(TypeError):
    """
    Raised when a command parameter is incompatible with the command's type.

    Attributes:
        expected_type: Readable name of the type the command accepts.
        parameter_name: Name of the offending argument.
    """

    def __init__(self, expected_type: str, parameter_name: str = "parameter"):
        super().__init__(f"Parameter is not of type {expected_type}")
        self.expected_type = expected_type
        self.parameter_name = parameter_name


class ICommand(ABC):
    """
    Command as seen by a generic (non-typed) caller such as a button binding.

    The binding layer queries `can_execute_object` to enable or disable the
    bound widget, calls `execute_object` when the widget is triggered, and
    listens to `can_execute_changed` to know when to query again.

    Example:
        def bind_button(button, command: ICommand, parameter=None):
            refresh = lambda: button.setEnabled(command.can_execute_object(parameter))
            command.add_can_execute_changed(refresh)
            button.clicked.connect(lambda: command.execute_object(parameter))
            refresh()
    """

    def __init__(self):
        self.can_execute_changed = Signal(f"{self.__class__.__name__}.CanExecuteChanged")

    @abstractmethod
    def can_execute_object(self, parameter: Any = None) -> bool:
        """Return whether the command can run with the given parameter."""
        pass

    @abstractmethod
    def execute_object(self, parameter: Any = None) -> None:
        """Run the command with the given parameter."""
        pass

    def add_can_execute_changed(self, callback: Callable[[], Any]) -> None:
        """Register a zero-argument callback for executability changes."""
        self.can_execute_changed.connect(callback)

    def remove_can_execute_changed(self, callback: Callable[[], Any]) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        self.can_execute_changed.disconnect(callback)

    def clear_can_execute_changed(self) -> None:
        """Release every registered listener, e.g. when the bound widget is destroyed."""
        self.can_execute_changed.disconnect_all()

    def notify_can_execute_changed(self) -> None:
        """
        Tell listeners that `can_execute` may now return a different result.

        Call this after mutating any state the predicate depends on.
        Listeners run synchronously, in registration order.
        """
        self.can_execute_changed.emit()

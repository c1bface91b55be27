"""
Delegate Commands - Commands built from plain callables.

Lets a ViewModel expose actions to the View without writing a command
class per action:

    class EditorViewModel:
        def __init__(self):
            self.save = DelegateCommand(self._save, lambda: self.is_dirty)
            self.open_recent = TypedDelegateCommand(str, self._open, os.path.exists)

        def mark_dirty(self):
            self.is_dirty = True
            self.save.notify_can_execute_changed()

Neither `execute` nor `execute_object` checks the predicate first; the
caller decides whether to ask `can_execute`.
"""
from typing import Any, Callable, Generic, Optional, TypeVar

from loguru import logger

from pixellab.core.commands.base import ICommand, InvalidArgumentError
from pixellab.core.commands.typecheck import describe, ensure_checkable, is_assignable
from pixellab.core.config import CommandSettings

T = TypeVar('T')


def _require_callables(execute: Any, can_execute: Any) -> None:
    if not callable(execute):
        raise TypeError(f"execute must be callable, got {execute!r}")
    if can_execute is not None and not callable(can_execute):
        raise TypeError(f"can_execute must be callable or None, got {can_execute!r}")


class DelegateCommand(ICommand):
    """
    Parameterless command.

    Args:
        execute: The execution logic.
        can_execute: The execution status logic. None means always executable.
    """

    def __init__(self, execute: Callable[[], Any],
                 can_execute: Optional[Callable[[], bool]] = None):
        _require_callables(execute, can_execute)
        super().__init__()
        self._execute = execute
        self._can_execute = can_execute

    @property
    def predicate(self) -> Optional[Callable[[], bool]]:
        return self._can_execute

    def can_execute(self) -> bool:
        return self._can_execute is None or bool(self._can_execute())

    def execute(self) -> None:
        self._execute()

    def can_execute_object(self, parameter: Any = None) -> bool:
        # Parameters are not supported; bindings may still pass one.
        return self.can_execute()

    def execute_object(self, parameter: Any = None) -> None:
        self.execute()


class TypedDelegateCommand(ICommand, Generic[T]):
    """
    Command taking a single parameter of a declared type.

    `can_execute` and `execute` trust their argument. The object-based
    entry points used by bindings check it against `parameter_type` first:
    a mismatch makes `can_execute_object` return False (with a debug trace)
    and makes `execute_object` raise InvalidArgumentError.

    Args:
        parameter_type: Runtime type tag for T, e.g. `int`, `Optional[str]`, `Any`.
        execute: The execution logic.
        can_execute: The execution status logic. None means always executable.
        settings: Command settings; defaults to `CommandSettings()`.

    Raises:
        TypeError: If a callable is missing or `parameter_type` can't be checked at runtime.
    """

    def __init__(self, parameter_type: Any, execute: Callable[[T], Any],
                 can_execute: Optional[Callable[[T], bool]] = None,
                 settings: Optional[CommandSettings] = None):
        _require_callables(execute, can_execute)
        ensure_checkable(parameter_type)
        super().__init__()
        self._parameter_type = parameter_type
        self._execute = execute
        self._can_execute = can_execute
        self._settings = settings if settings is not None else CommandSettings()

    @property
    def parameter_type(self) -> Any:
        return self._parameter_type

    @property
    def predicate(self) -> Optional[Callable[[T], bool]]:
        return self._can_execute

    def can_execute(self, parameter: T) -> bool:
        return self._can_execute is None or bool(self._can_execute(parameter))

    def execute(self, parameter: T) -> None:
        self._execute(parameter)

    def accepts(self, parameter: Any) -> bool:
        """Return True if `parameter` is a valid value for this command's type."""
        return is_assignable(parameter, self._parameter_type)

    def can_execute_object(self, parameter: Any = None) -> bool:
        if not self.accepts(parameter):
            if self._settings.trace_type_mismatch:
                logger.debug(f"Parameter is not of type {describe(self._parameter_type)}: {parameter!r}")
            return False
        return self.can_execute(parameter)

    def execute_object(self, parameter: Any = None) -> None:
        if not self.accepts(parameter):
            raise InvalidArgumentError(describe(self._parameter_type))
        self.execute(parameter)

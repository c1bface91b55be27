"""
Command System.

Provides Command pattern infrastructure for UI binding:
- ICommand: Object-based interface used by bindings
- DelegateCommand: Parameterless command from callables
- TypedDelegateCommand: Single-parameter command with runtime type checks
- InvalidArgumentError: Parameter type mismatch on execute
"""
from .base import ICommand, InvalidArgumentError
from .delegate import DelegateCommand, TypedDelegateCommand

__all__ = [
    # Base interfaces
    "ICommand",
    "InvalidArgumentError",
    # Implementations
    "DelegateCommand",
    "TypedDelegateCommand",
]

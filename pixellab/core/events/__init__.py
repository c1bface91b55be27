"""
Event System - Synchronous Notifications.

Provides:
- Signal: Simple observer pattern for sync notifications (command state, config changes)

Usage:
    from pixellab.core.events import Signal

    changed = Signal("CanExecuteChanged")
    changed.connect(on_changed)
    changed.emit()
"""
from .observer import Signal


__all__ = ["Signal"]

from loguru import logger
from typing import Callable, List


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Equivalent to Qt's Signal or C#'s event.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def connect(self, callback: Callable):
        """Connect a callback function to this signal. Connecting twice is a no-op."""
        if not callable(callback):
            raise TypeError(f"Signal '{self.name}' expects a callable, got {callback!r}")
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def disconnect_all(self):
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        """
        Broadcast arguments to all subscribers synchronously, in connection order.

        Iterates over a snapshot: callbacks connected or disconnected while
        emitting only take part in the next emit.
        """
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")

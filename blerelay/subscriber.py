"""Per-handle notification callbacks shared between threads."""

from __future__ import annotations

import threading
from typing import Callable, Optional

Callback = Callable[[bytes, Optional[Exception]], None]


class InvalidLengthError(ValueError):
    """An attribute response had an unexpected length."""

    def __init__(self, message: str = "invalid length") -> None:
        super().__init__(message)


class Subscriber:
    """Thread-safe map from attribute handles to notification callbacks."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callback] = {}
        self._lock = threading.Lock()

    def subscribe(self, handle: int, callback: Callback) -> None:
        """Register ``callback`` for ``handle``, replacing any earlier one."""
        with self._lock:
            self._callbacks[handle] = callback

    def unsubscribe(self, handle: int) -> None:
        """Drop the callback for ``handle``, if any."""
        with self._lock:
            self._callbacks.pop(handle, None)

    def lookup(self, handle: int) -> Optional[Callback]:
        """Return the callback for ``handle`` or None."""
        with self._lock:
            return self._callbacks.get(handle)
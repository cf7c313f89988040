"""Language change notification.

Callbacks are kept in registration order and invoked synchronously on the
thread that changed the language. A callback that raises is logged and the
remaining callbacks still run.
"""

import itertools
import threading
from typing import Callable, Dict, List

from lingua.i18n.models import CallbackHandle
from lingua.logging import get_module_logger

logger = get_module_logger()

ChangeCallback = Callable[[str], None]


class ChangeNotifier:
    """Ordered registry of language change callbacks."""

    def __init__(self) -> None:
        self._callbacks: Dict[int, ChangeCallback] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._callbacks)

    def register(self, callback: ChangeCallback) -> CallbackHandle:
        """Append a callback.

        Returns:
            Handle accepted by unregister().
        """
        with self._lock:
            handle = CallbackHandle(next(self._ids))
            self._callbacks[handle.callback_id] = callback
        logger.debug(
            "registered_language_change_callback",
            callback=getattr(callback, "__name__", "unknown"),
            total_callbacks=len(self._callbacks),
        )
        return handle

    def unregister(self, handle: CallbackHandle) -> bool:
        """Remove a callback by handle.

        Returns:
            True if a callback was removed, False if the handle was unknown.
        """
        with self._lock:
            return self._callbacks.pop(handle.callback_id, None) is not None

    def snapshot(self) -> List[ChangeCallback]:
        with self._lock:
            return list(self._callbacks.values())

    def notify(self, language: str) -> None:
        """Invoke every callback with the new language code, in order."""
        callbacks = self.snapshot()
        for callback in callbacks:
            try:
                callback(language)
            except Exception as e:
                logger.error(
                    "language_change_callback_failed",
                    callback=getattr(callback, "__name__", "unknown"),
                    language=language,
                    error=str(e),
                )

"""Observable cell holding the current resolver snapshot.

Subscribers are called synchronously, in registration order, whenever the
held reference is replaced by a different object. A subscriber that raises
is logged and skipped; the remaining subscribers still run.
"""

from typing import Callable, Generic, List, TypeVar

from i18n_provider.core.logging import get_module_logger

logger = get_module_logger()

T = TypeVar("T")

Subscriber = Callable[[T], None]


class ObservableCell(Generic[T]):
    """A mutable reference that notifies subscribers when replaced."""

    def __init__(self, value: T):
        self._value = value
        self._subscribers: List[Subscriber] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Replace the held value.

        Change is detected by identity: setting the same object again is a
        no-op and notifies nobody.

        Args:
            value: New value to hold.

        Returns:
            True if subscribers were notified.
        """
        if value is self._value:
            return False
        self._value = value
        self._notify(value)
        return True

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a subscriber.

        Args:
            callback: Called with the new value after each replacement.

        Returns:
            Function that removes this subscriber. Safe to call twice.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def clear(self) -> None:
        """Drop every subscriber."""
        self._subscribers.clear()

    def _notify(self, value: T) -> None:
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception as e:
                logger.error(
                    "subscriber_failed",
                    subscriber=getattr(callback, "__name__", "unknown"),
                    error=str(e),
                )

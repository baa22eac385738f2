"""Minimal observer registry used by the stateful components."""

from collections.abc import Callable
from typing import Any


class ObserverList:
    """Ordered list of callbacks notified synchronously."""

    def __init__(self) -> None:
        self._observers: list[Callable[..., None]] = []

    def add(self, observer: Callable[..., None]) -> Callable[[], None]:
        """Register ``observer``.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)

        def remove() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return remove

    def notify(self, *args: Any) -> None:
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(*args)

    def __len__(self) -> int:
        return len(self._observers)

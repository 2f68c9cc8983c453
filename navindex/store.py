from __future__ import annotations

from typing import Callable, List, Optional

from navindex.logging import LoggerFactory
from navindex.model import NavIndex
from navindex.reducer import update_nav_index

log = LoggerFactory.for_store()

Listener = Callable[[NavIndex], None]


class NavIndexStore:
    """Holds the current navigation index and applies dispatched events."""

    def __init__(self, initial: Optional[NavIndex] = None) -> None:
        self._state: NavIndex = initial if initial is not None else {}
        self._listeners: List[Listener] = []

    @property
    def state(self) -> NavIndex:
        return self._state

    def dispatch(self, event: object) -> NavIndex:
        next_state = update_nav_index(self._state, event)
        if next_state is self._state:
            log.debug(f"Ignored event {type(event).__name__}")
            return next_state
        self._state = next_state
        for listener in list(self._listeners):
            listener(next_state)
        return next_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

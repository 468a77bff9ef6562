"""Event bus for SDK observability."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


@dataclass
class Event:
    event_type: str
    ts: int = 0
    tags: dict[str, str] = field(default_factory=dict)
    payload: dict[str, Any] = field(default_factory=dict)


EventHandler = Callable[[Event], Any]


class EventBus(Protocol):
    def emit(self, event: Event) -> None: ...
    def on(self, event_type: str, handler: EventHandler) -> None: ...
    def off(self, event_type: str, handler: EventHandler) -> None: ...
    def on_all(self, handler: EventHandler) -> None: ...


class InMemoryEventBus:
    """In-memory event bus with per-type and global handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._global_handlers: list[EventHandler] = []
        self._history: list[Event] = []
        self._lock = threading.Lock()

    def emit(self, event: Event) -> None:
        with self._lock:
            self._history.append(event)
            handlers = list(self._global_handlers)
            handlers.extend(self._handlers.get(event.event_type, ()))

        for handler in handlers:
            handler(event)

    def on(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            if event_type in self._handlers:
                try:
                    self._handlers[event_type].remove(handler)
                except ValueError:
                    pass

    def on_all(self, handler: EventHandler) -> None:
        with self._lock:
            self._global_handlers.append(handler)

    @property
    def history(self) -> list[Event]:
        with self._lock:
            return list(self._history)

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

"""Emitter Implementation.

This module provides the ``Emitter`` class that keeps listener registries and
fans emitted events out to them. Dispatch is synchronous: every listener runs
to completion on the caller's stack before the next one starts.

## Key Features

- **Typed Listeners**: Listeners registered per event type, called with the emitted arguments
- **Wildcard Listeners**: Listeners that observe every event as an ``EmittedEvent`` record
- **Snapshot Dispatch**: Subscriptions changed during an emit only apply to later emits
- **Identity Removal**: Unsubscribing removes the first registration of that exact callable
- **Singleton Accessor**: Process-wide instance via ``get_emitter()``

## Advanced Usage

```python
from enum import Enum

from typed_events.emitter import Emitter


class Connection(Enum):
    OPENED = "opened"
    CLOSED = "closed"


emitter: Emitter[Connection] = Emitter()


def on_opened(host: str, port: int) -> None:
    print(f"connected to {host}:{port}")


emitter.subscribe(Connection.OPENED, on_opened)
emitter.emit(Connection.OPENED, "db.local", 5432)
emitter.unsubscribe(Connection.OPENED, on_opened)
```

"""

from collections.abc import Hashable
from contextlib import AbstractContextManager, nullcontext
from functools import lru_cache
from threading import RLock
from typing import Any

from loguru import logger

from .core import EmittedEvent, Listener, WildcardListener, ensure_listener


def _remove_first(listeners: list, listener: Any) -> bool:
    """Remove the first entry that *is* ``listener``; report whether one was found."""
    for index, candidate in enumerate(listeners):
        if candidate is listener:
            del listeners[index]
            return True
    return False


class Emitter[K: Hashable]:
    """In-process publish/subscribe registry.

    The type parameter is the event-type key (``str``, an ``Enum``, a class...).
    Each event type is expected to carry a fixed argument shape agreed between
    the code that emits it and the code that listens to it; the shape is not
    checked at runtime.

    Example:
        ```python
        emitter: Emitter[str] = Emitter()
        emitter.subscribe("error", lambda exc: print(f"failed: {exc}"))
        emitter.emit("error", RuntimeError("boom"))
        ```
    """

    def __init__(self, thread_safe: bool | None = None) -> None:
        """Initialize an empty Emitter.

        Args:
            thread_safe: If True, registry access is serialized with a re-entrant
                         lock. If None (default), uses ``Settings.thread_safe``.
        """
        if thread_safe is None:
            from typed_events.settings import get_settings

            thread_safe = get_settings().thread_safe

        self._listeners: dict[K, list[Listener]] = {}
        self._wildcard_listeners: list[WildcardListener] = []
        self._lock: AbstractContextManager[Any] = RLock() if thread_safe else nullcontext()
        logger.debug(f"Emitter initialized (thread_safe={thread_safe})")

    def subscribe(self, event_type: K, listener: Listener) -> None:
        """Register ``listener`` to be called whenever ``event_type`` is emitted.

        The same listener may be registered more than once; it is then called
        once per registration.

        Raises:
            ListenerRegistrationError: If listener is not callable
        """
        ensure_listener(listener)
        with self._lock:
            self._listeners.setdefault(event_type, []).append(listener)
        logger.debug(f"Subscribed listener for {event_type!r}: {listener}")

    def unsubscribe(self, event_type: K, listener: Listener) -> None:
        """Remove the first registration of ``listener`` for ``event_type``.

        Unknown event types and listeners that are not registered are ignored.
        """
        with self._lock:
            listeners = self._listeners.get(event_type)
            if listeners is None or not _remove_first(listeners, listener):
                return
            if not listeners:
                del self._listeners[event_type]
        logger.debug(f"Unsubscribed listener for {event_type!r}: {listener}")

    def wildcard_subscribe(self, listener: WildcardListener) -> None:
        """Register ``listener`` to receive an ``EmittedEvent`` for every emit.

        Raises:
            ListenerRegistrationError: If listener is not callable
        """
        ensure_listener(listener)
        with self._lock:
            self._wildcard_listeners.append(listener)
        logger.debug(f"Subscribed wildcard listener: {listener}")

    def wildcard_unsubscribe(self, listener: WildcardListener) -> None:
        """Remove the first wildcard registration of ``listener``, if any."""
        with self._lock:
            if not _remove_first(self._wildcard_listeners, listener):
                return
        logger.debug(f"Unsubscribed wildcard listener: {listener}")

    def emit(self, event_type: K, *args: Any) -> None:
        """Call every listener of ``event_type``, then every wildcard listener.

        The listener lists are copied before any listener runs, so listeners
        added or removed while this call is in progress are only affected
        from the next emit onwards.

        Exceptions raised by a listener are not caught: they propagate to the
        caller and the listeners after it are not called.

        Args:
            event_type: The event type to emit
            *args: Positional arguments passed to each typed listener
        """
        with self._lock:
            listeners = list(self._listeners.get(event_type, ()))
            wildcard_listeners = list(self._wildcard_listeners)

        logger.trace(
            f"Emitting {event_type!r} to {len(listeners)} listeners and {len(wildcard_listeners)} wildcard listeners"
        )

        for listener in listeners:
            listener(*args)

        if not wildcard_listeners:
            return

        event = EmittedEvent(type=event_type, args=args)
        for listener in wildcard_listeners:
            listener(event)

    def listener_count(self, event_type: K) -> int:
        """Get the number of registrations for an event type."""
        with self._lock:
            return len(self._listeners.get(event_type, ()))

    def wildcard_count(self) -> int:
        """Get the number of wildcard registrations."""
        with self._lock:
            return len(self._wildcard_listeners)

    def event_types(self) -> list[K]:
        """Get all event types that currently have listeners.

        Returns:
            Event types in the order they were first subscribed to
        """
        with self._lock:
            return list(self._listeners)

    def clear(self, event_type: K | None = None) -> None:
        """Clear listeners for a specific event type, or everything.

        Without an event type, wildcard listeners are cleared as well.
        """
        with self._lock:
            if event_type is None:
                self._listeners.clear()
                self._wildcard_listeners.clear()
                logger.debug("Cleared all listeners")
            elif self._listeners.pop(event_type, None) is not None:
                logger.debug(f"Cleared listeners for {event_type!r}")


@lru_cache
def get_emitter() -> Emitter[Any]:
    """Get or create the process-wide Emitter instance.

    Example:
        ```python
        emitter = get_emitter()
        emitter.subscribe("ready", on_ready)
        emitter.emit("ready")
        ```
    """
    return Emitter()

"""Emitter System for In-Process Publish/Subscribe.

This module provides a small, synchronous event emitter meant to be embedded
in larger applications. It supports:

- **Typed Listeners**: Listeners subscribe to a single event type and receive its arguments
- **Wildcard Listeners**: Listeners observe every event as an ``EmittedEvent`` record
- **Single-Shot Listeners**: ``once`` detaches a listener after its first call
- **Snapshot Dispatch**: Listener changes made during an emit apply to the next emit
- **Singleton Pattern**: Global emitter instance via @lru_cache

## Quick Start

```python
from typed_events.emitter import Emitter, once

emitter: Emitter[str] = Emitter()

def log_error(message: str, code: int) -> None:
    print(f"[{code}] {message}")

emitter.subscribe("error", log_error)
once(emitter, "connected", lambda host: print(f"connected to {host}"))

emitter.emit("connected", "db.local")
emitter.emit("error", "disk full", 28)
```

## Architecture

- **Core**: Listener types, the ``EmittedEvent`` record and exceptions (``core.py``)
- **Emitter**: Registries and synchronous fan-out (``bus.py``)
- **Once**: Helper composed from ``subscribe``/``unsubscribe`` only (``once.py``)

Listener exceptions are never caught by the emitter. Wrap listeners yourself
when one failing listener must not stop the others.

"""

from .bus import Emitter, get_emitter
from .core import EmittedEvent, EmitterError, Listener, ListenerRegistrationError, WildcardListener
from .once import once

__all__ = [
    "EmittedEvent",
    "Emitter",
    "EmitterError",
    "Listener",
    "ListenerRegistrationError",
    "WildcardListener",
    "get_emitter",
    "once",
]

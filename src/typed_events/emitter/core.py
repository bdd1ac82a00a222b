"""Core Emitter Components.

This module contains the building blocks shared by the emitter and the
``once`` helper. Nothing here holds state; the registries live on
:class:`~typed_events.emitter.bus.Emitter`.

## Key Components

- **Listener**: Callable invoked with the positional arguments of an emit call
- **WildcardListener**: Callable invoked with a single :class:`EmittedEvent`
- **EmittedEvent**: Record describing one emission (event type plus arguments)
- **EmitterError**: Base exception for all errors raised by the emitter itself
- **ListenerRegistrationError**: Raised when a listener cannot be registered

## Usage Example

```python
from typed_events.emitter.core import EmittedEvent

def audit(event: EmittedEvent) -> None:
    print(f"{event.type} fired with {event.args}")

emitter.wildcard_subscribe(audit)
emitter.emit("connected", "db-1")  # audit receives EmittedEvent(type="connected", args=("db-1",))
```

"""

from collections.abc import Callable, Hashable
from typing import Any

from pydantic import BaseModel, ConfigDict

Listener = Callable[..., Any]


class EmittedEvent(BaseModel):
    """A single emission, as seen by wildcard listeners.

    Attributes:
        type: The event type the emitter was called with.
        args: The positional arguments passed to ``emit``, in order.
    """

    model_config = ConfigDict(frozen=True)

    type: Hashable
    args: tuple[Any, ...] = ()


WildcardListener = Callable[[EmittedEvent], Any]


class EmitterError(Exception):
    """Base exception for all emitter related errors.

    Only errors raised by the emitter itself derive from this class. Exceptions
    raised by listeners are never wrapped and propagate unchanged from ``emit``.
    """


class ListenerRegistrationError(EmitterError, TypeError):
    """Raised when listener registration fails.

    This occurs when the listener passed to ``subscribe`` or
    ``wildcard_subscribe`` is not callable.
    """


def ensure_listener(listener: Any) -> None:
    """Validate that ``listener`` can be invoked.

    Raises:
        ListenerRegistrationError: If the listener is not callable
    """
    if not callable(listener):
        raise ListenerRegistrationError(f"Listener must be callable: {listener!r}")

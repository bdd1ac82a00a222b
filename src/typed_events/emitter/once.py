"""Single-shot listeners built on the public Emitter API."""

from collections.abc import Callable, Hashable
from functools import wraps
from typing import Any

from .bus import Emitter


def once[K: Hashable, R](emitter: Emitter[K], event_type: K, callback: Callable[..., R]) -> Callable[..., R]:
    """Subscribe ``callback`` so that it runs for the next ``event_type`` emit only.

    The returned wrapper is the registered listener: pass it to
    ``emitter.unsubscribe`` to cancel before the event fires.

    The wrapper unsubscribes itself before calling ``callback``, so an emit
    of the same event type triggered from inside ``callback`` does not reach
    it a second time.

    Example:
        ```python
        listener = once(emitter, "ready", lambda: print("ready"))
        emitter.emit("ready")  # prints
        emitter.emit("ready")  # does nothing
        ```
    """

    @wraps(callback)
    def listener(*args: Any) -> R:
        emitter.unsubscribe(event_type, listener)
        return callback(*args)

    emitter.subscribe(event_type, listener)
    return listener

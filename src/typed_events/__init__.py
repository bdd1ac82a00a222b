"""The typed_events package."""

from loguru import logger

from .emitter import EmittedEvent, Emitter, EmitterError, ListenerRegistrationError, get_emitter, once
from .settings import Settings, get_settings

# Library default: silent until the host enables it (see typed_events.logging.setup_logging).
logger.disable(__name__)

__all__ = [
    "EmittedEvent",
    "Emitter",
    "EmitterError",
    "ListenerRegistrationError",
    "Settings",
    "get_emitter",
    "get_settings",
    "once",
]

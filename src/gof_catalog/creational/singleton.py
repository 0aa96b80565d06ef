"""
Singleton - exactly one instance for the whole process.

The instance is created lazily on the first get_instance() call, under a
lock so that concurrent first calls still construct it only once.
reset() exists for test isolation.
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar

from gof_catalog.harness.sink import OutputSink

logger = logging.getLogger(__name__)

_CREATION_TOKEN = object()


class Singleton:
    """The one shared instance. Construct it only through get_instance()."""

    _instance: ClassVar[Singleton | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _creation_count: ClassVar[int] = 0

    def __init__(self, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("Use Singleton.get_instance() instead of calling Singleton()")
        self.settings: dict[str, str] = {}

    @classmethod
    def get_instance(cls) -> Singleton:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CREATION_TOKEN)
                    cls._creation_count += 1
                    logger.debug("Created singleton instance")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the instance and the creation counter."""
        with cls._lock:
            cls._instance = None
            cls._creation_count = 0

    @classmethod
    def creation_count(cls) -> int:
        return cls._creation_count


def run_scenario(sink: OutputSink) -> None:
    """Fetch the instance twice and show it is shared."""
    first = Singleton.get_instance()
    first.settings["theme"] = "dark"
    second = Singleton.get_instance()
    sink.emit(f"Same instance: {first is second}")
    sink.emit(f"Theme seen through second reference: {second.settings['theme']}")
    try:
        Singleton()
    except TypeError as e:
        sink.emit(f"Direct construction refused: {e}")

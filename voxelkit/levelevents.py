"""Callbacks fired on level events such as a chunk going out of range."""

from __future__ import annotations

import enum
from collections import defaultdict
from typing import Any, Callable

ChunkEventFunc = Callable[["LevelEventType", Any], None]


class LevelEventType(enum.Enum):
    """Kinds of level events."""

    CHUNK_HIDDEN = enum.auto()


class LevelEvents:
    """Registry of chunk event listeners."""

    def __init__(self) -> None:
        self._callbacks: defaultdict[LevelEventType, list[ChunkEventFunc]] = defaultdict(list)

    def listen(self, event_type: LevelEventType, func: ChunkEventFunc) -> None:
        """Register func to be called on events of event_type."""
        self._callbacks[event_type].append(func)

    def trigger(self, event_type: LevelEventType, chunk) -> None:
        """Call every listener of event_type, in registration order."""
        for func in self._callbacks[event_type]:
            func(event_type, chunk)
"""A thread-safe cache of start sequences keyed by attribute lists."""

import struct
import threading
from collections.abc import Iterable


def make_key(attrs: Iterable[int]) -> bytes:
    """Encode attributes as little-endian 64-bit integers.

    Raises ValueError when no attributes are given.
    """
    values = [int(a) & 0xFFFFFFFFFFFFFFFF for a in attrs]
    if not values:
        raise ValueError("empty attribute list")
    return struct.pack(f"<{len(values)}Q", *values)


class AnsiCache:
    """Maps attribute lists to their ANSI start sequences."""

    def __init__(self) -> None:
        self._items: dict[bytes, str] = {}
        self._lock = threading.Lock()

    def get(self, attrs: Iterable[int]) -> str | None:
        """Return the cached sequence, or None if absent or attrs is empty."""
        try:
            key = make_key(attrs)
        except ValueError:
            return None
        with self._lock:
            return self._items.get(key)

    def set(self, attrs: Iterable[int], seq: str) -> None:
        """Store a sequence; an empty attribute list is ignored."""
        try:
            key = make_key(attrs)
        except ValueError:
            return
        with self._lock:
            self._items[key] = seq
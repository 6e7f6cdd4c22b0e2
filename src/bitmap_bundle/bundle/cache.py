"""
Rescale cache.

Remembers every raster produced for a requested size. Entries are never
evicted or invalidated: memory grows with the number of distinct sizes
requested over the bundle's lifetime, so avoid requesting many different
sizes from one bundle.
"""

import threading
from typing import Any

from loguru import logger

from ..images.base import Size


class RescaleCache:
    """Thread-safe, grow-only mapping from requested size to raster."""

    def __init__(self, warn_threshold: int | None = None):
        """
        Initialize the cache.

        Args:
            warn_threshold: Log a warning each time the entry count reaches a
                multiple of this value. Defaults to settings.cache_warn_threshold;
                zero or negative disables the warning.
        """
        if warn_threshold is None:
            from ..config import settings

            warn_threshold = settings.cache_warn_threshold
        self.warn_threshold = warn_threshold
        self._entries: dict[Size, Any] = {}
        self._lock = threading.Lock()

    def lookup(self, target: Size) -> Any | None:
        """Return the raster cached for exactly ``target``, or None."""
        with self._lock:
            return self._entries.get(target)

    def store(self, target: Size, raster: Any) -> None:
        """Insert or overwrite the entry for ``target``."""
        with self._lock:
            is_new = target not in self._entries
            self._entries[target] = raster
            count = len(self._entries)

        if not is_new:
            logger.debug("Overwrote cached raster for {}", target)
            return
        logger.debug("Cached raster for {} ({} entries)", target, count)
        if self.warn_threshold > 0 and count % self.warn_threshold == 0:
            logger.warning(
                "Rescale cache holds {} sizes; entries are never evicted", count
            )

    def sizes(self) -> list[Size]:
        """Return the cached sizes in insertion order."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, target: object) -> bool:
        with self._lock:
            return target in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

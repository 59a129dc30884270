"""Non-repeating random choice over a fortune catalog."""
from __future__ import annotations

import logging
import random
import threading
from typing import Optional, Sequence, Tuple

from .catalog import FORTUNES, InvalidCatalogSize, validate_catalog

logger = logging.getLogger(__name__)

__all__ = ["InvalidCatalogSize", "Selector"]


class Selector:
    """Pick catalog indices at random, never the same one twice in a row.

    One instance is meant to live for one UI session. The random source can
    be injected so tests (and `--seed`) get a reproducible sequence.
    """

    def __init__(self, catalog: Sequence[str] = FORTUNES, rng: Optional[random.Random] = None):
        self._catalog: Tuple[str, ...] = validate_catalog(catalog)
        self._rng = rng if rng is not None else random.Random()
        self._last_index: Optional[int] = None
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, seed, catalog: Sequence[str] = FORTUNES) -> "Selector":
        return cls(catalog, rng=random.Random(seed))

    @property
    def catalog(self) -> Tuple[str, ...]:
        return self._catalog

    @property
    def size(self) -> int:
        return len(self._catalog)

    @property
    def last_index(self) -> Optional[int]:
        return self._last_index

    def select(self) -> int:
        """Return a new index in [0, size), different from the previous one."""
        with self._lock:
            draws = 0
            while True:
                draws += 1
                index = self._rng.randrange(self.size)
                if index != self._last_index:
                    break
            self._last_index = index
        logger.debug("Selected fortune %d after %d draw(s)", index, draws)
        return index

    def next_fortune(self) -> str:
        return self._catalog[self.select()]

    def reset(self) -> None:
        with self._lock:
            self._last_index = None

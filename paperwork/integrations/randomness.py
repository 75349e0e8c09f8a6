"""
Random sources for forms whose outcome is a coin toss.

The generator is seeded once, when the source is built, and reused for every
draw after that. Tests inject their own source to force an outcome.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Protocol

from paperwork.config import settings

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Supplies boolean draws, intended to be uniform over {True, False}."""

    def next_boolean(self) -> bool:
        ...


class SystemRandomSource:
    """A ``random.Random`` seeded once at construction."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_boolean(self) -> bool:
        return self._rng.random() < 0.5


_default_source: SystemRandomSource | None = None
_default_lock = threading.Lock()


def default_random_source() -> SystemRandomSource:
    """Return the process-wide source, creating it on first use."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = SystemRandomSource(settings.random_seed)
            logger.debug("Default random source created: seed=%s", settings.random_seed)
    return _default_source

"""Object ids for feature service consumers.

Consumers want ids that fit a signed 32-bit integer, are non-negative and
unique within one response. We don't keep a registry: each batch draws one
random numeric prefix and glues every item's index onto it, so
``prefix=41, i=7`` gives ``417``. The prefix is bounded so that the longest
index of the batch still lands under ``MAX_OBJECTID``.
"""
import logging
import random
from collections.abc import Iterator
from dataclasses import dataclass

log = logging.getLogger(__name__)

MAX_OBJECTID = 2147483647

_default_rng = random.SystemRandom()


@dataclass(frozen=True)
class IdBatch:
    size: int                  # number of items that get an id
    prefix: int | None = None  # None means the index is the id

    def id_for(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} outside batch of {self.size}")
        if self.prefix is None:
            return index
        return int(f"{self.prefix}{index}")

    def __iter__(self) -> Iterator[int]:
        return (self.id_for(i) for i in range(self.size))

    def __len__(self) -> int:
        return self.size


def max_prefix_for(count: int) -> int:
    """Largest prefix that keeps "<prefix><index>" <= MAX_OBJECTID for every index < count."""
    digits = len(str(count))
    head = str(MAX_OBJECTID)[:-digits]
    return int(head or 0) - 1


def plan_ids(count: int, rng: random.Random | None = None) -> IdBatch:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    if count > MAX_OBJECTID + 1:
        # Indices alone exhaust the id space, nothing left for a prefix.
        log.warning("Batch of %d items truncated to %d ids", count, MAX_OBJECTID + 1)
        return IdBatch(size=MAX_OBJECTID + 1)

    max_prefix = max_prefix_for(count)
    if max_prefix < 0:
        return IdBatch(size=count)

    prefix = (rng or _default_rng).randint(0, max_prefix)
    return IdBatch(size=count, prefix=prefix)

"""
suspect_table.py
================
Clue → suspect lookup table.

A fixed number of buckets, each holding a chain of (clue, suspect) entries.
The bucket of a clue is the sum of its character codes modulo the bucket
count. Collisions are expected with such a simple hash and are resolved by
scanning the chain.

New entries go to the front of their chain, so when the same clue is inserted
twice the most recent suspect shadows the older one.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from config import HASH_CONFIG
from models import ClueAssociation

logger = logging.getLogger("detective_quest.suspect_table")


def additive_hash(text: str, bucket_count: int) -> int:
    """Sum of the character codes of `text`, reduced modulo `bucket_count`."""
    return sum(ord(ch) for ch in text) % bucket_count


class SuspectLookupTable:
    """
    Chained hash table mapping clue text to a suspect name.

    Built once from the case data before exploration starts and only read
    afterwards.

    Args:
        bucket_count: Number of chains. Defaults to HASH_CONFIG.bucket_count.

    Raises:
        ValueError: if `bucket_count` is not a positive integer.
    """

    def __init__(self, bucket_count: Optional[int] = None) -> None:
        if bucket_count is None:
            bucket_count = HASH_CONFIG.bucket_count
        if bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self._buckets: List[List[Tuple[str, str]]] = [
            [] for _ in range(bucket_count)
        ]
        self._size = 0

    @classmethod
    def from_associations(
        cls,
        associations: Iterable[ClueAssociation],
        bucket_count: Optional[int] = None,
    ) -> "SuspectLookupTable":
        """Create a table and insert every association in order."""
        table = cls(bucket_count)
        for assoc in associations:
            table.insert(assoc.clue, assoc.suspect)
        logger.info(
            "Suspect table ready: %d associations in %d buckets (%d in use)",
            len(table),
            table.bucket_count,
            sum(1 for chain in table._buckets if chain),
        )
        return table

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_of(self, clue: str) -> int:
        return additive_hash(clue, self.bucket_count)

    def insert(self, clue: str, suspect: str) -> None:
        """Record that `clue` implicates `suspect`; a repeated clue is shadowed."""
        chain = self._buckets[self.bucket_of(clue)]
        if chain:
            logger.debug(
                "Bucket %d collision: %r joins %d existing entries",
                self.bucket_of(clue), clue, len(chain),
            )
        chain.insert(0, (clue, suspect))
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect implicated by `clue`, or None if it is unknown."""
        for key, suspect in self._buckets[self.bucket_of(clue)]:
            if key == clue:
                return suspect
        return None

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size

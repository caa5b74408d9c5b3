"""
mansion.py
==========
Builds the immutable room tree from a validated MansionDataset and offers a
few read-only walks over it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from models import MansionDataset, Room, RoomRecord

logger = logging.getLogger("detective_quest.mansion")


def build_mansion(dataset: MansionDataset) -> Room:
    """
    Turn the dataset's flat room records into linked Room nodes.

    Rooms are frozen, so children are built before their parents. The dataset
    validator already guarantees the records form a tree, which keeps the
    recursion finite.

    Returns:
        The entry room.
    """
    records: Dict[str, RoomRecord] = dataset.room_by_id()

    def build(room_id: Optional[str]) -> Optional[Room]:
        if room_id is None:
            return None
        record = records[room_id]
        return Room(
            name=record.name,
            clue=record.clue,
            left=build(record.left),
            right=build(record.right),
        )

    entry = build(dataset.entry_room)
    logger.info(
        "Mansion built: entry=%r, rooms=%d", entry.name, count_rooms(entry)
    )
    return entry


def iter_rooms(root: Room) -> Iterator[Room]:
    """Yield rooms in pre-order: a room, then its left subtree, then its right."""
    stack: List[Room] = [root]
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def count_rooms(root: Room) -> int:
    return sum(1 for _ in iter_rooms(root))


def collect_clues(root: Room) -> List[str]:
    """Every non-empty clue in the mansion, in pre-order."""
    return [room.clue for room in iter_rooms(root) if room.has_clue]

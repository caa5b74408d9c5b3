"""
models.py
=========
Shared data models for Detective Quest: The Mysterious Mansion.

Contains:
  - RoomRecord / ClueAssociation / MansionDataset : Pydantic schemas for the
    static dataset the mansion and the lookup table are built from.
  - Room            : Immutable node of the mansion tree.
  - Notice          : One piece of narration emitted by the exploration engine.
  - AccusationResult: Outcome of the final tally for one accused suspect.

The engine and the evaluator only produce these values; rendering them to
text is left to ui_helpers.py so both drivers (cli.py and app.py) share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, field_validator, model_validator


# ---------------------------------------------------------------------------
# Static dataset schema
# ---------------------------------------------------------------------------

class RoomRecord(BaseModel):
    """
    One row of the mansion layout.

    Fields:
        id:    Stable identifier referenced by the parent's left / right slot.
        name:  Display name, e.g. "Biblioteca".
        clue:  Clue text found in the room; "" means the room holds no clue.
        left:  Id of the left child room, if any.
        right: Id of the right child room, if any.
    """

    id: str
    name: str
    clue: str = ""
    left: Optional[str] = None
    right: Optional[str] = None

    @field_validator("id", "name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class ClueAssociation(BaseModel):
    """A fact that `clue` implicates `suspect`."""

    clue: str
    suspect: str

    @field_validator("clue", "suspect")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class MansionDataset(BaseModel):
    """
    Everything the game needs before exploration starts.

    The validator guarantees the layout is a proper binary tree rooted at
    `entry_room`: every child reference resolves, no room has two parents,
    the entry room has none, and every room is reachable from the entry.
    """

    entry_room: str
    rooms: List[RoomRecord]
    associations: List[ClueAssociation] = []
    suspects: List[str] = []

    @model_validator(mode="after")
    def _check_tree(self) -> "MansionDataset":
        by_id: Dict[str, RoomRecord] = {}
        for record in self.rooms:
            if record.id in by_id:
                raise ValueError(f"duplicate room id {record.id!r}")
            by_id[record.id] = record

        if self.entry_room not in by_id:
            raise ValueError(f"entry room {self.entry_room!r} is not defined")

        parents: Dict[str, str] = {}
        for record in self.rooms:
            for child in (record.left, record.right):
                if child is None:
                    continue
                if child not in by_id:
                    raise ValueError(
                        f"room {record.id!r} points to unknown room {child!r}"
                    )
                if child in parents:
                    raise ValueError(
                        f"room {child!r} has two parents: "
                        f"{parents[child]!r} and {record.id!r}"
                    )
                parents[child] = record.id

        if self.entry_room in parents:
            raise ValueError(
                f"entry room {self.entry_room!r} cannot be a child room"
            )

        reachable = set()
        pending = [self.entry_room]
        while pending:
            room_id = pending.pop()
            reachable.add(room_id)
            record = by_id[room_id]
            pending.extend(c for c in (record.left, record.right) if c)
        unreachable = sorted(set(by_id) - reachable)
        if unreachable:
            raise ValueError(f"rooms not reachable from the entry: {unreachable}")

        if self.suspects:
            roster = set(self.suspects)
            for assoc in self.associations:
                if assoc.suspect not in roster:
                    raise ValueError(
                        f"clue {assoc.clue!r} names unknown suspect {assoc.suspect!r}"
                    )
        return self

    def room_by_id(self) -> Dict[str, RoomRecord]:
        """Return the layout keyed by room id."""
        return {record.id: record for record in self.rooms}


# ---------------------------------------------------------------------------
# Mansion tree node
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Room:
    """
    A location in the mansion.

    Rooms are built once by mansion.build_mansion() and never change. Each
    room owns its children; no room is reachable by two paths.

    Attributes:
        name:  Display name.
        clue:  Clue text, or "" when the room holds nothing.
        left:  Left child room, if any.
        right: Right child room, if any.
    """

    name:  str
    clue:  str = ""
    left:  Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    @property
    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None


# ---------------------------------------------------------------------------
# Engine output
# ---------------------------------------------------------------------------

class Action(str, Enum):
    GO_LEFT     = "go_left"
    GO_RIGHT    = "go_right"
    END_SESSION = "end_session"


class NoticeKind(str, Enum):
    ROOM_ENTERED         = "room_entered"
    CLUE_FOUND           = "clue_found"
    NO_CLUE              = "no_clue"
    DEAD_END             = "dead_end"
    OPTIONS              = "options"
    MOVED                = "moved"
    INVALID_MOVE         = "invalid_move"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    SESSION_ENDED        = "session_ended"


@dataclass(frozen=True)
class MoveOption:
    """A transition offered to the player; `target` is the child room name."""

    action: Action
    target: Optional[str] = None


@dataclass(frozen=True)
class Notice:
    """
    One event surfaced by the exploration engine.

    Only the fields relevant to `kind` are filled:
        ROOM_ENTERED          room
        CLUE_FOUND            room, clue, suspect (None when unassociated)
        NO_CLUE / DEAD_END    room
        OPTIONS               room, options
        MOVED / INVALID_MOVE  room, action
        UNRECOGNIZED_COMMAND  command
    """

    kind:    NoticeKind
    room:    str = ""
    clue:    str = ""
    suspect: Optional[str] = None
    action:  Optional[Action] = None
    options: Tuple[MoveOption, ...] = ()
    command: str = ""


# ---------------------------------------------------------------------------
# Accusation outcome
# ---------------------------------------------------------------------------

class Verdict(str, Enum):
    SOLVED     = "case_solved"
    UNRESOLVED = "case_unresolved"


@dataclass(frozen=True)
class AccusationResult:
    """
    Outcome of accusing one suspect.

    Attributes:
        accused:        Name exactly as matched against the lookup table.
        match_count:    Collected clues whose suspect is `accused`.
        matching_clues: Those clues in ascending order.
        verdict:        SOLVED or UNRESOLVED; the one-clue / no-clue cases
                        differ only in how they are narrated.
    """

    accused:        str
    match_count:    int
    matching_clues: Tuple[str, ...]
    verdict:        Verdict

    @property
    def solved(self) -> bool:
        return self.verdict is Verdict.SOLVED

"""
game_engine.py
==============
Exploration engine for Detective Quest: The Mysterious Mansion.

The engine is a small state machine over "the room the player is standing
in". Its state (current room + clue notebook) is an explicit SessionState
value threaded through step(); nothing is kept in module globals.

Public API summary:
    state = new_session(entry_room)
    enter_room(state, table)             → notices for the current room
    step(state, command, table)          → StepResult(state, notices, ended)

    session = ExplorationSession(entry_room, table)
    session.start()                      → notices for the entry room
    session.handle(command)              → notices
    session.ended / session.clues / session.current_room

The engine performs no I/O. Every outcome, including invalid moves and
unknown commands, is returned as a Notice for the driver (cli.py or app.py)
to render through ui_helpers.py.

Logging
-------
The logger name for this module is ``detective_quest.game_engine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from case_data import load_mansion_dataset
from clue_notebook import OrderedClueSet
from config import COMMAND_CONFIG, CommandConfig
from mansion import build_mansion
from models import Action, MansionDataset, MoveOption, Notice, NoticeKind, Room
from suspect_table import SuspectLookupTable

logger = logging.getLogger("detective_quest.game_engine")


@dataclass(frozen=True)
class SessionState:
    """
    Exploration state.

    Attributes:
        current_room: Where the player stands; never None while exploring.
        clues:        Notebook of clues collected so far. Only the engine
                      inserts into it.
    """

    current_room: Room
    clues:        OrderedClueSet


@dataclass(frozen=True)
class StepResult:
    state:   SessionState
    notices: Tuple[Notice, ...]
    ended:   bool = False


def new_session(entry_room: Room) -> SessionState:
    return SessionState(current_room=entry_room, clues=OrderedClueSet())


def parse_command(
    command: str,
    commands: CommandConfig = COMMAND_CONFIG,
) -> Optional[Action]:
    """Map a raw command to an Action, or None when it is not recognised."""
    if command in commands.go_left:
        return Action.GO_LEFT
    if command in commands.go_right:
        return Action.GO_RIGHT
    if command in commands.end_session:
        return Action.END_SESSION
    return None


def available_options(room: Room) -> Tuple[MoveOption, ...]:
    """Transitions offered in `room`; ending the session is always possible."""
    options: List[MoveOption] = []
    if room.left is not None:
        options.append(MoveOption(Action.GO_LEFT, room.left.name))
    if room.right is not None:
        options.append(MoveOption(Action.GO_RIGHT, room.right.name))
    options.append(MoveOption(Action.END_SESSION))
    return tuple(options)


def enter_room(state: SessionState, table: SuspectLookupTable) -> Tuple[Notice, ...]:
    """
    Process arrival in the current room.

    Steps:
      1. Record the room's clue in the notebook (a repeated clue is a no-op)
         and look up the suspect it implicates.
      2. Flag a dead end when the room has no exits.
      3. List the transitions available from here.
    """
    room = state.current_room
    notices: List[Notice] = [Notice(NoticeKind.ROOM_ENTERED, room=room.name)]

    if room.has_clue:
        added = state.clues.insert(room.clue)
        suspect = table.lookup(room.clue)
        logger.info(
            "Clue in %s: %r -> %s%s",
            room.name,
            room.clue,
            suspect or "no known suspect",
            "" if added else " (already noted)",
        )
        notices.append(
            Notice(NoticeKind.CLUE_FOUND, room=room.name, clue=room.clue, suspect=suspect)
        )
    else:
        notices.append(Notice(NoticeKind.NO_CLUE, room=room.name))

    if room.is_dead_end:
        notices.append(Notice(NoticeKind.DEAD_END, room=room.name))

    notices.append(
        Notice(NoticeKind.OPTIONS, room=room.name, options=available_options(room))
    )
    return tuple(notices)


def step(
    state: SessionState,
    command: str,
    table: SuspectLookupTable,
    commands: CommandConfig = COMMAND_CONFIG,
) -> StepResult:
    """
    Apply one player command.

    - go left / go right: move to that child and process the arrival, or emit
      INVALID_MOVE and stay put when there is no such child.
    - end session: emit SESSION_ENDED and report `ended=True`.
    - anything else: emit UNRECOGNIZED_COMMAND and stay put.

    The returned state shares `state.clues`; a clue found on arrival is
    inserted into that notebook in place.
    """
    action = parse_command(command, commands)
    room = state.current_room

    if action is None:
        logger.debug("Unrecognised command %r in %s", command, room.name)
        return StepResult(
            state, (Notice(NoticeKind.UNRECOGNIZED_COMMAND, room=room.name, command=command),)
        )

    if action is Action.END_SESSION:
        logger.info(
            "Session ended in %s with %d clue(s) noted", room.name, len(state.clues)
        )
        return StepResult(
            state, (Notice(NoticeKind.SESSION_ENDED, room=room.name),), ended=True
        )

    target = room.left if action is Action.GO_LEFT else room.right
    if target is None:
        logger.debug("No exit %s from %s", action.value, room.name)
        return StepResult(
            state, (Notice(NoticeKind.INVALID_MOVE, room=room.name, action=action),)
        )

    new_state = replace(state, current_room=target)
    moved = Notice(NoticeKind.MOVED, room=target.name, action=action)
    return StepResult(new_state, (moved,) + enter_room(new_state, table))


class ExplorationSession:
    """
    Holds one player's SessionState between commands.

    Drivers that cannot thread state themselves (the CLI loop, Streamlit's
    session_state) keep one of these per player.

    Attributes:
        table:          Read-only clue → suspect table.
        state:          Current SessionState; replaced on every move.
        ended:          True once the player ended the session.
        rooms_visited:  Rooms entered, the entry room included.
        clues_seen:     Clue discoveries, repeated visits included.
    """

    def __init__(
        self,
        entry_room: Room,
        table: SuspectLookupTable,
        commands: CommandConfig = COMMAND_CONFIG,
    ) -> None:
        self.table    = table
        self.commands = commands
        self.state    = new_session(entry_room)
        self.started  = False
        self.ended    = False
        self.rooms_visited = 0
        self.clues_seen    = 0

    @property
    def current_room(self) -> Room:
        return self.state.current_room

    @property
    def clues(self) -> OrderedClueSet:
        return self.state.clues

    def start(self) -> Tuple[Notice, ...]:
        """Enter the entry room. Must be called exactly once."""
        if self.started:
            raise RuntimeError("session already started")
        self.started = True
        logger.info("Session started in %s", self.current_room.name)
        notices = enter_room(self.state, self.table)
        self._tally(notices)
        return notices

    def handle(self, command: str) -> Tuple[Notice, ...]:
        """Apply one command; after the session ended every command is ignored."""
        if not self.started:
            raise RuntimeError("call start() before handle()")
        if self.ended:
            logger.warning("Command %r received after the session ended", command)
            return ()

        result = step(self.state, command, self.table, self.commands)
        self.state = result.state
        self.ended = result.ended
        self._tally(result.notices)
        return result.notices

    def _tally(self, notices: Tuple[Notice, ...]) -> None:
        for notice in notices:
            if notice.kind is NoticeKind.ROOM_ENTERED:
                self.rooms_visited += 1
            elif notice.kind is NoticeKind.CLUE_FOUND:
                self.clues_seen += 1


def create_session(
    bucket_count: Optional[int] = None,
    dataset: Optional[MansionDataset] = None,
) -> Tuple[ExplorationSession, MansionDataset]:
    """
    Build everything a new game needs from the case data.

    Args:
        bucket_count: Size of the suspect table; HASH_CONFIG's when omitted.
        dataset:      Case to play; case_data's mansion when omitted.

    Returns:
        A fresh, not yet started session and the dataset it was built from.

    Raises:
        pydantic.ValidationError: the case data is not a valid mansion.
        ValueError:  `bucket_count` is not positive.
        MemoryError: propagated untouched; the game cannot start.
    """
    if dataset is None:
        dataset = load_mansion_dataset()
    table = SuspectLookupTable.from_associations(dataset.associations, bucket_count)
    entry = build_mansion(dataset)
    return ExplorationSession(entry, table), dataset

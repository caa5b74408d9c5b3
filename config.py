"""
config.py
=========
Central configuration module for Detective Quest: The Mysterious Mansion.

All tunable constants live here so they can be adjusted without touching the
data structures or the exploration engine. The evidence threshold for the
final verdict is a game rule, not a tunable, and lives in accusation.py.

Environment overrides (read by the ``from_env`` constructors; the entry points
call ``load_dotenv()`` first, so a local ``.env`` file works too):

    DETECTIVE_QUEST_HASH_BUCKETS   bucket count of the suspect lookup table
    DETECTIVE_QUEST_LOG_LEVEL      logging level name (DEBUG, INFO, ...)

Usage:
    from config import HASH_CONFIG, COMMAND_CONFIG, LOG_CONFIG
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet


# ---------------------------------------------------------------------------
# Suspect lookup table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HashConfig:
    """
    Sizing of the clue → suspect lookup table.

    Attributes:
        bucket_count: Number of chains in the table. The association set is
                      small and static, so the table never grows.
    """
    bucket_count: int = 20

    @classmethod
    def from_env(cls) -> "HashConfig":
        raw = os.environ.get("DETECTIVE_QUEST_HASH_BUCKETS")
        if not raw:
            return cls()
        return cls(bucket_count=int(raw))


# ---------------------------------------------------------------------------
# Command keys
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandConfig:
    """
    Single-character commands accepted by the exploration engine.

    Attributes:
        go_left:     Keys that move to the left child ("esquerda").
        go_right:    Keys that move to the right child ("direita").
        end_session: Keys that end the exploration ("sair").
    """
    go_left:     FrozenSet[str] = frozenset({"e", "E"})
    go_right:    FrozenSet[str] = frozenset({"d", "D"})
    end_session: FrozenSet[str] = frozenset({"s", "S"})


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LogConfig:
    """
    Settings passed to ``logging.basicConfig`` by the entry points.

    The CLI shares the terminal with the game narration, so the default level
    only lets warnings through.
    """
    level:   str = "WARNING"
    format:  str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> "LogConfig":
        """
        Read DETECTIVE_QUEST_LOG_LEVEL.

        Raises:
            ValueError: if the value is not a logging level name.
        """
        level = os.environ.get("DETECTIVE_QUEST_LOG_LEVEL", cls.level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {level!r}")
        return cls(level=level)


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

HASH_CONFIG    = HashConfig()
COMMAND_CONFIG = CommandConfig()
LOG_CONFIG     = LogConfig()

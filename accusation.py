"""
accusation.py
=============
Deterministic, side-effect-free accusation tally.

Given the notebook at the end of a session, the suspect lookup table and the
name the player accused, count the collected clues that implicate that name
and turn the count into a verdict.
"""

from __future__ import annotations

import logging

from clue_notebook import OrderedClueSet
from models import AccusationResult, Verdict
from suspect_table import SuspectLookupTable

logger = logging.getLogger("detective_quest.accusation")

MIN_CLUES_TO_SOLVE = 2
"""Clues that must implicate the accused for the case to be solved."""


def normalize_accused_name(raw: str) -> str:
    """
    Strip a single trailing line terminator and nothing else.

    Names are matched exactly, so surrounding spaces and capitalisation are
    preserved.
    """
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw


def verdict_for(match_count: int) -> Verdict:
    """
    Map a tally to a verdict.

        0 or 1 clue  → UNRESOLVED
        2 or more    → SOLVED
    """
    if match_count >= MIN_CLUES_TO_SOLVE:
        return Verdict.SOLVED
    return Verdict.UNRESOLVED


def evaluate_accusation(
    clues: OrderedClueSet,
    table: SuspectLookupTable,
    accused: str,
) -> AccusationResult:
    """
    Tally the evidence against `accused`.

    Args:
        clues:   The notebook at the end of exploration.
        table:   Clue → suspect associations.
        accused: Name typed by the player; compared case-sensitively.

    Returns:
        AccusationResult with the count, the matching clues in ascending
        order and the verdict.

    Examples:
        Collected "Uma pegada estranha..." and "Cinzas ainda quentes...",
        both tied to Sr. Williams:
        >>> evaluate_accusation(clues, table, "Sr. Williams").match_count
        2
    """
    name = normalize_accused_name(accused)

    def implicates(clue: str) -> bool:
        return table.lookup(clue) == name

    match_count = clues.count_matching(implicates)
    matching = tuple(clues.list_matching(implicates)) if match_count else ()
    result = AccusationResult(
        accused=name,
        match_count=match_count,
        matching_clues=matching,
        verdict=verdict_for(match_count),
    )

    logger.info(
        "Accusation against %r: %d of %d clue(s) match -> %s",
        name, result.match_count, len(clues), result.verdict.value,
    )
    return result

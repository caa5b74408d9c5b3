import pytest

from accusation import (
    MIN_CLUES_TO_SOLVE,
    evaluate_accusation,
    normalize_accused_name,
    verdict_for,
)
from clue_notebook import OrderedClueSet
from models import Verdict

WILLIAMS_CLUES = [
    "Uma pegada estranha na entrada principal",
    "Cinzas ainda quentes na lareira",
    "Partitura com codigo secreto",
]


def notebook_with(*clues):
    notebook = OrderedClueSet()
    for clue in clues:
        notebook.insert(clue)
    return notebook


@pytest.mark.parametrize(
    "count, verdict",
    [(0, Verdict.UNRESOLVED), (1, Verdict.UNRESOLVED), (2, Verdict.SOLVED), (3, Verdict.SOLVED)],
)
def test_verdict_boundaries(count, verdict):
    assert verdict_for(count) is verdict


def test_threshold_is_two():
    assert MIN_CLUES_TO_SOLVE == 2


@pytest.mark.parametrize("matches", [0, 1, 2, 3])
def test_match_count_equals_clues_pointing_at_accused(table, matches):
    notebook = notebook_with(
        *WILLIAMS_CLUES[:matches],
        "Faca com manchas suspeitas",
        "Frasco vazio de arsênico",
    )
    result = evaluate_accusation(notebook, table, "Sr. Williams")
    assert result.match_count == matches
    assert result.matching_clues == tuple(sorted(WILLIAMS_CLUES[:matches]))
    assert result.solved is (matches >= 2)


def test_name_must_match_exactly(table):
    notebook = notebook_with(*WILLIAMS_CLUES)
    assert evaluate_accusation(notebook, table, "sr. williams").match_count == 0
    assert evaluate_accusation(notebook, table, "Sr. Williams ").match_count == 0
    assert evaluate_accusation(notebook, table, "Williams").match_count == 0


def test_trailing_line_terminator_is_ignored(table):
    notebook = notebook_with(*WILLIAMS_CLUES)
    result = evaluate_accusation(notebook, table, "Sr. Williams\n")
    assert result.accused == "Sr. Williams"
    assert result.match_count == 3


@pytest.mark.parametrize(
    "raw, name",
    [
        ("Dr. Smith\n", "Dr. Smith"),
        ("Dr. Smith\r\n", "Dr. Smith"),
        ("Dr. Smith", "Dr. Smith"),
        (" Dr. Smith \n", " Dr. Smith "),
        ("Dr. Smith\n\n", "Dr. Smith\n"),
        ("", ""),
    ],
)
def test_normalize_accused_name(raw, name):
    assert normalize_accused_name(raw) == name


def test_clues_without_association_never_match(table):
    notebook = notebook_with("Bilhete anonimo", "Cinzas ainda quentes na lareira")
    result = evaluate_accusation(notebook, table, "Sr. Williams")
    assert result.match_count == 1
    assert result.matching_clues == ("Cinzas ainda quentes na lareira",)


def test_empty_accusation_matches_nothing(table):
    notebook = notebook_with(*WILLIAMS_CLUES)
    result = evaluate_accusation(notebook, table, "")
    assert result.match_count == 0
    assert result.verdict is Verdict.UNRESOLVED

"""
case_data.py
============
All narrative content for the Mysterious Mansion case.

Centralising story data here means you can swap out the entire mystery
(rooms, clues, suspects) without touching the clue notebook, the lookup
table, or the exploration engine.

To create a new case:
    1. Replace the constants below with your new story.
    2. Keep the layout a binary tree: MansionDataset rejects shared rooms,
       dangling references and rooms unreachable from ENTRY_ROOM.
"""

from __future__ import annotations

from typing import List

from models import ClueAssociation, MansionDataset, RoomRecord


# ---------------------------------------------------------------------------
# Suspects
# ---------------------------------------------------------------------------

SUSPECTS: List[str] = [
    "Dr. Smith",
    "Sra. Johnson",
    "Sr. Williams",
    "Mordomo James",
]
"""
Names the player may accuse. Accusations are matched exactly against these
strings, so keep spelling and capitalisation stable.
"""


# ---------------------------------------------------------------------------
# Clue → suspect associations
# ---------------------------------------------------------------------------

CLUE_ASSOCIATIONS: List[ClueAssociation] = [
    # Dr. Smith: poisons expert
    ClueAssociation(clue="Livro sobre venenos deixado aberto na mesa", suspect="Dr. Smith"),
    ClueAssociation(clue="Frasco vazio de arsênico", suspect="Dr. Smith"),
    ClueAssociation(clue="Flores venenosas recentemente colhidas", suspect="Dr. Smith"),

    # Sra. Johnson: had access to the documents
    ClueAssociation(clue="Carta de ameaca parcialmente queimada", suspect="Sra. Johnson"),
    ClueAssociation(clue="Documento com assinatura falsificada", suspect="Sra. Johnson"),

    # Sr. Williams: knows the house
    ClueAssociation(clue="Uma pegada estranha na entrada principal", suspect="Sr. Williams"),
    ClueAssociation(clue="Cinzas ainda quentes na lareira", suspect="Sr. Williams"),
    ClueAssociation(clue="Partitura com codigo secreto", suspect="Sr. Williams"),

    # Mordomo James: kitchen and garden
    ClueAssociation(clue="Faca com manchas suspeitas", suspect="Mordomo James"),
    ClueAssociation(clue="Luvas com residuos toxicos", suspect="Mordomo James"),
]


# ---------------------------------------------------------------------------
# Mansion layout
# ---------------------------------------------------------------------------

ENTRY_ROOM = "hall"

MANSION_ROOMS: List[RoomRecord] = [
    # Level 0
    RoomRecord(
        id="hall", name="Hall de Entrada",
        clue="Uma pegada estranha na entrada principal",
        left="library", right="living_room",
    ),

    # Level 1
    RoomRecord(
        id="library", name="Biblioteca",
        clue="Livro sobre venenos deixado aberto na mesa",
        left="study", right="music_room",
    ),
    RoomRecord(
        id="living_room", name="Sala de Estar",
        clue="Cinzas ainda quentes na lareira",
        left="kitchen", right="garden",
    ),

    # Level 2
    RoomRecord(
        id="study", name="Escritorio",
        clue="Carta de ameaca parcialmente queimada",
        left="vault",
    ),
    RoomRecord(id="music_room", name="Sala de Musica", right="piano"),
    RoomRecord(
        id="kitchen", name="Cozinha",
        clue="Faca com manchas suspeitas",
        left="pantry",
    ),
    RoomRecord(
        id="garden", name="Jardim",
        clue="Flores venenosas recentemente colhidas",
        right="greenhouse",
    ),

    # Level 3 (dead ends)
    RoomRecord(id="vault", name="Cofre Secreto", clue="Documento com assinatura falsificada"),
    RoomRecord(id="piano", name="Piano Antigo", clue="Partitura com codigo secreto"),
    RoomRecord(id="pantry", name="Despensa", clue="Frasco vazio de arsênico"),
    RoomRecord(id="greenhouse", name="Estufa", clue="Luvas com residuos toxicos"),
]


def load_mansion_dataset() -> MansionDataset:
    """
    Validate and return the case as a MansionDataset.

    Raises:
        pydantic.ValidationError: if the layout is not a proper tree or an
            association names a suspect missing from SUSPECTS.
    """
    return MansionDataset(
        entry_room=ENTRY_ROOM,
        rooms=MANSION_ROOMS,
        associations=CLUE_ASSOCIATIONS,
        suspects=SUSPECTS,
    )

import pytest
from pydantic import ValidationError

from mansion import build_mansion, collect_clues, count_rooms, iter_rooms
from models import ClueAssociation, MansionDataset, RoomRecord


def test_case_layout(mansion):
    assert mansion.name == "Hall de Entrada"
    assert mansion.clue == "Uma pegada estranha na entrada principal"
    assert mansion.left.name == "Biblioteca"
    assert mansion.right.name == "Sala de Estar"
    assert mansion.left.left.name == "Escritorio"
    assert mansion.left.left.left.name == "Cofre Secreto"
    assert mansion.left.left.right is None
    assert mansion.left.right.name == "Sala de Musica"
    assert mansion.left.right.left is None
    assert mansion.left.right.right.name == "Piano Antigo"
    assert mansion.right.right.right.name == "Estufa"
    assert count_rooms(mansion) == 11


def test_music_room_holds_no_clue(mansion):
    music_room = mansion.left.right
    assert music_room.clue == ""
    assert not music_room.has_clue
    assert not music_room.is_dead_end


def test_dead_ends(mansion):
    dead_ends = [room.name for room in iter_rooms(mansion) if room.is_dead_end]
    assert dead_ends == ["Cofre Secreto", "Piano Antigo", "Despensa", "Estufa"]


def test_iter_rooms_is_pre_order(mansion):
    names = [room.name for room in iter_rooms(mansion)]
    assert names[:4] == ["Hall de Entrada", "Biblioteca", "Escritorio", "Cofre Secreto"]


def test_every_mansion_clue_is_associated(mansion, table):
    clues = collect_clues(mansion)
    assert len(clues) == 10
    assert all(table.lookup(clue) is not None for clue in clues)


def test_rooms_are_immutable(mansion):
    with pytest.raises(AttributeError):
        mansion.name = "Porao"


def _dataset(rooms, entry="a", **kwargs):
    return MansionDataset(entry_room=entry, rooms=rooms, **kwargs)


def test_minimal_single_room_mansion():
    entry = build_mansion(_dataset([RoomRecord(id="a", name="Hall")]))
    assert entry.is_dead_end


@pytest.mark.parametrize(
    "rooms, entry, message",
    [
        (
            [RoomRecord(id="a", name="Hall"), RoomRecord(id="a", name="Sala")],
            "a", "duplicate room id",
        ),
        ([RoomRecord(id="a", name="Hall")], "z", "entry room"),
        ([RoomRecord(id="a", name="Hall", left="b")], "a", "unknown room"),
        (
            [
                RoomRecord(id="a", name="Hall", left="b", right="b"),
                RoomRecord(id="b", name="Sala"),
            ],
            "a", "two parents",
        ),
        (
            [
                RoomRecord(id="a", name="Hall", left="b"),
                RoomRecord(id="b", name="Sala", left="a"),
            ],
            "a", "cannot be a child",
        ),
        (
            [
                RoomRecord(id="a", name="Hall"),
                RoomRecord(id="b", name="Sala", left="c"),
                RoomRecord(id="c", name="Cozinha", left="b"),
            ],
            "a", "not reachable",
        ),
    ],
)
def test_invalid_layouts_are_rejected(rooms, entry, message):
    with pytest.raises(ValidationError, match=message):
        _dataset(rooms, entry)


def test_blank_room_name_is_rejected():
    with pytest.raises(ValidationError):
        RoomRecord(id="a", name="   ")


def test_association_with_unknown_suspect_is_rejected():
    with pytest.raises(ValidationError, match="unknown suspect"):
        _dataset(
            [RoomRecord(id="a", name="Hall")],
            associations=[ClueAssociation(clue="Faca", suspect="Jardineiro")],
            suspects=["Dr. Smith"],
        )

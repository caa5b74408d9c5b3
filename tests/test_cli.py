import pytest

import cli
import game_engine
from cli import ACCUSATION_PROMPT, main, run_cli
from models import MansionDataset, RoomRecord


def scripted(*lines):
    """Return an input() replacement that replays `lines`, then hits EOF."""
    feed = iter(lines)

    def read_line(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture()
def output():
    return []


def test_solved_case(output):
    code = run_cli(scripted("d", "d", "s", "Sr. Williams"), output.append)
    assert code == 0
    assert "Total de pistas coletadas: 3" in output
    assert "Pistas que apontam para Sr. Williams: 2" in output
    assert "*** PARABENS! ***" in output
    assert output[-1] == "Obrigado por jogar Detective Quest - Nivel Mestre!"


def test_unresolved_case_still_exits_zero(output):
    code = run_cli(scripted("e", "e", "s", "Sr. Williams"), output.append)
    assert code == 0
    assert "Apenas 1 pista foi encontrada - nao e suficiente para o tribunal." in output


def test_commands_are_stripped_and_bad_ones_reprompt(output):
    code = run_cli(scripted(" e ", "x", "E", "S", "Sra. Johnson"), output.append)
    assert code == 0
    assert any(line.startswith("Opcao invalida!") for line in output)
    assert "Voce esta na: Escritorio" in output
    assert "Pistas que apontam para Sra. Johnson: 1" in output


def test_invalid_move_is_reported(output):
    run_cli(scripted("e", "d", "e", "s", "Dr. Smith"), output.append)
    assert "Nao ha caminho a esquerda! Tente outra direcao." in output
    assert "Esta sala nao contem pistas visiveis." in output


def test_end_of_input_leaves_quietly(output):
    code = run_cli(scripted("e"), output.append)
    assert code == 0
    assert output[-1] == "Obrigado por jogar Detective Quest - Nivel Mestre!"


@pytest.mark.parametrize("buckets", ["0", "muitos"])
def test_initialisation_failure_exits_one(monkeypatch, output, buckets):
    monkeypatch.setenv("DETECTIVE_QUEST_HASH_BUCKETS", buckets)
    code = run_cli(scripted(), output.append)
    assert code == 1
    assert output[-1].startswith("Erro:")


def test_bucket_override_does_not_change_gameplay(monkeypatch, output):
    monkeypatch.setenv("DETECTIVE_QUEST_HASH_BUCKETS", "1")
    code = run_cli(scripted("d", "s", "Sr. Williams"), output.append)
    assert code == 0
    assert "*** PARABENS! ***" in output


def test_empty_notebook_skips_the_accusation(monkeypatch, output):
    dataset = MansionDataset(entry_room="a", rooms=[RoomRecord(id="a", name="Porao")])
    monkeypatch.setattr(
        cli,
        "create_session",
        lambda bucket_count=None: game_engine.create_session(bucket_count, dataset=dataset),
    )
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return "s"

    code = run_cli(read_line, output.append)
    assert code == 0
    assert ACCUSATION_PROMPT not in prompts
    assert "Nenhuma pista foi coletada durante a investigacao." in output
    assert "Impossivel fazer uma acusacao sem evidencias!" in output
    assert output[-1] == "Obrigado por jogar Detective Quest - Nivel Mestre!"


def test_bad_log_level_exits_one(monkeypatch, output):
    monkeypatch.setenv("DETECTIVE_QUEST_LOG_LEVEL", "verbose")
    code = main(scripted(), output.append)
    assert code == 1
    assert output[-1].startswith("Erro:")

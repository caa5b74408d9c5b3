import pytest

from case_data import load_mansion_dataset
from game_engine import ExplorationSession, create_session
from mansion import build_mansion
from suspect_table import SuspectLookupTable


@pytest.fixture()
def dataset():
    return load_mansion_dataset()


@pytest.fixture()
def table(dataset):
    return SuspectLookupTable.from_associations(dataset.associations)


@pytest.fixture()
def mansion(dataset):
    return build_mansion(dataset)


@pytest.fixture()
def session():
    s, _ = create_session()
    s.start()
    return s


@pytest.fixture()
def play():
    def _play(session: ExplorationSession, *commands: str) -> list:
        """Feed commands to a started session and return all notices emitted."""
        notices = []
        for command in commands:
            notices.extend(session.handle(command))
        return notices

    return _play

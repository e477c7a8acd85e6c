import pytest

from pagesim import session

CLASSIC = "1 2 3 4 1 2 5 1 2 3 4 5"


@pytest.fixture
def classic_refs():
    return CLASSIC.split()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PAGESIM_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def fresh_session(data_dir):
    session.reset_session(clear=True)
    session.settings.update(
        {
            "algorithm": "FIFO",
            "reference_string": CLASSIC,
            "frame_count": 3,
            "speed": "NORMAL",
            "persist": True,
        }
    )
    yield session
    session.reset_session(clear=True)

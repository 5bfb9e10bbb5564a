import io

import pytest


class FakeTput:
    """Stands in for the real tput: records each call and returns `status`."""

    def __init__(self, status=0):
        self.status = status
        self.calls = []

    def __call__(self, argv):
        self.calls.append(list(argv))
        return self.status


@pytest.fixture
def fake_tput():
    return FakeTput()


@pytest.fixture
def out():
    return io.BytesIO()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("HINATA_TPUT_CMD", raising=False)
    monkeypatch.delenv("HINATA_TPUT_DEBUG", raising=False)

import pytest

from stopwatch import core


class FakeClock:
    def __init__(self) -> None:
        self.now = 1_000_000_000

    def __call__(self) -> int:
        return self.now

    def advance_us(self, microseconds: int) -> None:
        self.now += microseconds * 1_000


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(core, "_clock", fake)
    return fake

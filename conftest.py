import pytest


class FakeClock:
    """A nanosecond clock that only moves when a test advances it."""

    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += int(ms * 1_000_000)


@pytest.fixture
def clock():
    return FakeClock()

import pytest

from controller import Controller


class FakeClock:
    """Monotonic clock driven in whole milliseconds."""

    def __init__(self):
        self.ms = 0

    def advance(self, ms):
        self.ms += ms

    def __call__(self):
        return self.ms / 1000.0


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    return Controller(clock=clock, timestamp=lambda: "12:00:00")

import random

import pytest

from maze import Direction


class ScriptedRandom:
    """Stand-in RNG that starts at a fixed cell and picks neighbors by direction."""
    def __init__(self, directions, start=0):
        self.directions = list(directions)
        self.start = start

    def randrange(self, stop):
        return self.start

    def choice(self, candidates):
        wanted = self.directions.pop(0)
        for candidate in candidates:
            if candidate[0] == wanted:
                return candidate
        raise AssertionError(f"{wanted!r} is not among {candidates!r}")


@pytest.fixture
def seeded():
    return random.Random(1234)


@pytest.fixture
def right_then_up():
    return ScriptedRandom([Direction.RIGHT, Direction.TOP, Direction.LEFT])


@pytest.fixture
def up_then_right():
    return ScriptedRandom([Direction.TOP, Direction.RIGHT, Direction.BOTTOM])

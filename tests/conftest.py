import random

import pytest

from flappy.game import GameController
from flappy.physics_engine import SimulationEngine
from flappy.scores import ScoreBridge
from flappy.storage import Database


class RecordingAudio:
    """Audio consumer that remembers every event instead of playing it."""
    def __init__(self):
        self.events = []
        self.muted = False

    def play(self, name):
        self.events.append(name)

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def engine(db, audio):
    return SimulationEngine(scores=ScoreBridge(db), audio=audio, rng=random.Random(1234))


@pytest.fixture
def game(engine):
    return GameController(engine)

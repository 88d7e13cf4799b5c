"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from .constants import BIRD_RADIUS, BIRD_X, PIPE_GAP, PIPE_WIDTH, RESPAWN_Y


class GameState(Enum):
    READY = "ready"
    PLAYING = "playing"
    HIT = "hit"                 # Collided; waiting out the impact pause
    GAME_OVER = "gameover"


@dataclass
class Bird:
    """The player. Horizontal position is fixed at BIRD_X."""
    y: float = RESPAWN_Y
    velocity: float = 0.0
    rotation: float = 0.0       # Derived from velocity, visual only

    @property
    def top(self) -> float:
        return self.y - BIRD_RADIUS

    @property
    def bottom(self) -> float:
        return self.y + BIRD_RADIUS

    @property
    def left(self) -> float:
        return BIRD_X - BIRD_RADIUS

    @property
    def right(self) -> float:
        return BIRD_X + BIRD_RADIUS


@dataclass
class Pipe:
    """One top/bottom pipe pair with a gap centred on gap_y."""
    x: float
    gap_y: float
    passed: bool = False
    id: int = 0

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    @property
    def gap_top(self) -> float:
        return self.gap_y - PIPE_GAP / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + PIPE_GAP / 2


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs for one frame. Holds copies, never live state."""
    state: GameState
    bird: Bird
    pipes: Tuple[Pipe, ...] = field(default_factory=tuple)
    score: int = 0
    best: int = 0
    ground_offset: float = 0.0
    muted: bool = False

    @classmethod
    def capture(cls, state, bird, pipes, score, best, ground_offset, muted=False):
        return cls(
            state=state,
            bird=replace(bird),
            pipes=tuple(replace(p) for p in pipes),
            score=score,
            best=best,
            ground_offset=ground_offset,
            muted=muted,
        )

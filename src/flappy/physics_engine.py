"""
physics_engine.py: The per-frame world simulation.
Bird physics, pipe spawning/advance/pruning, scoring and collision.
"""

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .audio import SilentAudio
from .constants import (
    SCREEN_WIDTH, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPAWN_INTERVAL,
    MIN_PIPE_HEIGHT, GROUND_Y, BIRD_X, FRAME_DURATION, SOUND_FLAP, SOUND_SCORE
)
from .data_models import Bird, Pipe
from .physics_core import PhysicsCore
from .scores import ScoreBridge

logger = logging.getLogger(__name__)

MIN_GAP_Y = MIN_PIPE_HEIGHT + PIPE_GAP / 2
MAX_GAP_Y = GROUND_Y - MIN_PIPE_HEIGHT - PIPE_GAP / 2


@dataclass
class SimulationEngine:
    """
    Owns the bird and pipes for a single run.
    Collaborators (score bridge, audio sink, RNG) are injected.
    """
    core: PhysicsCore = field(default_factory=PhysicsCore)
    scores: ScoreBridge = field(default_factory=ScoreBridge)
    audio: object = field(default_factory=SilentAudio)
    rng: random.Random = field(default_factory=random.Random)

    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    ground_offset: float = 0.0
    last_time: Optional[float] = None
    last_spawn_time: Optional[float] = None
    _ids: itertools.count = field(default_factory=itertools.count, repr=False)

    def reset(self):
        """Returns the world to its canonical resting state."""
        self.core.respawn(self.bird)
        self.pipes = []
        self.scores.reset_run()
        self.ground_offset = 0.0
        self.last_time = None
        self.last_spawn_time = None

    def frame_multiplier(self, now: float) -> float:
        """
        Elapsed time since the previous tick in reference frames.
        The first tick after a reset counts as exactly one frame.
        """
        dt = 1.0 if self.last_time is None else (now - self.last_time) / FRAME_DURATION
        self.last_time = now
        return dt

    def flap(self):
        self.bird.velocity = self.core.flap()
        self.audio.play(SOUND_FLAP)

    def spawn_pipe(self, now: float) -> Pipe:
        """Generates a new pipe off-screen to the right."""
        gap_y = MIN_GAP_Y + self.rng.random() * (MAX_GAP_Y - MIN_GAP_Y)
        pipe = Pipe(x=float(SCREEN_WIDTH), gap_y=gap_y, id=next(self._ids))
        self.pipes.append(pipe)
        self.last_spawn_time = now
        return pipe

    def _spawn_due(self, now: float) -> bool:
        return self.last_spawn_time is None or now - self.last_spawn_time > PIPE_SPAWN_INTERVAL

    def step_pipes(self, dt: float):
        """Moves pipes, scores the ones the bird cleared, drops the ones off-screen."""
        pipe_delta_x = PIPE_SPEED * dt

        for pipe in self.pipes:
            pipe.x -= pipe_delta_x

            if not pipe.passed and pipe.x + PIPE_WIDTH < BIRD_X:
                pipe.passed = True
                if self.scores.record_pass():
                    logger.debug("New best score: %d", self.scores.current_best())
                self.audio.play(SOUND_SCORE)

        self.pipes = [p for p in self.pipes if p.x + PIPE_WIDTH >= 0]

    def step(self, now: float) -> bool:
        """
        The main simulation step for one Playing frame.
        Returns True if the bird collided with anything.
        """
        dt = self.frame_multiplier(now)

        self.ground_offset += PIPE_SPEED * dt

        # 1. Bird
        self.core.integrate(self.bird, dt)

        # 2. Spawn and Move Pipes
        if self._spawn_due(now):
            self.spawn_pipe(now)
        self.step_pipes(dt)

        # 3. Collision
        return self.core.check_collision(self.bird, self.pipes)

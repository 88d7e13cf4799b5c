"""
game.py: The game lifecycle state machine (Ready -> Playing -> Hit -> GameOver).
"""

import logging
from typing import Optional

from .constants import HIT_TO_DIE_DELAY, SOUND_HIT, SOUND_DIE
from .data_models import GameState, FrameSnapshot
from .physics_engine import SimulationEngine

logger = logging.getLogger(__name__)


class GameController:
    """
    Drives the simulation engine one frame at a time.

    Input is edge-triggered: on_flap() only latches a request, and the next
    tick consumes it. Any number of flaps between two ticks count as one.
    """

    def __init__(self, engine: Optional[SimulationEngine] = None):
        self.engine = engine or SimulationEngine()
        self.state = GameState.READY
        self.hit_time: Optional[float] = None
        self.pending_flap = False

    def on_flap(self):
        self.pending_flap = True

    def _set_state(self, state: GameState):
        logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state

    def _consume_flap(self) -> bool:
        """
        Applies a latched flap. Returns True if it changed the state,
        in which case the rest of the tick is skipped.
        """
        if not self.pending_flap:
            return False
        self.pending_flap = False

        if self.state is GameState.READY:
            self.engine.reset()
            self._set_state(GameState.PLAYING)
            return True
        if self.state is GameState.PLAYING:
            self.engine.flap()
            return False
        if self.state is GameState.GAME_OVER:
            self.engine.reset()
            self.hit_time = None
            self._set_state(GameState.READY)
            return True
        # Flaps during the impact pause are ignored
        return False

    def tick(self, now: float) -> FrameSnapshot:
        """Advances the game by one frame at wall-clock time now (ms)."""
        if self._consume_flap():
            return self.snapshot()

        if self.state is GameState.PLAYING:
            if self.engine.step(now):
                self.hit_time = now
                self._set_state(GameState.HIT)
                self.engine.audio.play(SOUND_HIT)

        elif self.state is GameState.HIT:
            if now - self.hit_time >= HIT_TO_DIE_DELAY:
                self._set_state(GameState.GAME_OVER)
                self.engine.audio.play(SOUND_DIE)
                logger.info("Game over. Score: %d, best: %d",
                            self.engine.scores.score, self.engine.scores.current_best())

        return self.snapshot()

    def snapshot(self) -> FrameSnapshot:
        engine = self.engine
        return FrameSnapshot.capture(
            state=self.state,
            bird=engine.bird,
            pipes=engine.pipes,
            score=engine.scores.score,
            best=engine.scores.current_best(),
            ground_offset=engine.ground_offset,
            muted=engine.audio.muted,
        )

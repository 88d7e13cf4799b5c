"""
physics_core.py: The shared kinematic functions and collision logic.
"""

from typing import Iterable

from .constants import (
    GRAVITY, FLAP_IMPULSE, TERMINAL_VELOCITY, GROUND_Y, RESPAWN_Y,
    ROTATION_FACTOR, MAX_UP_ROTATION, MAX_DOWN_ROTATION, ROTATION_SMOOTHING
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Stateless physics helpers used by the simulation engine.
    All per-frame deltas are scaled by the normalized frame multiplier dt.
    """

    GROUND_Y = GROUND_Y

    def apply_gravity_and_movement(self, y: float, velocity: float, dt: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one frame of length dt.
        Only the falling direction is clamped.
        """
        velocity += GRAVITY * dt
        velocity = min(velocity, TERMINAL_VELOCITY)
        y += velocity * dt
        return y, velocity

    def update_rotation(self, rotation: float, velocity: float) -> float:
        """Eases the bird's tilt toward the angle implied by its velocity."""
        target = min(max(velocity * ROTATION_FACTOR, -MAX_UP_ROTATION), MAX_DOWN_ROTATION)
        return rotation + (target - rotation) * ROTATION_SMOOTHING

    def flap(self) -> float:
        """Returns the velocity after a flap. Overrides, never adds."""
        return FLAP_IMPULSE

    def integrate(self, bird: Bird, dt: float):
        """Advances one bird in place by one frame."""
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity, dt)
        bird.rotation = self.update_rotation(bird.rotation, bird.velocity)

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        """Checks for collisions with ground, ceiling, or pipes."""

        # 1. Ground / Ceiling
        if bird.bottom >= self.GROUND_Y:
            return True
        if bird.top <= 0:
            return True

        # 2. Pipes: the bird's vertical extent must sit inside the gap band
        for pipe in pipes:
            if bird.right > pipe.x and bird.left < pipe.right:
                if bird.top < pipe.gap_top or bird.bottom > pipe.gap_bottom:
                    return True

        return False

    def respawn(self, bird: Bird):
        bird.y = RESPAWN_Y
        bird.velocity = 0.0
        bird.rotation = 0.0

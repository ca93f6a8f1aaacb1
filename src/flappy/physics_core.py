"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .constants import (
    GRAVITY_STEP, TERMINAL_VELOCITY, FLAP_VELOCITY,
    BASE_GAP_SIZE, MIN_GAP_SIZE
)


class PhysicsCore:
    """
    Deterministic physics used by the player and obstacle models.
    Everything here works on plain numbers so it can be checked in isolation.
    """

    @staticmethod
    def apply_gravity_and_movement(y: int, velocity: float) -> Tuple[int, float]:
        """
        Calculates new row and velocity after one fixed physics step.
        """
        if velocity < TERMINAL_VELOCITY:
            velocity = min(velocity + GRAVITY_STEP, TERMINAL_VELOCITY)
            velocity = round(velocity, 4)

        # int() truncates toward zero, so a small upward speed still moves 0 rows
        y += int(velocity)
        if y < 0:
            y = 0

        return y, velocity

    @staticmethod
    def flap() -> float:
        """Returns the instantaneous velocity after a flap."""
        return FLAP_VELOCITY

    @staticmethod
    def gap_size(score: int) -> int:
        return max(MIN_GAP_SIZE, BASE_GAP_SIZE - score)

    @staticmethod
    def gap_band(gap_y: int, size: int) -> Tuple[int, int]:
        """Top and bottom rows of the passable band."""
        half_size = size // 2
        return gap_y - half_size, gap_y + half_size

    @classmethod
    def check_collision(cls, player_x: int, player_y: int,
                        obstacle_x: int, gap_y: int, size: int) -> bool:
        """Checks the player against a wall; only the aligned column can collide."""
        if player_x != obstacle_x:
            return False

        top, bottom = cls.gap_band(gap_y, size)
        return player_y < top or player_y > bottom

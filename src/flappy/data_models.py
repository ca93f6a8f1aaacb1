"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    SCREEN_HEIGHT, PLAYER_START_X, PLAYER_START_Y, GAP_Y_MIN, GAP_Y_MAX,
    PLAYER_GLYPH, WALL_GLYPH, YELLOW, RED, BLACK
)
from .display import DrawList
from .physics_core import PhysicsCore


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    DEAD = "dead"


@dataclass
class Player:
    """The player glyph. x is in world space and only ever grows."""
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0

    @classmethod
    def new(cls) -> "Player":
        return cls(x=PLAYER_START_X, y=PLAYER_START_Y, velocity=0.0)

    def gravity_and_move(self):
        """One physics step: fall, advance one column, stay below the top edge."""
        self.y, self.velocity = PhysicsCore.apply_gravity_and_movement(self.y, self.velocity)
        self.x += 1

    def flap(self):
        self.velocity = PhysicsCore.flap()

    def render(self, surface: DrawList):
        # The player is pinned to the left edge; the world scrolls under it.
        surface.set(0, self.y, YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A vertical wall at world column x with a gap of `size` rows around gap_y."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def create(cls, x: int, score: int, rng: Optional[random.Random] = None) -> "Obstacle":
        """
        Builds the next wall. Without an injected generator every call draws
        from a freshly seeded one.
        """
        if rng is None:
            rng = random.Random()
        return cls(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=PhysicsCore.gap_size(score),
        )

    @property
    def gap_top(self) -> int:
        return PhysicsCore.gap_band(self.gap_y, self.size)[0]

    @property
    def gap_bottom(self) -> int:
        return PhysicsCore.gap_band(self.gap_y, self.size)[1]

    def render(self, surface: DrawList, player_x: int):
        screen_x = self.x - player_x

        for y in range(0, self.gap_top):
            surface.set(screen_x, y, RED, BLACK, WALL_GLYPH)

        for y in range(self.gap_bottom, SCREEN_HEIGHT):
            surface.set(screen_x, y, RED, BLACK, WALL_GLYPH)

    def hit_obstacle(self, player: Player) -> bool:
        return PhysicsCore.check_collision(player.x, player.y, self.x, self.gap_y, self.size)

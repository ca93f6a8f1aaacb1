"""
Flappy Game: a side-scrolling glyph game on an 80x50 character grid.
Split into physics core, data models, the mode state machine and a pygame driver.
"""

from .data_models import GameMode, Obstacle, Player
from .display import DrawList, FrameInput, Key
from .game_state import State

__all__ = [
    "DrawList", "FrameInput", "GameMode", "Key", "Obstacle", "Player", "State",
]

"""
game_state.py: The per-frame state machine that owns the player and the obstacle.
"""

import random
from typing import Callable, Dict, Optional

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, NAVY
from .data_models import GameMode, Obstacle, Player
from .display import DrawList, FrameInput, Key


class State:
    """
    Single owner of the round: mode, player, obstacle, score and the
    physics accumulator. A driver calls tick() once per display frame.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.mode = GameMode.MENU
        self.player = Player.new()
        self.frame_time = 0.0
        self.obstacle = Obstacle.create(SCREEN_WIDTH, 0, self.rng)
        self.score = 0
        self.quitting = False

        self._handlers: Dict[GameMode, Callable[[DrawList, FrameInput], GameMode]] = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.play,
            GameMode.DEAD: self.dead,
        }

    def tick(self, frame: FrameInput) -> DrawList:
        """Runs the handler for the current mode and returns this frame's draw list."""
        surface = DrawList(quitting=self.quitting)
        self.mode = self._handlers[self.mode](surface, frame)
        return surface

    def restart(self):
        self.player = Player.new()
        self.frame_time = 0.0
        self.mode = GameMode.PLAYING
        self.score = 0
        self.obstacle = Obstacle.create(SCREEN_WIDTH, 0, self.rng)

    def _quit(self, surface: DrawList):
        self.quitting = True
        surface.request_quit()

    def _dispatch_menu_key(self, surface: DrawList, key: Optional[Key], current: GameMode) -> GameMode:
        """P starts a new round, Q asks the driver to stop; other keys do nothing."""
        if key is Key.P:
            self.restart()
            return GameMode.PLAYING
        if key is Key.Q:
            self._quit(surface)
        return current

    # ---------- Mode Handlers ----------
    def main_menu(self, surface: DrawList, frame: FrameInput) -> GameMode:
        surface.cls()
        surface.print_centered(5, "Welcome to Flappy Game!")
        surface.print_centered(8, "(P) Play Game")
        surface.print_centered(9, "(Q) Quit Game")

        return self._dispatch_menu_key(surface, frame.key, GameMode.MENU)

    def play(self, surface: DrawList, frame: FrameInput) -> GameMode:
        surface.cls(NAVY)

        # Physics runs in fixed steps no matter how fast frames arrive
        self.frame_time += frame.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()

        if frame.key is Key.SPACE:
            self.player.flap()

        self.player.render(surface)
        surface.print(0, 0, "Press space to Flap")
        surface.print(0, 1, f"Score: {self.score}")

        self.obstacle.render(surface, self.player.x)

        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.create(self.player.x + SCREEN_WIDTH, self.score, self.rng)

        if self.player.y > SCREEN_HEIGHT or self.obstacle.hit_obstacle(self.player):
            return GameMode.DEAD
        return GameMode.PLAYING

    def dead(self, surface: DrawList, frame: FrameInput) -> GameMode:
        surface.cls()
        surface.print_centered(5, "You are dead!")
        surface.print_centered(6, f"You earned {self.score} points")
        surface.print_centered(8, "(P) Play Again")
        surface.print_centered(9, "(Q) Quit Game")

        return self._dispatch_menu_key(surface, frame.key, GameMode.DEAD)

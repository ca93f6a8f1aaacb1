#!/usr/bin/env python3
"""
flappy_client.py

pygame driver: draws the 80x50 character grid in a window, feeds key presses
and frame times into the game core, and stops when the core asks to quit.
"""

import argparse
import random
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, RENDER_FPS, WINDOW_TITLE,
    BLACK, WHITE
)
from .display import (
    ClearScreen, DrawList, FrameInput, Key, PrintCentered, PrintText, SetCell
)
from .game_state import State

KEY_MAP: Dict[int, Key] = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_p: Key.P,
    pygame.K_q: Key.Q,
}


def translate_events(events: Iterable) -> Tuple[Optional[Key], bool]:
    """
    Reduces a frame's pygame events to (key, closed).
    Only the first recognised key press counts; the core reads one key per tick.
    """
    key = None
    closed = False
    for event in events:
        if event.type == pygame.QUIT:
            closed = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                closed = True
            elif key is None and event.key in KEY_MAP:
                key = KEY_MAP[event.key]
    return key, closed


# ----------------- Terminal Window (grid rendering) -----------------

class TerminalWindow:
    def __init__(self, cell_size: int = CELL_SIZE):
        self.cell_size = cell_size
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH * cell_size, SCREEN_HEIGHT * cell_size))
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.Font(None, cell_size + 4)
        self._glyphs: Dict[Tuple[str, tuple], pygame.Surface] = {}

    def draw(self, draw_list: DrawList):
        """Replays one tick's draw commands onto the window surface."""
        for command in draw_list.commands:
            if isinstance(command, ClearScreen):
                self.screen.fill(command.background or BLACK)
            elif isinstance(command, SetCell):
                self._put(command.x, command.y, command.glyph, command.fg, command.bg)
            elif isinstance(command, PrintText):
                self._write(command.x, command.y, command.text)
            elif isinstance(command, PrintCentered):
                x = (SCREEN_WIDTH - len(command.text)) // 2
                self._write(x, command.y, command.text)

    def _write(self, x: int, y: int, text: str):
        for offset, glyph in enumerate(text):
            self._put(x + offset, y, glyph, WHITE, BLACK)

    def _put(self, x: int, y: int, glyph: str, fg, bg):
        # Off-grid cells are clipped silently
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return

        rect = pygame.Rect(x * self.cell_size, y * self.cell_size,
                           self.cell_size, self.cell_size)
        self.screen.fill(bg, rect)
        if glyph.strip():
            surf = self._glyph(glyph, fg)
            self.screen.blit(surf, surf.get_rect(center=rect.center))

    def _glyph(self, glyph: str, fg) -> pygame.Surface:
        cache_key = (glyph, tuple(fg))
        if cache_key not in self._glyphs:
            self._glyphs[cache_key] = self.font.render(glyph, True, fg)
        return self._glyphs[cache_key]


# ----------------- Game Client (main loop) -----------------

class FlappyClient:
    def __init__(self, seed: Optional[int] = None, cell_size: int = CELL_SIZE,
                 fps: int = RENDER_FPS):
        pygame.init()
        self.window = TerminalWindow(cell_size)
        self.state = State(random.Random(seed))
        self.clock = pygame.time.Clock()
        self.fps = fps

    def run(self):
        """The main client execution loop."""
        print(f"Window opened: {SCREEN_WIDTH}x{SCREEN_HEIGHT} cells at {self.window.cell_size}px.")

        running = True
        while running:
            frame_time_ms = self.clock.tick(self.fps)

            key, closed = translate_events(pygame.event.get())
            if closed:
                print("Window closed.")
                break

            draw_list = self.state.tick(FrameInput(key=key, frame_time_ms=float(frame_time_ms)))
            self.window.draw(draw_list)
            pygame.display.flip()

            if draw_list.quitting:
                print(f"Quit requested. Last score: {self.state.score}")
                running = False

        pygame.quit()


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Game on a character grid.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle placement (random if omitted).")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="Pixels per character cell.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS,
                        help="Display frames per second.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        client = FlappyClient(seed=args.seed, cell_size=args.cell_size, fps=args.fps)
    except pygame.error as e:
        print(f"Could not open window: {e}. Exiting.")
        pygame.quit()
        return 1

    client.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

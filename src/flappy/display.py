"""
display.py: The contract between the game core and a display/input driver.

A driver hands the core one FrameInput per display frame and receives a
DrawList back: the ordered draw commands for that frame plus the quit flag.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

Color = Tuple[int, int, int]


class Key(Enum):
    """Keys the game reacts to. Drivers map their native key codes onto these."""
    SPACE = "space"
    P = "p"
    Q = "q"


@dataclass(frozen=True)
class FrameInput:
    """Immutable snapshot of one display frame."""
    key: Optional[Key] = None
    frame_time_ms: float = 0.0


# ---------- Draw Commands ----------
@dataclass(frozen=True)
class ClearScreen:
    background: Optional[Color] = None


@dataclass(frozen=True)
class SetCell:
    x: int
    y: int
    fg: Color
    bg: Color
    glyph: str


@dataclass(frozen=True)
class PrintText:
    x: int
    y: int
    text: str


@dataclass(frozen=True)
class PrintCentered:
    y: int
    text: str


DrawCommand = Union[ClearScreen, SetCell, PrintText, PrintCentered]


@dataclass
class DrawList:
    """Records what the core wants drawn during a single tick."""
    commands: List[DrawCommand] = field(default_factory=list)
    quitting: bool = False

    def cls(self, background: Optional[Color] = None):
        self.commands.append(ClearScreen(background))

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        self.commands.append(SetCell(x, y, fg, bg, glyph))

    def print(self, x: int, y: int, text: str):
        self.commands.append(PrintText(x, y, text))

    def print_centered(self, y: int, text: str):
        self.commands.append(PrintCentered(y, text))

    def request_quit(self):
        self.quitting = True

    def texts(self) -> List[str]:
        """Every string printed this tick, in draw order."""
        return [c.text for c in self.commands if isinstance(c, (PrintText, PrintCentered))]

    def cells(self) -> List[SetCell]:
        return [c for c in self.commands if isinstance(c, SetCell)]

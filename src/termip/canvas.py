"""
Braille canvas for drawing the world map in the terminal.

Every terminal cell holds a 2x4 grid of braille dots, so a canvas of
``width`` x ``height`` cells has ``width * 2`` x ``height * 4`` dots.
Shapes are described in data coordinates (longitude, latitude) and mapped
onto that dot grid. Drawing happens in layers; a cell painted in a later
layer replaces whatever the earlier layers put there.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from rich.style import Style
from rich.text import Text

from termip.world import COASTLINES

BRAILLE_BLANK = 0x2800

# Bit for the dot at [row][column] inside one braille cell
_DOT_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

Bounds = Tuple[float, float]
Cell = Tuple[int, int]


class Canvas:
    """A grid of braille cells spanning ``x_bounds`` by ``y_bounds``."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: Bounds = (-180.0, 180.0),
        y_bounds: Bounds = (-90.0, 90.0),
    ):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self._layers: List[Dict[Cell, Tuple[int, str]]] = [{}]

    @property
    def resolution(self) -> Tuple[int, int]:
        """Number of addressable dots (horizontal, vertical)."""
        return self.width * 2, self.height * 4

    def layer(self) -> None:
        """Start a new layer on top of everything drawn so far."""
        self._layers.append({})

    def paint(self, x: float, y: float, color: str) -> None:
        """Set the dot under data point (x, y). Points out of bounds are dropped."""
        left, right = self.x_bounds
        bottom, top = self.y_bounds
        if not (left <= x <= right and bottom <= y <= top):
            return
        dots_x, dots_y = self.resolution
        if not dots_x or not dots_y:
            return

        dx = int((x - left) * (dots_x - 1) / (right - left))
        dy = int((top - y) * (dots_y - 1) / (top - bottom))
        cell = (dx // 2, dy // 4)
        current = self._layers[-1]
        bits = current[cell][0] if cell in current else 0
        current[cell] = (bits | _DOT_BITS[dy % 4][dx % 2], color)

    def draw(self, shape) -> None:
        shape.draw(self)

    def cells(self) -> Dict[Cell, Tuple[int, str]]:
        """Merge all layers; later layers win per cell."""
        merged: Dict[Cell, Tuple[int, str]] = {}
        for layer in self._layers:
            merged.update(layer)
        return merged

    def to_text(self) -> Text:
        text = Text(no_wrap=True, end="")
        merged = self.cells()
        for row in range(self.height):
            for col in range(self.width):
                if (col, row) in merged:
                    bits, color = merged[(col, row)]
                    text.append(chr(BRAILLE_BLANK + bits), style=Style(color=color))
                else:
                    text.append(" ")
            if row < self.height - 1:
                text.append("\n")
        return text


# =============================================================================
# SHAPES
# =============================================================================

@dataclass(frozen=True)
class Line:
    """Straight segment from (x1, y1) to (x2, y2) in data coordinates."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: str

    def draw(self, canvas: Canvas) -> None:
        dots_x, dots_y = canvas.resolution
        left, right = canvas.x_bounds
        bottom, top = canvas.y_bounds
        span_x = abs(self.x2 - self.x1) * dots_x / (right - left)
        span_y = abs(self.y2 - self.y1) * dots_y / (top - bottom)
        steps = int(max(span_x, span_y)) + 1
        for i in range(steps + 1):
            t = i / steps
            canvas.paint(
                self.x1 + (self.x2 - self.x1) * t,
                self.y1 + (self.y2 - self.y1) * t,
                self.color,
            )


@dataclass(frozen=True)
class WorldMap:
    """Continental coastlines."""

    color: str

    def draw(self, canvas: Canvas) -> None:
        for outline in COASTLINES:
            for (x1, y1), (x2, y2) in zip(outline, outline[1:]):
                Line(x1, y1, x2, y2, self.color).draw(canvas)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class RenderRect:
    """Axis-aligned rectangle in world coordinates, (x, y) is its center."""

    x: float
    y: float
    width: float
    height: float
    color: RGB


@dataclass(frozen=True)
class OverlayRect:

    x: float
    y: float
    width: float
    height: float
    color: RGBA


@dataclass(frozen=True)
class Frame:
    """Everything the presentation layer needs to draw one frame."""

    background: RGB
    rects: Tuple[RenderRect, ...]
    overlay: Tuple[OverlayRect, ...]


# ==================== INPUT EVENTS ====================

class BrushKind(Enum):
    SQUARE = "square"
    CIRCLE = "circle"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class ButtonPressed:
    button: MouseButton


@dataclass(frozen=True)
class ButtonReleased:
    button: MouseButton


@dataclass(frozen=True)
class ResetRequested:
    pass


@dataclass(frozen=True)
class ExitRequested:
    pass


@dataclass(frozen=True)
class GridResized:
    size: int


@dataclass(frozen=True)
class BrushChanged:
    kind: Optional[BrushKind] = None
    size: Optional[int] = None


@dataclass(frozen=True)
class ColorsChanged:
    primary: Optional[RGB] = None
    secondary: Optional[RGB] = None


@dataclass(frozen=True)
class ViewportResized:
    width: float
    height: float


@dataclass(frozen=True)
class DisplayChanged:
    display_fps: Optional[bool] = None
    dark_mode: Optional[bool] = None


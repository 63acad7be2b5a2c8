"""Panel types, door properties and cutting specifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PanelKind(str, Enum):
    """Types of glass panels in a shower chain."""

    FIXED = "fixed"
    DOOR = "door"


class HingeSide(str, Enum):
    """Side of a door panel that carries the hinges."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "HingeSide":
        """The handle side for a door hinged on this side."""
        return HingeSide.RIGHT if self is HingeSide.LEFT else HingeSide.LEFT


class SwingDirection(str, Enum):
    """Door swing direction.

    Attributes:
        OUT: Out-swing only, closes against a 90 degree stopper seal.
        BOTH: Bi-swing, closes against a bubble seal.
    """

    OUT = "out"
    BOTH = "both"


class TopEdgeType(str, Enum):
    """Shape of the top edge of a panel."""

    LEVEL = "level"
    SLOPED = "sloped"


@dataclass(frozen=True)
class DoorProperties:
    """Hinge side and swing direction of a door panel."""

    hinge_side: HingeSide = HingeSide.RIGHT
    swing_direction: SwingDirection = SwingDirection.OUT

    @property
    def handle_side(self) -> HingeSide:
        """Side of the door that carries the handle."""
        return self.hinge_side.opposite


@dataclass(frozen=True)
class NotchSpec:
    """Bottom-corner notches cut from a panel.

    A notch is a rectangular cut-out at a bottom corner, typically used to
    clear a shower tray lip or a step in the floor.

    Attributes:
        bottom_left: Whether the bottom-left corner is notched.
        bottom_right: Whether the bottom-right corner is notched.
        width_mm: Notch width along the panel, measured from the corner.
        height_mm: Notch height measured up from the bottom edge.
    """

    bottom_left: bool = False
    bottom_right: bool = False
    width_mm: float | None = None
    height_mm: float | None = None

    def __post_init__(self) -> None:
        if self.has_notch:
            if self.width_mm is None or self.height_mm is None:
                raise ValueError("Notch width and height are required for notched corners")
            if self.width_mm <= 0 or self.height_mm <= 0:
                raise ValueError("Notch dimensions must be positive")

    @property
    def has_notch(self) -> bool:
        """True if either bottom corner is notched."""
        return self.bottom_left or self.bottom_right

    @property
    def corner_count(self) -> int:
        """Number of notched corners."""
        return int(self.bottom_left) + int(self.bottom_right)

    @classmethod
    def none(cls) -> NotchSpec:
        """A panel without notches."""
        return cls()


@dataclass(frozen=True)
class TopEdge:
    """Top edge profile of a panel.

    Attributes:
        type: Level or sloped top edge.
        direction: For sloped tops, the side whose top corner is lower.
        drop_mm: For sloped tops, how far the low corner drops.
    """

    type: TopEdgeType = TopEdgeType.LEVEL
    direction: HingeSide | None = None
    drop_mm: float | None = None

    def __post_init__(self) -> None:
        if self.type is TopEdgeType.SLOPED:
            if self.drop_mm is None:
                raise ValueError("drop_mm is required for a sloped top edge")
            if self.drop_mm <= 0:
                raise ValueError("drop_mm must be positive")
            if self.direction is None:
                raise ValueError("direction is required for a sloped top edge")

    @property
    def is_sloped(self) -> bool:
        return self.type is TopEdgeType.SLOPED

    def drop_at(self, side: HingeSide) -> float:
        """Drop applied to the top corner on the given side."""
        if self.is_sloped and self.direction is side:
            return self.drop_mm or 0.0
        return 0.0

    @classmethod
    def level(cls) -> TopEdge:
        return cls()

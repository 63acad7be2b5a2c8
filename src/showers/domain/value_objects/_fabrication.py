"""Fabrication options, rakes and deduction line items."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._panels import HingeSide


class MountingStyle(str, Enum):
    """How fixed glass is held at walls, floor and ceiling."""

    CHANNEL = "channel"
    CLAMPS = "clamps"


class ThresholdType(str, Enum):
    """Threshold fitted under a door."""

    NONE = "none"
    CLEAR_THRESHOLD = "clear_threshold"
    TAPERED_THRESHOLD = "tapered_threshold"


class HeightMode(str, Enum):
    """How the glass height of a door is measured.

    Attributes:
        STANDARD: Glass height is entered directly on the hinge side.
        FLOOR_TO_CEILING: Height runs floor to ceiling less an air gap.
    """

    STANDARD = "standard"
    FLOOR_TO_CEILING = "floor_to_ceiling"


class HingeFamily(str, Enum):
    """Hinge hardware families.

    Attributes:
        GENEVA: Standard capacity hinge.
        BELLAGIO: Heavy-duty hinge for wide or heavy doors.
    """

    GENEVA = "geneva"
    BELLAGIO = "bellagio"


class HandleType(str, Enum):
    """Door handle hardware."""

    KNOB = "knob"
    PULL_HANDLE = "pull_handle"


class WallRakeDirection(str, Enum):
    """Lean of an out-of-plumb wall.

    Attributes:
        OUT: Top of the wall leans away, the opening is wider at the top.
        IN: Top of the wall leans in, the opening is wider at the bottom.
    """

    OUT = "out"
    IN = "in"


@dataclass(frozen=True)
class FloorRake:
    """Floor fall across a panel.

    Attributes:
        amount_mm: Height difference between the two sides.
        lower_side: Side on which the floor is lower.
    """

    amount_mm: float
    lower_side: HingeSide

    def __post_init__(self) -> None:
        if self.amount_mm < 0:
            raise ValueError("Floor rake amount must be non-negative")


@dataclass(frozen=True)
class WallRake:
    """Out-of-plumb wall beside a wall-fixed panel."""

    amount_mm: float
    direction: WallRakeDirection

    def __post_init__(self) -> None:
        if self.amount_mm < 0:
            raise ValueError("Wall rake amount must be non-negative")


@dataclass(frozen=True)
class CornerConfig:
    """Corner and wall-fix situation of a single panel.

    At a 90 degree corner the front panel runs past the return ("long"
    panel) and the return panel butts into it ("short" panel).

    Attributes:
        is_long_panel: True for the panel that runs past the corner.
        has_left_corner: A 90 degree junction sits on the left edge.
        has_right_corner: A 90 degree junction sits on the right edge.
        left_wall_fixed: The left edge is fixed to a wall.
        right_wall_fixed: The right edge is fixed to a wall.
    """

    is_long_panel: bool = True
    has_left_corner: bool = False
    has_right_corner: bool = False
    left_wall_fixed: bool = False
    right_wall_fixed: bool = False


@dataclass(frozen=True)
class DeductionItem:
    """One itemised deduction, e.g. ``Hinge side seal: 8mm``."""

    label: str
    amount_mm: float

    def __str__(self) -> str:
        return f"{self.label}: {self.amount_mm:g}mm"


@dataclass(frozen=True)
class DeductionBreakdown:
    """Itemised deductions along one axis of a panel."""

    items: tuple[DeductionItem, ...] = field(default_factory=tuple)

    @property
    def total(self) -> float:
        return sum(item.amount_mm for item in self.items)

    @property
    def breakdown(self) -> list[str]:
        """Human-readable line items."""
        return [str(item) for item in self.items]

    def amount_for(self, label: str) -> float:
        """Sum of all items with the given label."""
        return sum(item.amount_mm for item in self.items if item.label == label)

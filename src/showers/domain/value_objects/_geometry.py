"""Plan and screen geometry value objects.

Plan coordinates are in millimetres (one unit per mm) with the anchor panel
starting at the origin and running along the positive X axis. Screen
coordinates are produced by the perspective projector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class JunctionAngle(int, Enum):
    """Supported angles between adjacent panels."""

    RIGHT_ANGLE = 90
    STRAIGHT = 180


@dataclass(frozen=True)
class Point2D:
    """2D point in plan or screen space. Negative values are valid."""

    x: float
    y: float

    def offset(self, dx: float, dy: float, distance: float = 1.0) -> Point2D:
        """Return the point moved ``distance`` along ``(dx, dy)``."""
        return Point2D(x=self.x + dx * distance, y=self.y + dy * distance)


@dataclass(frozen=True)
class Direction2D:
    """Unit direction vector of a traced panel."""

    dx: float
    dy: float

    def rotated_left_walk(self) -> Direction2D:
        """Quarter turn applied when walking left across a 90 degree junction."""
        return Direction2D(dx=-self.dy, dy=self.dx)

    def rotated_right_walk(self) -> Direction2D:
        """Quarter turn applied when walking right across a 90 degree junction."""
        return Direction2D(dx=self.dy, dy=-self.dx)

    def dot(self, other: Direction2D) -> float:
        return self.dx * other.dx + self.dy * other.dy

    @property
    def inward_normal(self) -> Direction2D:
        """Normal to the left of the direction of travel."""
        return Direction2D(dx=-self.dy, dy=self.dx)


@dataclass(frozen=True)
class Junction:
    """Joint between two adjacent panels, referenced by stable panel ids.

    Attributes:
        left_panel_id: Id of the panel on the left of the joint.
        right_panel_id: Id of the panel on the right of the joint.
        angle_deg: 180 for an inline joint, 90 for a corner.
    """

    left_panel_id: str
    right_panel_id: str
    angle_deg: JunctionAngle = JunctionAngle.STRAIGHT

    def __post_init__(self) -> None:
        if self.left_panel_id == self.right_panel_id:
            raise ValueError("A junction must join two different panels")
        # Accept plain ints from callers; normalise to the enum.
        object.__setattr__(self, "angle_deg", JunctionAngle(self.angle_deg))

    @property
    def is_corner(self) -> bool:
        return self.angle_deg is JunctionAngle.RIGHT_ANGLE


@dataclass(frozen=True)
class PanelSegment:
    """Resolved plan segment for one panel.

    Attributes:
        panel_id: Id of the traced panel.
        start: Point where tracing entered the panel.
        end: Point where tracing left the panel.
        direction: Unit direction from start to end.
    """

    panel_id: str
    start: Point2D
    end: Point2D
    direction: Direction2D

    @property
    def x1(self) -> float:
        return self.start.x

    @property
    def y1(self) -> float:
        return self.start.y

    @property
    def x2(self) -> float:
        return self.end.x

    @property
    def y2(self) -> float:
        return self.end.y

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    def is_collinear_with(self, other: PanelSegment, tolerance: float = 1e-9) -> bool:
        """True if both segments run along the same line."""
        cross = self.direction.dx * other.direction.dy - self.direction.dy * other.direction.dx
        if abs(cross) > tolerance:
            return False
        # Parallel; check that other's start lies on this line.
        rx = other.x1 - self.x1
        ry = other.y1 - self.y1
        return abs(self.direction.dx * ry - self.direction.dy * rx) <= tolerance

    def point_at(self, distance: float) -> Point2D:
        """Point ``distance`` mm along the segment from its start."""
        return self.start.offset(self.direction.dx, self.direction.dy, distance)


@dataclass(frozen=True)
class PlanBounds:
    """Axis-aligned bounding box of a traced chain."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def center(self) -> Point2D:
        return Point2D(x=(self.min_x + self.max_x) / 2, y=(self.min_y + self.max_y) / 2)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class NotchOutline:
    """Stepped base edge of a notched panel in plan.

    Attributes:
        panel_id: Id of the outlined panel.
        outline: Ordered vertices from segment start to segment end, stepping
            inward around each notched corner.
        cutouts: One closed quad per notched corner.
    """

    panel_id: str
    outline: tuple[Point2D, ...]
    cutouts: tuple[tuple[Point2D, ...], ...] = ()

    @property
    def is_notched(self) -> bool:
        return bool(self.cutouts)

"""Door measurement records and derived values.

Measurements are laser readings in millimetres taken from a vertical and a
horizontal laser line projected across the opening. Every reading is optional
until the installer supplies it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum


class DoorConfigType(str, Enum):
    """Door layout within the opening."""

    LEFT = "left"
    RIGHT = "right"
    DOUBLE = "double"


class GlassType(str, Enum):
    CLEAR = "clear"
    LOW_IRON = "low_iron"
    SATIN = "satin"
    BRONZE = "bronze"


class HardwareFinish(str, Enum):
    CHROME = "chrome"
    BLACK = "black"
    BRUSHED_NICKEL = "brushed_nickel"
    BRASS = "brass"
    OTHER = "other"


@dataclass(frozen=True)
class DoorMeasurements:
    """Raw laser readings for a single door opening.

    Attributes:
        left_wall_to_vertical_laser_bottom: B1, left wall to laser at the floor.
        vertical_laser_to_right_wall_bottom: B2, laser to right wall at the floor.
        left_wall_to_vertical_laser_top: T1, left wall to laser at the top.
        vertical_laser_to_right_wall_top: T2, laser to right wall at the top.
        floor_to_horizontal_laser_left: H1, floor to laser on the left.
        horizontal_laser_to_ceiling_left: H2, laser to ceiling on the left.
        floor_to_horizontal_laser_right: H3, floor to laser on the right.
        horizontal_laser_to_ceiling_right: H4, laser to ceiling on the right.
        glass_height_hinge_side_mm: Standard mode glass height on the hinge side.
        horizontal_laser_to_top_level_left: Standard mode laser to top level, left.
        horizontal_laser_to_top_level_right: Standard mode laser to top level, right.
    """

    left_wall_to_vertical_laser_bottom: float | None = None
    vertical_laser_to_right_wall_bottom: float | None = None
    left_wall_to_vertical_laser_top: float | None = None
    vertical_laser_to_right_wall_top: float | None = None
    floor_to_horizontal_laser_left: float | None = None
    horizontal_laser_to_ceiling_left: float | None = None
    floor_to_horizontal_laser_right: float | None = None
    horizontal_laser_to_ceiling_right: float | None = None
    glass_height_hinge_side_mm: float | None = None
    horizontal_laser_to_top_level_left: float | None = None
    horizontal_laser_to_top_level_right: float | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_value(self, name: str, value: float | None) -> DoorMeasurements:
        """Return a copy with one reading replaced."""
        if name not in self.field_names():
            raise KeyError(f"Unknown measurement: {name}")
        return replace(self, **{name: value})

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass(frozen=True)
class DerivedValues:
    """Opening dimensions derived from complete measurement pairs.

    A value is None while its inputs are incomplete; consumers must treat
    None as "not yet computable", never as zero.
    """

    opening_width_top_mm: float | None = None
    opening_width_bottom_mm: float | None = None
    height_left_mm: float | None = None
    height_right_mm: float | None = None
    wall_rake_mm: float | None = None
    width_difference_mm: float | None = None

    @property
    def max_opening_width_mm(self) -> float | None:
        widths = [w for w in (self.opening_width_bottom_mm, self.opening_width_top_mm) if w is not None]
        return max(widths) if widths else None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)

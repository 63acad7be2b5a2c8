"""Domain entities for the shower configurator.

Panels and the panel chain are the only mutable objects in the domain. They
are edited in place by the owning UI state; every engine service treats them
as a read-only snapshot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .value_objects import (
    DoorProperties,
    HingeSide,
    Junction,
    JunctionAngle,
    NotchSpec,
    PanelKind,
    TopEdge,
    TopEdgeType,
)


class ChainConfigurationError(ValueError):
    """Raised when a panel chain cannot be traced or edited as requested."""

    pass


def coerce_positive(value: object) -> float | None:
    """Convert user input to a positive finite float.

    Returns None for anything non-numeric, non-finite or not strictly
    positive, so callers can keep the previous value.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


@dataclass
class Panel:
    """A single glass panel in a shower chain.

    Attributes:
        id: Stable identifier, unique within a chain.
        kind: Fixed panel or hinged door.
        width_mm: Tight (opening) width of the panel in millimetres.
        door_properties: Hinge side and swing for door panels.
        notches: Bottom corner notches.
        top_edge: Level or sloped top edge.
    """

    id: str
    kind: PanelKind
    width_mm: float
    door_properties: DoorProperties | None = None
    notches: NotchSpec = field(default_factory=NotchSpec)
    top_edge: TopEdge = field(default_factory=TopEdge)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Panel id must not be empty")
        if self.width_mm <= 0:
            raise ValueError("Panel width must be positive")
        if self.kind is PanelKind.DOOR and self.door_properties is None:
            self.door_properties = DoorProperties()

    @property
    def is_door(self) -> bool:
        return self.kind is PanelKind.DOOR

    @classmethod
    def fixed(cls, panel_id: str, width_mm: float, **kwargs) -> Panel:
        """Create a fixed panel."""
        return cls(id=panel_id, kind=PanelKind.FIXED, width_mm=width_mm, **kwargs)

    @classmethod
    def door(
        cls,
        panel_id: str,
        width_mm: float,
        hinge_side: HingeSide = HingeSide.RIGHT,
        **kwargs,
    ) -> Panel:
        """Create a hinged door panel."""
        return cls(
            id=panel_id,
            kind=PanelKind.DOOR,
            width_mm=width_mm,
            door_properties=DoorProperties(hinge_side=hinge_side),
            **kwargs,
        )

    def set_width(self, value: object) -> bool:
        """Update the width from user input.

        Invalid input is ignored and the previous width retained.

        Returns:
            True if the width was updated.
        """
        width = coerce_positive(value)
        if width is None:
            return False
        self.width_mm = width
        return True

    def set_notches(self, bottom_left: bool, bottom_right: bool) -> None:
        """Toggle notched corners, keeping any previously entered size."""
        if (bottom_left or bottom_right) and (
            self.notches.width_mm is None or self.notches.height_mm is None
        ):
            raise ValueError("Set a notch size before enabling notched corners")
        self.notches = replace(self.notches, bottom_left=bottom_left, bottom_right=bottom_right)

    def set_notch_size(self, width: object, height: object) -> bool:
        """Update notch dimensions from user input.

        Returns:
            True if both dimensions were valid and applied.
        """
        width_mm = coerce_positive(width)
        height_mm = coerce_positive(height)
        if width_mm is None or height_mm is None:
            return False
        self.notches = replace(self.notches, width_mm=width_mm, height_mm=height_mm)
        return True

    def set_drop(self, direction: HingeSide, drop: object) -> bool:
        """Make the top edge sloped, dropping on ``direction`` by ``drop`` mm.

        Returns:
            True if the drop was valid and applied.
        """
        drop_mm = coerce_positive(drop)
        if drop_mm is None:
            return False
        self.top_edge = TopEdge(type=TopEdgeType.SLOPED, direction=direction, drop_mm=drop_mm)
        return True

    def set_level_top(self) -> None:
        self.top_edge = TopEdge.level()

    def elevation_errors(self, height_mm: float) -> list[str]:
        """Check that notches and the top edge fit the panel height.

        Args:
            height_mm: Tight height of the panel.

        Returns:
            Error messages; empty when the face is a simple outline.
        """
        errors: list[str] = []
        drop = self.top_edge.drop_mm if self.top_edge.is_sloped else 0.0
        if drop and drop >= height_mm:
            errors.append(
                f"Top edge drop of {drop:g}mm does not fit a {height_mm:g}mm panel"
            )
            return errors

        notches = self.notches
        sides = [
            side
            for side, notched in (
                (HingeSide.LEFT, notches.bottom_left),
                (HingeSide.RIGHT, notches.bottom_right),
            )
            if notched
        ]
        for side in sides:
            corner_height = height_mm - self.top_edge.drop_at(side)
            if notches.height_mm is not None and notches.height_mm >= corner_height:
                errors.append(
                    f"Notch height of {notches.height_mm:g}mm does not fit under "
                    f"the {corner_height:g}mm {side.value} edge"
                )
        return errors


@dataclass
class PanelChain:
    """An ordered chain of panels joined by junctions.

    Panels are addressed by stable id. The left-to-right ordering is kept
    separately in ``order`` and every junction names the two panels it
    joins, so inserting or removing a panel never shifts the meaning of
    another junction.

    Attributes:
        panels: Panel records keyed by id.
        order: Panel ids from left to right.
        junctions: Junctions keyed by the id of their left panel.
        anchor_id: Id of the door panel that tracing starts from.
        left_wall: Whether the leftmost panel is fixed to a wall.
        right_wall: Whether the rightmost panel is fixed to a wall.
    """

    panels: dict[str, Panel] = field(default_factory=dict)
    order: list[str] = field(default_factory=list)
    junctions: dict[str, Junction] = field(default_factory=dict)
    anchor_id: str | None = None
    left_wall: bool = True
    right_wall: bool = True

    @classmethod
    def from_panels(
        cls,
        panels: list[Panel],
        angles: list[int | JunctionAngle] | None = None,
        anchor_id: str | None = None,
        left_wall: bool = True,
        right_wall: bool = True,
    ) -> PanelChain:
        """Build a chain from panels in left-to-right order.

        Args:
            panels: Panels from left to right.
            angles: Junction angles between consecutive panels (N-1 values).
                Defaults to all 180 degrees.
            anchor_id: Anchor panel id. Defaults to the first door panel.
            left_wall: Whether the leftmost panel is wall-fixed.
            right_wall: Whether the rightmost panel is wall-fixed.

        Raises:
            ChainConfigurationError: If ids repeat, the angle count is wrong or
                the anchor is not a door panel in the chain.
        """
        if angles is None:
            angles = [JunctionAngle.STRAIGHT] * max(len(panels) - 1, 0)
        if len(angles) != max(len(panels) - 1, 0):
            raise ChainConfigurationError(
                f"A chain of {len(panels)} panels needs {max(len(panels) - 1, 0)} "
                f"junctions, got {len(angles)}"
            )

        chain = cls(left_wall=left_wall, right_wall=right_wall)
        for panel in panels:
            if panel.id in chain.panels:
                raise ChainConfigurationError(f"Duplicate panel id: {panel.id}")
            chain.panels[panel.id] = panel
            chain.order.append(panel.id)

        for left, right, angle in zip(panels, panels[1:], angles):
            chain.junctions[left.id] = Junction(left.id, right.id, JunctionAngle(angle))

        if anchor_id is None:
            anchor_id = next((p.id for p in panels if p.is_door), None)
        if anchor_id is not None:
            chain.set_anchor(anchor_id)
        return chain

    def __len__(self) -> int:
        return len(self.order)

    def panel(self, panel_id: str) -> Panel:
        try:
            return self.panels[panel_id]
        except KeyError:
            raise ChainConfigurationError(f"Unknown panel id: {panel_id}") from None

    def index_of(self, panel_id: str) -> int:
        self.panel(panel_id)
        return self.order.index(panel_id)

    def ordered_panels(self) -> list[Panel]:
        return [self.panels[pid] for pid in self.order]

    def ordered_junctions(self) -> list[Junction]:
        """Junctions from left to right, one per adjacent pair."""
        result: list[Junction] = []
        for left_id, right_id in zip(self.order, self.order[1:]):
            junction = self.junctions.get(left_id)
            if junction is None or junction.right_panel_id != right_id:
                raise ChainConfigurationError(
                    f"Missing junction between {left_id} and {right_id}"
                )
            result.append(junction)
        return result

    def junction_after(self, panel_id: str) -> Junction | None:
        """Junction on the right edge of a panel, if any."""
        self.panel(panel_id)
        return self.junctions.get(panel_id)

    def junction_before(self, panel_id: str) -> Junction | None:
        """Junction on the left edge of a panel, if any."""
        index = self.index_of(panel_id)
        if index == 0:
            return None
        return self.junctions.get(self.order[index - 1])

    def anchor_index(self) -> int:
        """Position of the anchor panel in the chain.

        Raises:
            ChainConfigurationError: If no anchor door panel is set.
        """
        if self.anchor_id is None or self.anchor_id not in self.panels:
            raise ChainConfigurationError("Chain has no anchor door panel")
        return self.order.index(self.anchor_id)

    def set_anchor(self, panel_id: str) -> None:
        panel = self.panel(panel_id)
        if not panel.is_door:
            raise ChainConfigurationError(f"Anchor panel {panel_id} must be a door")
        self.anchor_id = panel_id

    def set_junction_angle(
        self, left_id: str, right_id: str, angle: int | JunctionAngle
    ) -> None:
        """Change the angle of the junction between two adjacent panels."""
        junction = self.junctions.get(left_id)
        if junction is None or junction.right_panel_id != right_id:
            raise ChainConfigurationError(f"Panels {left_id} and {right_id} are not adjacent")
        self.junctions[left_id] = replace(junction, angle_deg=JunctionAngle(angle))

    def insert_panel(
        self,
        index: int,
        panel: Panel,
        angle: int | JunctionAngle = JunctionAngle.STRAIGHT,
    ) -> None:
        """Insert a panel at ``index`` in the left-to-right order.

        The new panel is joined to its left neighbour at ``angle``; the
        junction it splits keeps its angle on the new panel's right edge.
        When inserted at the far left, ``angle`` joins it to the old first
        panel instead.
        """
        if panel.id in self.panels:
            raise ChainConfigurationError(f"Duplicate panel id: {panel.id}")
        if not 0 <= index <= len(self.order):
            raise ChainConfigurationError(f"Insert index {index} out of range")

        angle = JunctionAngle(angle)
        left_id = self.order[index - 1] if index > 0 else None
        right_id = self.order[index] if index < len(self.order) else None

        self.panels[panel.id] = panel
        self.order.insert(index, panel.id)

        if left_id is not None and right_id is not None:
            split_angle = self.junctions[left_id].angle_deg
            self.junctions[left_id] = Junction(left_id, panel.id, angle)
            self.junctions[panel.id] = Junction(panel.id, right_id, split_angle)
        elif left_id is not None:
            self.junctions[left_id] = Junction(left_id, panel.id, angle)
        elif right_id is not None:
            self.junctions[panel.id] = Junction(panel.id, right_id, angle)

    def add_panel_left(
        self, panel: Panel, angle: int | JunctionAngle = JunctionAngle.STRAIGHT
    ) -> None:
        self.insert_panel(0, panel, angle)

    def add_panel_right(
        self, panel: Panel, angle: int | JunctionAngle = JunctionAngle.STRAIGHT
    ) -> None:
        self.insert_panel(len(self.order), panel, angle)

    def remove_panel(self, panel_id: str) -> Panel:
        """Remove a panel and re-link its neighbours.

        A panel removed from the middle of the chain takes its left junction
        with it; its right junction now joins the two neighbours.

        Raises:
            ChainConfigurationError: For the anchor panel or the last panel.
        """
        index = self.index_of(panel_id)
        if panel_id == self.anchor_id:
            raise ChainConfigurationError("The anchor door panel cannot be removed")
        if len(self.order) <= 1:
            raise ChainConfigurationError("A chain must keep at least one panel")

        right_junction = self.junctions.pop(panel_id, None)
        if index > 0:
            left_id = self.order[index - 1]
            if right_junction is not None:
                self.junctions[left_id] = Junction(
                    left_id, right_junction.right_panel_id, right_junction.angle_deg
                )
            else:
                del self.junctions[left_id]

        self.order.pop(index)
        return self.panels.pop(panel_id)

    @property
    def door_panels(self) -> list[Panel]:
        return [p for p in self.ordered_panels() if p.is_door]

    @property
    def total_width_mm(self) -> float:
        return sum(p.width_mm for p in self.panels.values())

"""Panel chain tracing service.

This module provides the ChainGeometryResolver, which turns an ordered list of
panels and their junction angles into absolute plan segments. Tracing starts
at the anchor (door) panel and walks outwards in both directions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..entities import ChainConfigurationError
from ..value_objects import (
    Direction2D,
    Junction,
    PanelSegment,
    PlanBounds,
    Point2D,
)

if TYPE_CHECKING:
    from ..entities import Panel, PanelChain

__all__ = ["ChainGeometryResolver"]


class ChainGeometryResolver:
    """Computes plan coordinates for every panel in a chain.

    The anchor panel occupies ``(0, 0)-(width, 0)``. Panels to the left are
    traced away from the anchor's start point with an initial direction of
    ``(-1, 0)``; panels to the right continue from the anchor's end point with
    ``(1, 0)``. A 90 degree junction turns the walking direction a quarter
    turn before the next panel is laid down. The right walk turns clockwise in
    plan, so a right-hand return runs towards negative Y; the left walk turns
    the other way, so a left-hand return also runs towards negative Y.
    """

    def resolve(
        self,
        panels: Sequence[Panel],
        junctions: Sequence[Junction],
        anchor_index: int | None,
    ) -> list[PanelSegment]:
        """Trace a chain given as positional sequences.

        Args:
            panels: Panels from left to right.
            junctions: Junctions between consecutive panels (N-1 entries).
            anchor_index: Index of the anchor panel.

        Returns:
            One PanelSegment per panel, in panel order.

        Raises:
            ChainConfigurationError: If the anchor is missing or out of range,
                or the junction count does not match the panel count.
        """
        if anchor_index is None:
            raise ChainConfigurationError("Chain has no anchor door panel")
        if not 0 <= anchor_index < len(panels):
            raise ChainConfigurationError(
                f"Anchor index {anchor_index} out of range for {len(panels)} panels"
            )
        if len(junctions) != len(panels) - 1:
            raise ChainConfigurationError(
                f"A chain of {len(panels)} panels needs {len(panels) - 1} "
                f"junctions, got {len(junctions)}"
            )

        segments: list[PanelSegment | None] = [None] * len(panels)

        anchor = panels[anchor_index]
        origin = Point2D(0.0, 0.0)
        east = Direction2D(1.0, 0.0)
        segments[anchor_index] = PanelSegment(
            panel_id=anchor.id,
            start=origin,
            end=origin.offset(east.dx, east.dy, anchor.width_mm),
            direction=east,
        )

        # Left walk: the junction to the right of panel i is junctions[i]
        cursor = origin
        direction = Direction2D(-1.0, 0.0)
        for i in range(anchor_index - 1, -1, -1):
            if junctions[i].is_corner:
                direction = direction.rotated_left_walk()
            end = cursor.offset(direction.dx, direction.dy, panels[i].width_mm)
            segments[i] = PanelSegment(panels[i].id, cursor, end, direction)
            cursor = end

        # Right walk: the junction to the left of panel i is junctions[i - 1]
        cursor = segments[anchor_index].end
        direction = east
        for i in range(anchor_index + 1, len(panels)):
            if junctions[i - 1].is_corner:
                direction = direction.rotated_right_walk()
            end = cursor.offset(direction.dx, direction.dy, panels[i].width_mm)
            segments[i] = PanelSegment(panels[i].id, cursor, end, direction)
            cursor = end

        return [segment for segment in segments if segment is not None]

    def resolve_chain(self, chain: PanelChain) -> list[PanelSegment]:
        """Trace a PanelChain aggregate.

        Raises:
            ChainConfigurationError: If the chain has no anchor door panel.
        """
        return self.resolve(
            chain.ordered_panels(),
            chain.ordered_junctions(),
            chain.anchor_index(),
        )

    @staticmethod
    def bounds(segments: Sequence[PanelSegment]) -> PlanBounds:
        """Axis-aligned bounding box of all segment endpoints.

        Raises:
            ValueError: If no segments are given.
        """
        if not segments:
            raise ValueError("Cannot compute bounds of an empty chain")
        xs = [x for s in segments for x in (s.x1, s.x2)]
        ys = [y for s in segments for y in (s.y1, s.y2)]
        return PlanBounds(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))

    @staticmethod
    def total_length(segments: Sequence[PanelSegment]) -> float:
        return sum(segment.length for segment in segments)

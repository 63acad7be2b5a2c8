"""Notch outline service for traced panels."""

from __future__ import annotations

from ..value_objects import NotchOutline, NotchSpec, PanelSegment, Point2D

__all__ = ["NotchConfigurationError", "NotchGeometryResolver"]


class NotchConfigurationError(ValueError):
    """Raised when notch cut-outs would overlap or consume the whole panel."""

    pass


class NotchGeometryResolver:
    """Computes the stepped base outline of a notched panel in plan.

    The bottom-left notch sits at the segment's start point and the
    bottom-right notch at its end point. Each cut runs ``width_mm`` along the
    panel axis and ``thickness_mm + height_mm`` along the inward normal.
    """

    def __init__(self, thickness_mm: float = 10.0) -> None:
        if thickness_mm <= 0:
            raise ValueError("Glass thickness must be positive")
        self.thickness_mm = thickness_mm

    def resolve(
        self,
        segment: PanelSegment,
        notches: NotchSpec,
        thickness_mm: float | None = None,
    ) -> NotchOutline:
        """Build the notch outline for one segment.

        Args:
            segment: Resolved plan segment of the panel.
            notches: Notch specification of the owning panel.
            thickness_mm: Glass thickness. Defaults to the resolver's value.

        Returns:
            NotchOutline with the stepped base edge and one cut-out quad per
            active corner. A panel without notches yields its plain base edge.

        Raises:
            NotchConfigurationError: If the cut-outs would overlap.
        """
        if not notches.has_notch:
            return NotchOutline(panel_id=segment.panel_id, outline=(segment.start, segment.end))

        self.validate(segment.length, notches)

        thickness = self.thickness_mm if thickness_mm is None else thickness_mm
        depth = thickness + (notches.height_mm or 0.0)
        width = notches.width_mm or 0.0
        d = segment.direction
        n = d.inward_normal

        def inward(point: Point2D) -> Point2D:
            return point.offset(n.dx, n.dy, depth)

        outline: list[Point2D] = []
        cutouts: list[tuple[Point2D, ...]] = []

        start = segment.start
        if notches.bottom_left:
            along = start.offset(d.dx, d.dy, width)
            outline.extend([inward(start), inward(along), along])
            cutouts.append((start, inward(start), inward(along), along))
        else:
            outline.append(start)

        end = segment.end
        if notches.bottom_right:
            along = end.offset(d.dx, d.dy, -width)
            outline.extend([along, inward(along), inward(end)])
            cutouts.append((end, inward(end), inward(along), along))
        else:
            outline.append(end)

        return NotchOutline(
            panel_id=segment.panel_id,
            outline=tuple(outline),
            cutouts=tuple(cutouts),
        )

    @staticmethod
    def validate(panel_width_mm: float, notches: NotchSpec) -> None:
        """Reject notches that would overlap or remove the full width.

        Raises:
            NotchConfigurationError: If ``2 * width`` reaches the panel width
                with both corners notched, or ``width`` reaches it with one.
        """
        if not notches.has_notch:
            return
        width = notches.width_mm or 0.0
        consumed = width * notches.corner_count
        if consumed >= panel_width_mm:
            raise NotchConfigurationError(
                f"Notches of {width:g}mm on {notches.corner_count} corner(s) "
                f"do not fit a {panel_width_mm:g}mm panel"
            )

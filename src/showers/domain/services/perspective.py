"""Oblique perspective projection of a traced panel chain.

This module provides the PerspectiveProjector, which lifts plan segments into
3D (plan X/Y become world X/Z, panel height is world Y), rotates the scene
around the vertical axis and flattens it with a fixed foreshortening factor.
A uniform scale and offset then fit the result into a viewport.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..entities import Panel
from ..value_objects import HingeSide, PanelSegment, PlanBounds, Point2D
from .chain_geometry import ChainGeometryResolver

__all__ = [
    "PerspectiveProjector",
    "ProjectedPanel",
    "ProjectionFit",
    "ProjectionResult",
    "Viewport",
]

FORESHORTENING = 0.5
MIN_ZOOM = 0.5
MAX_ZOOM = 2.0


@dataclass(frozen=True)
class ProjectionFit:
    """Uniform scale and offset mapping projected points into a viewport."""

    scale: float
    offset_x: float
    offset_y: float

    def apply(self, point: Point2D) -> Point2D:
        return Point2D(
            x=point.x * self.scale + self.offset_x,
            y=point.y * self.scale + self.offset_y,
        )


@dataclass(frozen=True)
class Viewport:
    """Target drawing area for the projection.

    Attributes:
        width: Viewport width in screen units.
        height: Viewport height in screen units.
        padding: Total padding subtracted from each viewport dimension.
        max_scale: Upper bound on the fit scale before zoom.
        zoom: User zoom factor, between 0.5 and 2.
    """

    width: float = 1200.0
    height: float = 800.0
    padding: float = 200.0
    max_scale: float = 0.3
    zoom: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= self.padding or self.height <= self.padding:
            raise ValueError("Viewport must be larger than its padding")
        if self.max_scale <= 0:
            raise ValueError("Maximum scale must be positive")
        if not MIN_ZOOM <= self.zoom <= MAX_ZOOM:
            raise ValueError(f"Zoom must be between {MIN_ZOOM} and {MAX_ZOOM}")

    def fit(self, points: Sequence[Point2D]) -> ProjectionFit:
        """Compute the scale and offset that centre ``points`` in the viewport.

        Degenerate extents (zero width or height) are treated as 1000 units.
        """
        if not points:
            return ProjectionFit(
                scale=self.max_scale * self.zoom,
                offset_x=self.width / 2,
                offset_y=self.height / 2,
            )

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        content_w = (max_x - min_x) or 1000.0
        content_h = (max_y - min_y) or 1000.0
        scale = min(
            (self.width - self.padding) / content_w,
            (self.height - self.padding) / content_h,
            self.max_scale,
        ) * self.zoom

        return ProjectionFit(
            scale=scale,
            offset_x=self.width / 2 - ((min_x + max_x) / 2) * scale,
            offset_y=self.height / 2 - ((min_y + max_y) / 2) * scale,
        )

    def to_screen(self, point: Point2D, fit: ProjectionFit) -> Point2D:
        """Map a projected point to viewport coordinates."""
        return fit.apply(point)


@dataclass(frozen=True)
class ProjectedPanel:
    """Face polygon of one panel.

    Attributes:
        panel_id: Id of the projected panel.
        is_door: Whether the panel is a door.
        face: Polygon in projected (unscaled) space, starting at the bottom
            left and running bottom right, top right, top left.
        screen_face: The same polygon mapped into the viewport.
    """

    panel_id: str
    is_door: bool
    face: tuple[Point2D, ...]
    screen_face: tuple[Point2D, ...]


@dataclass(frozen=True)
class ProjectionResult:
    panels: tuple[ProjectedPanel, ...]
    fit: ProjectionFit
    viewport: Viewport
    view_angle_deg: float

    def for_panel(self, panel_id: str) -> ProjectedPanel:
        for projected in self.panels:
            if projected.panel_id == panel_id:
                return projected
        raise KeyError(panel_id)


class PerspectiveProjector:
    """Projects traced panels to 2D screen points.

    The projection centre is the plan bounding-box midpoint. For a view angle
    ``a`` a world point ``(x, y, z)`` maps to::

        rot_x = (x - cx) cos a - (z - cz) sin a
        rot_z = (x - cx) sin a + (z - cz) cos a
        screen = (rot_x, -y + rot_z * 0.5)
    """

    def __init__(self, panel_height_mm: float = 2100.0) -> None:
        if panel_height_mm <= 0:
            raise ValueError("Panel height must be positive")
        self.panel_height_mm = panel_height_mm

    @staticmethod
    def project_point(
        x: float,
        y: float,
        z: float,
        center: Point2D,
        view_angle_deg: float,
    ) -> Point2D:
        """Project one world point. ``center`` holds the plan centre (x, z)."""
        angle = math.radians(view_angle_deg)
        rel_x = x - center.x
        rel_z = z - center.y
        rot_x = rel_x * math.cos(angle) - rel_z * math.sin(angle)
        rot_z = rel_x * math.sin(angle) + rel_z * math.cos(angle)
        return Point2D(x=rot_x, y=-y + rot_z * FORESHORTENING)

    def project(
        self,
        segments: Sequence[PanelSegment],
        panels: Mapping[str, Panel] | Sequence[Panel],
        panel_height_mm: float | None = None,
        view_angle_deg: float = 30.0,
        viewport: Viewport | None = None,
    ) -> ProjectionResult:
        """Project every segment's face polygon and fit it to a viewport.

        Args:
            segments: Resolved plan segments.
            panels: Panels keyed by id, or a sequence of panels.
            panel_height_mm: Height of the glass. Defaults to the projector's.
            view_angle_deg: Azimuth in degrees, between -90 and 90.
            viewport: Target viewport. Defaults to 1200x800.

        Returns:
            ProjectionResult with per-panel faces and the computed fit.

        Raises:
            ValueError: If the view angle is out of range, the height is not
                positive or there are no segments.
        """
        if not -90.0 <= view_angle_deg <= 90.0:
            raise ValueError("View angle must be between -90 and 90 degrees")
        height = self.panel_height_mm if panel_height_mm is None else panel_height_mm
        if height <= 0:
            raise ValueError("Panel height must be positive")
        viewport = viewport or Viewport()
        by_id = panels if isinstance(panels, Mapping) else {p.id: p for p in panels}

        bounds: PlanBounds = ChainGeometryResolver.bounds(segments)
        center = bounds.center

        def project(x: float, y: float, z: float) -> Point2D:
            return self.project_point(x, y, z, center, view_angle_deg)

        fit_points: list[Point2D] = []
        for seg in segments:
            for y in (0.0, height):
                fit_points.append(project(seg.x1, y, seg.y1))
                fit_points.append(project(seg.x2, y, seg.y2))
        fit = viewport.fit(fit_points)

        projected: list[ProjectedPanel] = []
        for seg in segments:
            panel = by_id[seg.panel_id]
            face = tuple(
                project(point.x, y, point.y)
                for point, y in self._elevation_outline(seg, panel, height)
            )
            projected.append(
                ProjectedPanel(
                    panel_id=seg.panel_id,
                    is_door=panel.is_door,
                    face=face,
                    screen_face=tuple(viewport.to_screen(p, fit) for p in face),
                )
            )

        return ProjectionResult(
            panels=tuple(projected),
            fit=fit,
            viewport=viewport,
            view_angle_deg=view_angle_deg,
        )

    @staticmethod
    def _elevation_outline(
        segment: PanelSegment, panel: Panel, height: float
    ) -> list[tuple[Point2D, float]]:
        """Face corners as (plan point, world height) pairs."""
        length = segment.length
        notches = panel.notches
        notch_w = notches.width_mm or 0.0
        notch_h = notches.height_mm or 0.0

        corners: list[tuple[Point2D, float]] = []
        if notches.bottom_left:
            corners.append((segment.point_at(0.0), notch_h))
            corners.append((segment.point_at(notch_w), notch_h))
            corners.append((segment.point_at(notch_w), 0.0))
        else:
            corners.append((segment.start, 0.0))

        if notches.bottom_right:
            corners.append((segment.point_at(length - notch_w), 0.0))
            corners.append((segment.point_at(length - notch_w), notch_h))
            corners.append((segment.point_at(length), notch_h))
        else:
            corners.append((segment.end, 0.0))

        top = panel.top_edge
        corners.append((segment.end, height - top.drop_at(HingeSide.RIGHT)))
        corners.append((segment.start, height - top.drop_at(HingeSide.LEFT)))
        return corners

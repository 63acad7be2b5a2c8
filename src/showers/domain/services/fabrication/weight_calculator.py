"""Glass weight estimation service."""

from __future__ import annotations

from .rules import DEFAULT_RULES, FabricationRules


class GlassWeightCalculator:
    """Service for estimating the weight of a glass panel.

    Weight is the average height times the average width (both in metres)
    times the weight per square metre of the glass thickness. The result is
    not rounded so that hinge limit comparisons see the exact value.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def weight_kg(
        self,
        width_mm: float,
        height_mm: float,
        thickness_mm: float | None = None,
    ) -> float:
        """Weight of a rectangular panel.

        Args:
            width_mm: Panel width.
            height_mm: Panel height.
            thickness_mm: Glass thickness. Defaults to the rules' thickness.

        Returns:
            Weight in kilograms.

        Raises:
            ValueError: If a dimension is negative or the thickness is unknown.
        """
        if width_mm < 0 or height_mm < 0:
            raise ValueError("Panel dimensions must be non-negative")
        thickness = self.rules.glass_thickness_mm if thickness_mm is None else thickness_mm
        density = self.rules.density_for(thickness)
        return (width_mm / 1000.0) * (height_mm / 1000.0) * density

    def weight_from_edges(
        self,
        width_bottom_mm: float,
        width_top_mm: float,
        height_left_mm: float,
        height_right_mm: float,
        thickness_mm: float | None = None,
    ) -> float:
        """Weight of an out-of-square panel from its four edge lengths."""
        avg_width = (width_bottom_mm + width_top_mm) / 2
        avg_height = (height_left_mm + height_right_mm) / 2
        return self.weight_kg(avg_width, avg_height, thickness_mm)

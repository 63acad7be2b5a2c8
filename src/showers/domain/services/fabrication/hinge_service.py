"""Hinge placement and hinge hardware selection."""

from __future__ import annotations

import logging
import math

from ...value_objects import HingeFamily
from .models import HingePlacement, HingeSelection
from .rules import DEFAULT_RULES, FabricationRules

logger = logging.getLogger(__name__)


class HingePlacementResolver:
    """Places the two hinges of a door.

    Each hinge sits the same distance from its glass edge: 14% of the door
    height, rounded half up to the millimetre and clamped to the rules'
    offset range.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def calculate(self, cut_height_mm: float) -> HingePlacement:
        """Calculate hinge offsets for a door of the given cut height.

        Args:
            cut_height_mm: Manufactured glass height.

        Returns:
            HingePlacement with equal top and bottom offsets. A warning is
            attached when the clear gap between the hinge cut-outs is below
            the serviceable minimum.

        Raises:
            ValueError: If the height is not positive.
        """
        if cut_height_mm <= 0:
            raise ValueError("Door height must be positive")

        rules = self.rules
        # Halves round up
        offset = float(math.floor(cut_height_mm * rules.hinge_offset_ratio + 0.5))
        offset = max(rules.hinge_min_offset_mm, min(rules.hinge_max_offset_mm, offset))

        clear_gap = cut_height_mm - 2 * offset - rules.hinge_cutout_height_mm

        warning = None
        if clear_gap < rules.hinge_min_clear_gap_mm:
            warning = (
                f"Hinge clear gap ({clear_gap:g}mm) is less than "
                f"{rules.hinge_min_clear_gap_mm:g}mm minimum"
            )

        return HingePlacement(
            top_offset_mm=offset,
            bottom_offset_mm=offset,
            clear_gap_mm=clear_gap,
            cutout_height_mm=rules.hinge_cutout_height_mm,
            warning=warning,
        )


class HingeSelector:
    """Chooses between the standard and the heavy-duty hinge family.

    The standard family carries doors up to its width AND weight limits
    inclusive. Anything beyond either limit is upgraded to the heavy-duty
    family. Exceeding limits is a policy branch, never an error.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def within_standard_limits(self, cut_width_mm: float, weight_kg: float) -> bool:
        return (
            cut_width_mm <= self.rules.standard_hinge_max_width_mm
            and weight_kg <= self.rules.standard_hinge_max_weight_kg
        )

    def select(
        self,
        cut_width_mm: float,
        weight_kg: float,
        requested: HingeFamily | None = None,
    ) -> HingeSelection:
        """Select a hinge family for a door.

        Args:
            cut_width_mm: Manufactured door width.
            weight_kg: Door glass weight.
            requested: Family chosen by the user, if any.

        Returns:
            HingeSelection. ``is_upgrade`` is True only when the standard
            family was requested (or nothing was) and had to be replaced.
        """
        rules = self.rules
        over_heavy = (
            cut_width_mm > rules.heavy_hinge_max_width_mm
            or weight_kg > rules.heavy_hinge_max_weight_kg
        )
        capacity_warning = None
        if over_heavy:
            capacity_warning = (
                f"Door exceeds maximum hinge capacity "
                f"({rules.heavy_hinge_max_width_mm:g}mm / {rules.heavy_hinge_max_weight_kg:g}kg)"
            )

        if requested is HingeFamily.BELLAGIO:
            return HingeSelection(
                family=HingeFamily.BELLAGIO,
                reason="Heavy-duty Bellagio hinge requested",
                warning=capacity_warning,
            )

        if self.within_standard_limits(cut_width_mm, weight_kg):
            return HingeSelection(
                family=HingeFamily.GENEVA,
                reason="Standard Geneva hinge sufficient",
            )

        logger.info(
            "Upgrading hinge to Bellagio: width %.1fmm, weight %.2fkg",
            cut_width_mm,
            weight_kg,
        )
        warning = (
            f"Door size requires Bellagio hinges ({cut_width_mm:g}mm width or "
            f"{weight_kg:.1f}kg weight exceeds the Geneva limits of "
            f"{rules.standard_hinge_max_width_mm:g}mm / {rules.standard_hinge_max_weight_kg:g}kg)"
        )
        if capacity_warning:
            warning = f"{warning}. {capacity_warning}"
        return HingeSelection(
            family=HingeFamily.BELLAGIO,
            is_upgrade=True,
            reason="Door exceeds standard hinge limits",
            warning=warning,
        )

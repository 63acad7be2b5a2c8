"""Handle placement on door glass."""

from __future__ import annotations

from ...value_objects import HandleType
from .models import HandlePlacement, HingePlacement
from .rules import DEFAULT_RULES, FabricationRules


class HandlePlacementResolver:
    """Places a knob or pull handle and checks it clears both hinges.

    Knobs are placed by their centre and pull handles by their bottom hole.
    The handle must stay a fixed clearance away from both hinge cut-outs.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def calculate(
        self,
        cut_height_mm: float,
        handle_type: HandleType,
        hinge_placement: HingePlacement,
    ) -> HandlePlacement:
        """Calculate the handle height for a door.

        Args:
            cut_height_mm: Manufactured glass height.
            handle_type: Knob or pull handle.
            hinge_placement: Hinge offsets of the same door.

        Returns:
            HandlePlacement, marked invalid with a warning when the handle
            would sit too close to a hinge cut-out.
        """
        rules = self.rules
        if handle_type is HandleType.KNOB:
            height = rules.knob_center_mm
            top = height + rules.knob_radius_mm
        else:
            height = rules.pull_handle_bottom_mm
            top = height + rules.handle_hole_spacing_mm

        half_cutout = hinge_placement.cutout_height_mm / 2
        bottom_hinge_top = hinge_placement.bottom_offset_mm + half_cutout
        top_hinge_bottom = cut_height_mm - hinge_placement.top_offset_mm - half_cutout

        clearance = rules.handle_hinge_clearance_mm
        is_valid = not (
            height < bottom_hinge_top + clearance or top > top_hinge_bottom - clearance
        )

        return HandlePlacement(
            handle_type=handle_type,
            height_mm=height,
            top_mm=top,
            edge_clearance_mm=rules.handle_edge_clearance_mm,
            is_valid=is_valid,
            warning=None if is_valid else "Handle position may conflict with hinge location",
        )

"""Door opening derivation from laser measurements.

The installer projects a vertical and a horizontal laser line across the
opening and reads distances from each line to the walls, floor and ceiling.
DoorDerivationEngine turns those readings into opening sizes, then runs the
deduction, weight, hinge and handle services to produce the door glass.
"""

from __future__ import annotations

import logging

from ...value_objects import (
    DerivedValues,
    DoorConfigType,
    DoorMeasurements,
    HeightMode,
    ThresholdType,
)
from .deduction_engine import DeductionEngine
from .handle_placement import HandlePlacementResolver
from .hinge_service import HingePlacementResolver, HingeSelector
from .models import DoorConfiguration, DoorDeductions, DoorGlassSize, DoorResult
from .rules import DEFAULT_RULES, FabricationRules
from .weight_calculator import GlassWeightCalculator

logger = logging.getLogger(__name__)

WIDTH_READINGS = (
    "left_wall_to_vertical_laser_bottom",
    "vertical_laser_to_right_wall_bottom",
    "left_wall_to_vertical_laser_top",
    "vertical_laser_to_right_wall_top",
)

FLOOR_TO_CEILING_READINGS = (
    "floor_to_horizontal_laser_left",
    "horizontal_laser_to_ceiling_left",
    "floor_to_horizontal_laser_right",
    "horizontal_laser_to_ceiling_right",
)

STANDARD_READINGS = (
    "glass_height_hinge_side_mm",
    "floor_to_horizontal_laser_left",
    "floor_to_horizontal_laser_right",
)


def _pair_sum(first: float | None, second: float | None) -> float | None:
    if first is None or second is None:
        return None
    return first + second


def _difference(first: float | None, second: float | None) -> float | None:
    if first is None or second is None:
        return None
    return first - second


class DoorDerivationEngine:
    """Derives door opening and glass sizes from laser readings.

    Every derived value follows the complete-pairs rule: it is only computed
    once both of its inputs are present, and is None otherwise.
    """

    def __init__(
        self,
        rules: FabricationRules = DEFAULT_RULES,
        deduction_engine: DeductionEngine | None = None,
        weight_calculator: GlassWeightCalculator | None = None,
        hinge_placement: HingePlacementResolver | None = None,
        hinge_selector: HingeSelector | None = None,
        handle_placement: HandlePlacementResolver | None = None,
    ) -> None:
        self.rules = rules
        self._deductions = deduction_engine or DeductionEngine(rules)
        self._weight = weight_calculator or GlassWeightCalculator(rules)
        self._hinge_placement = hinge_placement or HingePlacementResolver(rules)
        self._hinge_selector = hinge_selector or HingeSelector(rules)
        self._handle_placement = handle_placement or HandlePlacementResolver(rules)

    def derive(
        self,
        measurements: DoorMeasurements,
        height_mode: HeightMode = HeightMode.STANDARD,
        ceiling_air_gap_mm: float | None = None,
    ) -> DerivedValues:
        """Derive the opening sizes from the readings taken so far.

        Args:
            measurements: Laser readings.
            height_mode: Standard (glass height entered on the hinge side) or
                floor to ceiling (laser to floor plus laser to ceiling).
            ceiling_air_gap_mm: Air gap left below the ceiling.

        Returns:
            DerivedValues with None for every value whose inputs are incomplete.
        """
        m = measurements
        gap = self.rules.ceiling_air_gap_mm if ceiling_air_gap_mm is None else ceiling_air_gap_mm

        width_bottom = _pair_sum(
            m.left_wall_to_vertical_laser_bottom, m.vertical_laser_to_right_wall_bottom
        )
        width_top = _pair_sum(
            m.left_wall_to_vertical_laser_top, m.vertical_laser_to_right_wall_top
        )

        if height_mode is HeightMode.FLOOR_TO_CEILING:
            left = _pair_sum(m.floor_to_horizontal_laser_left, m.horizontal_laser_to_ceiling_left)
            right = _pair_sum(
                m.floor_to_horizontal_laser_right, m.horizontal_laser_to_ceiling_right
            )
            height_left = None if left is None else left - gap
            height_right = None if right is None else right - gap
        else:
            height_left = m.glass_height_hinge_side_mm
            # The floor reading differential stands in for the floor fall
            floor_fall = _difference(
                m.floor_to_horizontal_laser_left, m.floor_to_horizontal_laser_right
            )
            height_right = _difference(height_left, floor_fall)

        return DerivedValues(
            opening_width_top_mm=width_top,
            opening_width_bottom_mm=width_bottom,
            height_left_mm=height_left,
            height_right_mm=height_right,
            wall_rake_mm=_difference(height_left, height_right),
            width_difference_mm=_difference(width_top, width_bottom),
        )

    def deductions(
        self,
        seals_required: bool = True,
        threshold: ThresholdType = ThresholdType.NONE,
        height_mode: HeightMode = HeightMode.STANDARD,
        ceiling_air_gap_mm: float | None = None,
    ) -> DoorDeductions:
        """Door deductions for the given options."""
        return self._deductions.door_deductions(
            seals_required=seals_required,
            threshold=threshold,
            height_mode=height_mode,
            ceiling_air_gap_mm=ceiling_air_gap_mm,
        )

    def glass_size(
        self,
        derived: DerivedValues,
        deductions: DoorDeductions,
        leaf_count: int = 1,
    ) -> DoorGlassSize:
        """Final leaf size from the derived opening.

        Widths lose the hinge and handle side deductions from each leaf's
        share of the opening. Heights lose the bottom gap only: in floor to
        ceiling mode the air gap is already out of the derived height.
        """
        if leaf_count < 1:
            raise ValueError("A door needs at least one leaf")

        def width(opening: float | None) -> float | None:
            if opening is None:
                return None
            return opening / leaf_count - deductions.total_width_mm

        def height(derived_height: float | None) -> float | None:
            if derived_height is None:
                return None
            return derived_height - deductions.bottom_mm

        return DoorGlassSize(
            width_bottom_mm=width(derived.opening_width_bottom_mm),
            width_top_mm=width(derived.opening_width_top_mm),
            height_left_mm=height(derived.height_left_mm),
            height_right_mm=height(derived.height_right_mm),
            leaf_count=leaf_count,
        )

    def next_required_inputs(
        self,
        measurements: DoorMeasurements,
        height_mode: HeightMode = HeightMode.STANDARD,
    ) -> tuple[str, ...]:
        """Readings still missing for the given height mode, in entry order."""
        if height_mode is HeightMode.FLOOR_TO_CEILING:
            wanted = WIDTH_READINGS + FLOOR_TO_CEILING_READINGS
        else:
            wanted = WIDTH_READINGS + STANDARD_READINGS
        return tuple(name for name in wanted if getattr(measurements, name) is None)

    @staticmethod
    def hinge_side_height(door: DoorConfiguration, size: DoorGlassSize) -> float:
        """Glass height on the edge that carries the hinges.

        Standard mode reads the hinge side directly into the left height.
        Floor-to-ceiling mode measures both walls, so a right-hinged door
        takes the right height. Double doors use the left leaf.
        """
        if (
            door.height_mode is HeightMode.FLOOR_TO_CEILING
            and door.door_type is DoorConfigType.RIGHT
            and size.height_right_mm is not None
        ):
            return size.height_right_mm
        return size.height_left_mm

    def calculate(self, door: DoorConfiguration) -> DoorResult:
        """Run the full door pipeline.

        Derivation, deductions and glass size always run. Weight, hinges and
        handle are only computed once the glass size is complete and
        positive; until then they are None.

        Args:
            door: Door options and measurements.

        Returns:
            DoorResult with all derived numbers and any warnings.
        """
        derived = self.derive(door.measurements, door.height_mode, door.ceiling_air_gap_mm)
        deductions = self.deductions(
            seals_required=door.seals_required,
            threshold=door.threshold,
            height_mode=door.height_mode,
            ceiling_air_gap_mm=door.ceiling_air_gap_mm,
        )
        size = self.glass_size(derived, deductions, door.leaf_count)
        missing = self.next_required_inputs(door.measurements, door.height_mode)

        logger.debug(
            "Derived door opening: %s, glass size: %s, missing inputs: %d",
            derived,
            size,
            len(missing),
        )

        if not size.is_complete:
            return DoorResult(
                derived=derived,
                deductions=deductions,
                glass_size=size,
                next_required_inputs=missing,
            )

        sizes = [
            v
            for v in (size.width_bottom_mm, size.width_top_mm, size.height_left_mm, size.height_right_mm)
            if v is not None
        ]
        if min(sizes) <= 0:
            return DoorResult(
                derived=derived,
                deductions=deductions,
                glass_size=size,
                warnings=("Door glass size is not positive; check the measurements",),
                next_required_inputs=missing,
            )

        width_bottom = size.width_bottom_mm
        height_left = size.height_left_mm
        weight = self._weight.weight_from_edges(
            width_bottom,
            size.width_top_mm if size.width_top_mm is not None else width_bottom,
            height_left,
            size.height_right_mm if size.height_right_mm is not None else height_left,
            door.glass_thickness_mm,
        )

        hinge_height = self.hinge_side_height(door, size)
        placement = self._hinge_placement.calculate(hinge_height)
        selection = self._hinge_selector.select(width_bottom, weight, door.requested_hinge)
        handle = self._handle_placement.calculate(hinge_height, door.handle_type, placement)

        warnings = tuple(
            w for w in (placement.warning, selection.warning, handle.warning) if w
        )

        return DoorResult(
            derived=derived,
            deductions=deductions,
            glass_size=size,
            weight_kg=weight,
            hinge_placement=placement,
            hinge_selection=selection,
            handle_placement=handle,
            warnings=warnings,
            next_required_inputs=missing,
        )

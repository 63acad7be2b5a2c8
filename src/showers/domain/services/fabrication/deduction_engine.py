"""Glass deduction calculations.

This module provides the DeductionEngine, which converts a panel's tight
(opening) size into its manufactured cut size with an itemised list of every
deduction applied.
"""

from __future__ import annotations

from ...value_objects import (
    CornerConfig,
    DeductionBreakdown,
    DeductionItem,
    HeightMode,
    HingeSide,
    MountingStyle,
    PanelKind,
    ThresholdType,
    WallRakeDirection,
)
from .models import DeductionOptions, DoorDeductions, PanelDeductions, PanelRakes
from .rules import DEFAULT_RULES, FabricationRules


class DeductionEngine:
    """Calculates cut sizes and itemised deductions.

    Fixed panels lose channel or clamp allowances at walls, floor and ceiling
    plus a corner allowance at 90 degree junctions. Doors lose seal gaps on
    both vertical edges, a bottom gap and, when they run floor to ceiling, the
    ceiling air gap. Rakes are added back on the affected side only.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def calculate(
        self,
        tight_width_mm: float,
        tight_height_mm: float,
        panel_kind: PanelKind,
        corner_config: CornerConfig | None = None,
        floor_to_ceiling: bool = False,
        support_panel_required: bool = False,
        mounting_style: MountingStyle = MountingStyle.CHANNEL,
        options: DeductionOptions | None = None,
        rakes: PanelRakes | None = None,
    ) -> PanelDeductions:
        """Calculate the cut size of one panel.

        Args:
            tight_width_mm: Opening width of the panel.
            tight_height_mm: Opening height of the panel.
            panel_kind: Fixed panel or door.
            corner_config: Corner and wall-fix flags. Defaults to a
                free-standing long panel.
            floor_to_ceiling: Whether the panel runs floor to ceiling.
            support_panel_required: Whether a support panel sits above a door.
            mounting_style: Channel or clamps, for fixed panels.
            options: Door seal and threshold options.
            rakes: Floor and wall rakes to add back per side.

        Returns:
            PanelDeductions whose cut sizes satisfy
            ``cut + deductions == tight`` on both axes.

        Raises:
            ValueError: If the tight size is not positive.
        """
        if tight_width_mm <= 0 or tight_height_mm <= 0:
            raise ValueError("Tight width and height must be positive")

        corner_config = corner_config or CornerConfig()
        options = options or DeductionOptions()
        rakes = rakes or PanelRakes()

        if panel_kind is PanelKind.DOOR:
            vertical = self._door_vertical(options, floor_to_ceiling, support_panel_required)
            horizontal = self._door_horizontal(options)
        else:
            vertical = self._fixed_vertical(mounting_style, floor_to_ceiling)
            horizontal = self._fixed_horizontal(mounting_style, corner_config)

        cut_width = tight_width_mm - horizontal.total
        cut_height = tight_height_mm - vertical.total

        height_left = height_right = cut_height
        if rakes.floor is not None:
            if rakes.floor.lower_side is HingeSide.LEFT:
                height_left += rakes.floor.amount_mm
            else:
                height_right += rakes.floor.amount_mm

        width_top = width_bottom = cut_width
        if rakes.wall is not None:
            if rakes.wall.direction is WallRakeDirection.OUT:
                width_top += rakes.wall.amount_mm
            else:
                width_bottom += rakes.wall.amount_mm

        return PanelDeductions(
            tight_width=tight_width_mm,
            tight_height=tight_height_mm,
            vertical=vertical,
            horizontal=horizontal,
            cut_height_left=height_left,
            cut_height_right=height_right,
            cut_width_top=width_top,
            cut_width_bottom=width_bottom,
        )

    def door_deductions(
        self,
        seals_required: bool = True,
        threshold: ThresholdType = ThresholdType.NONE,
        height_mode: HeightMode = HeightMode.STANDARD,
        ceiling_air_gap_mm: float | None = None,
    ) -> DoorDeductions:
        """Door edge deductions for the laser measuring method."""
        gap = self.rules.ceiling_air_gap_mm if ceiling_air_gap_mm is None else ceiling_air_gap_mm
        options = DeductionOptions(
            seals_required=seals_required,
            threshold=threshold,
            ceiling_air_gap_mm=gap,
        )
        hinge, handle = self._door_sides(options)
        return DoorDeductions(
            hinge_side_mm=hinge,
            handle_side_mm=handle,
            bottom_mm=self._door_bottom(options),
            ceiling_air_gap_mm=gap,
            height_mode=height_mode,
        )

    def _door_sides(self, options: DeductionOptions) -> tuple[float, float]:
        if options.seals_required:
            return self.rules.hinge_side_seal_mm, self.rules.handle_side_seal_mm
        return self.rules.door_side_no_seal_mm, self.rules.door_side_no_seal_mm

    def _door_bottom(self, options: DeductionOptions) -> float:
        if not options.seals_required:
            return self.rules.bottom_no_seal_mm
        if options.threshold is ThresholdType.CLEAR_THRESHOLD:
            return self.rules.bottom_clear_threshold_mm
        if options.threshold is ThresholdType.TAPERED_THRESHOLD:
            return self.rules.bottom_tapered_threshold_mm
        return self.rules.bottom_seal_mm

    def _door_horizontal(self, options: DeductionOptions) -> DeductionBreakdown:
        hinge, handle = self._door_sides(options)
        suffix = "seal" if options.seals_required else "gap"
        return DeductionBreakdown(
            items=(
                DeductionItem(f"Hinge side {suffix}", hinge),
                DeductionItem(f"Handle side {suffix}", handle),
            )
        )

    def _door_vertical(
        self,
        options: DeductionOptions,
        floor_to_ceiling: bool,
        support_panel_required: bool,
    ) -> DeductionBreakdown:
        items = [DeductionItem("Bottom gap", self._door_bottom(options))]
        if floor_to_ceiling:
            items.append(DeductionItem("Ceiling air gap", options.ceiling_air_gap_mm))
        if support_panel_required:
            items.append(
                DeductionItem("Support panel clearance", self.rules.support_panel_head_mm)
            )
        return DeductionBreakdown(items=tuple(items))

    def _fixed_vertical(
        self, mounting_style: MountingStyle, floor_to_ceiling: bool
    ) -> DeductionBreakdown:
        if mounting_style is MountingStyle.CLAMPS:
            amount = self.rules.clamp_mm
            return DeductionBreakdown(
                items=(
                    DeductionItem("Top clamps", amount),
                    DeductionItem("Bottom clamps", amount),
                )
            )

        if floor_to_ceiling:
            amount = self.rules.channel_floor_to_ceiling_mm
            return DeductionBreakdown(
                items=(
                    DeductionItem("Top channel (floor to ceiling)", amount),
                    DeductionItem("Bottom channel (floor to ceiling)", amount),
                )
            )

        amount = self.rules.channel_vertical_mm
        return DeductionBreakdown(
            items=(
                DeductionItem("Top channel", amount),
                DeductionItem("Bottom channel", amount),
            )
        )

    def _fixed_horizontal(
        self, mounting_style: MountingStyle, corners: CornerConfig
    ) -> DeductionBreakdown:
        items: list[DeductionItem] = []

        if mounting_style is MountingStyle.CLAMPS:
            wall_amount, wall_label = self.rules.clamp_mm, "clamps"
        else:
            wall_amount, wall_label = self.rules.channel_wall_mm, "wall channel"
        if corners.left_wall_fixed:
            items.append(DeductionItem(f"Left {wall_label}", wall_amount))
        if corners.right_wall_fixed:
            items.append(DeductionItem(f"Right {wall_label}", wall_amount))

        if corners.is_long_panel:
            corner_amount, corner_label = self.rules.corner_long_panel_mm, "long"
        else:
            corner_amount, corner_label = self.rules.corner_short_panel_mm, "short"
        if corners.has_left_corner:
            items.append(DeductionItem(f"Left corner ({corner_label})", corner_amount))
        if corners.has_right_corner:
            items.append(DeductionItem(f"Right corner ({corner_label})", corner_amount))

        return DeductionBreakdown(items=tuple(items))

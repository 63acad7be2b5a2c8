"""Fabrication service facade.

This module provides the FabricationService facade that wires the
specialised fabrication services together around one rules table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ...value_objects import (
    CornerConfig,
    HandleType,
    HingeFamily,
    MountingStyle,
    PanelSegment,
)
from .deduction_engine import DeductionEngine
from .door_derivation import DoorDerivationEngine
from .handle_placement import HandlePlacementResolver
from .hinge_service import HingePlacementResolver, HingeSelector
from .models import (
    DeductionOptions,
    DoorConfiguration,
    DoorResult,
    HandlePlacement,
    HingePlacement,
    HingeSelection,
    PanelDeductions,
    PanelRakes,
    SupportCheck,
)
from .rules import DEFAULT_RULES, FabricationRules
from .support_checker import SupportChecker
from .weight_calculator import GlassWeightCalculator

if TYPE_CHECKING:
    from ...entities import Panel, PanelChain


class FabricationService:
    """Service for turning a traced chain or a measured door into glass.

    This is a facade that delegates to specialized services:
    - DeductionEngine: cut sizes and itemised deductions
    - GlassWeightCalculator: glass weight
    - HingePlacementResolver: hinge offsets
    - HingeSelector: hinge family selection
    - HandlePlacementResolver: handle height
    - SupportChecker: support panel and support bar checks
    - DoorDerivationEngine: laser measurement derivation

    Example:
        >>> service = FabricationService()
        >>> segments = ChainGeometryResolver().resolve_chain(chain)
        >>> supports = service.check_supports(chain, segments)
        >>> corners = service.corner_configs(chain, segments)
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        """Initialize the fabrication service.

        Args:
            rules: Fabrication constants shared by every delegate.
        """
        self.rules = rules
        self.deduction_engine = DeductionEngine(rules)
        self.weight_calculator = GlassWeightCalculator(rules)
        self.hinge_placement = HingePlacementResolver(rules)
        self.hinge_selector = HingeSelector(rules)
        self.handle_placement = HandlePlacementResolver(rules)
        self.support_checker = SupportChecker(rules)
        self.door_engine = DoorDerivationEngine(
            rules,
            deduction_engine=self.deduction_engine,
            weight_calculator=self.weight_calculator,
            hinge_placement=self.hinge_placement,
            hinge_selector=self.hinge_selector,
            handle_placement=self.handle_placement,
        )

    def check_supports(
        self, chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> SupportCheck:
        return self.support_checker.check(chain, segments)

    def corner_configs(
        self, chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> dict[str, CornerConfig]:
        """Corner and wall-fix flags for every panel of a traced chain.

        Panels running along the anchor's line are long panels; returns are
        short panels. Only the two end panels can be wall-fixed.
        """
        by_id = {segment.panel_id: segment for segment in segments}
        anchor = by_id[chain.anchor_id] if chain.anchor_id in by_id else None
        last = len(chain.order) - 1

        configs: dict[str, CornerConfig] = {}
        for index, panel_id in enumerate(chain.order):
            before = chain.junction_before(panel_id)
            after = chain.junction_after(panel_id)
            segment = by_id.get(panel_id)
            is_long = anchor is None or segment is None or segment.is_collinear_with(anchor)
            configs[panel_id] = CornerConfig(
                is_long_panel=is_long,
                has_left_corner=before is not None and before.is_corner,
                has_right_corner=after is not None and after.is_corner,
                left_wall_fixed=index == 0 and chain.left_wall,
                right_wall_fixed=index == last and chain.right_wall,
            )
        return configs

    def panel_deductions(
        self,
        panel: Panel,
        tight_height_mm: float,
        corner_config: CornerConfig | None = None,
        floor_to_ceiling: bool = False,
        support_panel_required: bool = False,
        mounting_style: MountingStyle = MountingStyle.CHANNEL,
        options: DeductionOptions | None = None,
        rakes: PanelRakes | None = None,
    ) -> PanelDeductions:
        """Cut size of a chain panel, using its width as the tight width."""
        return self.deduction_engine.calculate(
            tight_width_mm=panel.width_mm,
            tight_height_mm=tight_height_mm,
            panel_kind=panel.kind,
            corner_config=corner_config,
            floor_to_ceiling=floor_to_ceiling,
            support_panel_required=support_panel_required and panel.is_door,
            mounting_style=mounting_style,
            options=options,
            rakes=rakes,
        )

    def weight_kg(self, deductions: PanelDeductions, thickness_mm: float | None = None) -> float:
        """Weight of a cut panel from its per-side sizes."""
        return self.weight_calculator.weight_from_edges(
            deductions.cut_width_bottom,
            deductions.cut_width_top,
            deductions.cut_height_left,
            deductions.cut_height_right,
            thickness_mm,
        )

    def door_hardware(
        self,
        cut_width_mm: float,
        cut_height_mm: float,
        weight_kg: float,
        requested_hinge: HingeFamily | None = None,
        handle_type: HandleType = HandleType.KNOB,
    ) -> tuple[HingePlacement, HingeSelection, HandlePlacement]:
        """Hinge placement, hinge family and handle placement for a door."""
        placement = self.hinge_placement.calculate(cut_height_mm)
        selection = self.hinge_selector.select(cut_width_mm, weight_kg, requested_hinge)
        handle = self.handle_placement.calculate(cut_height_mm, handle_type, placement)
        return placement, selection, handle

    def derive_door(self, door: DoorConfiguration) -> DoorResult:
        return self.door_engine.calculate(door)

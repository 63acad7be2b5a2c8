"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
The application layer depends on these protocols, so any service can be
replaced by a test double with the same shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from showers.domain.entities import Panel, PanelChain
    from showers.domain.services.fabrication.models import (
        DeductionOptions,
        DoorConfiguration,
        DoorDeductions,
        DoorResult,
        HandlePlacement,
        HingePlacement,
        HingeSelection,
        PanelDeductions,
        PanelRakes,
        SupportCheck,
    )
    from showers.domain.services.fabrication.rules import FabricationRules
    from showers.domain.services.perspective import ProjectionResult, Viewport
    from showers.domain.value_objects import (
        CornerConfig,
        DerivedValues,
        DoorMeasurements,
        HandleType,
        HeightMode,
        HingeFamily,
        Junction,
        MountingStyle,
        NotchOutline,
        NotchSpec,
        PanelSegment,
        ThresholdType,
    )


@runtime_checkable
class ChainGeometryResolverProtocol(Protocol):
    """Protocol for tracing a panel chain into plan segments."""

    def resolve(
        self,
        panels: Sequence[Panel],
        junctions: Sequence[Junction],
        anchor_index: int | None,
    ) -> list[PanelSegment]:
        """Trace panels given as positional sequences.

        Raises:
            ChainConfigurationError: If the chain cannot be traced.
        """
        ...

    def resolve_chain(self, chain: PanelChain) -> list[PanelSegment]:
        """Trace a PanelChain aggregate."""
        ...


@runtime_checkable
class NotchGeometryResolverProtocol(Protocol):
    """Protocol for building notch outlines in plan."""

    def resolve(
        self,
        segment: PanelSegment,
        notches: NotchSpec,
        thickness_mm: float | None = None,
    ) -> NotchOutline:
        """Build the stepped base outline of one panel.

        Raises:
            NotchConfigurationError: If the notches would overlap.
        """
        ...


@runtime_checkable
class PerspectiveProjectorProtocol(Protocol):
    """Protocol for projecting traced panels to screen space."""

    def project(
        self,
        segments: Sequence[PanelSegment],
        panels: Mapping[str, Panel] | Sequence[Panel],
        panel_height_mm: float | None = None,
        view_angle_deg: float = 30.0,
        viewport: Viewport | None = None,
    ) -> ProjectionResult:
        """Project and fit every panel face."""
        ...


@runtime_checkable
class FabricationServiceProtocol(Protocol):
    """Protocol for chain fabrication calculations.

    Implementations size every panel of a traced chain and choose door
    hardware.
    """

    rules: FabricationRules

    def check_supports(
        self, chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> SupportCheck:
        ...

    def corner_configs(
        self, chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> dict[str, CornerConfig]:
        ...

    def panel_deductions(
        self,
        panel: Panel,
        tight_height_mm: float,
        corner_config: CornerConfig | None = None,
        floor_to_ceiling: bool = False,
        support_panel_required: bool = False,
        mounting_style: MountingStyle = ...,
        options: DeductionOptions | None = None,
        rakes: PanelRakes | None = None,
    ) -> PanelDeductions:
        ...

    def weight_kg(
        self, deductions: PanelDeductions, thickness_mm: float | None = None
    ) -> float:
        ...

    def door_hardware(
        self,
        cut_width_mm: float,
        cut_height_mm: float,
        weight_kg: float,
        requested_hinge: HingeFamily | None = None,
        handle_type: HandleType = ...,
    ) -> tuple[HingePlacement, HingeSelection, HandlePlacement]:
        ...


@runtime_checkable
class DoorDerivationEngineProtocol(Protocol):
    """Protocol for deriving a door from laser measurements."""

    def derive(
        self,
        measurements: DoorMeasurements,
        height_mode: HeightMode = ...,
        ceiling_air_gap_mm: float | None = None,
    ) -> DerivedValues:
        ...

    def deductions(
        self,
        seals_required: bool = True,
        threshold: ThresholdType = ...,
        height_mode: HeightMode = ...,
        ceiling_air_gap_mm: float | None = None,
    ) -> DoorDeductions:
        ...

    def calculate(self, door: DoorConfiguration) -> DoorResult:
        """Run the full door pipeline."""
        ...

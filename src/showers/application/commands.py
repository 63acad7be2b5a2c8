"""Application commands (use cases) for the shower configurator."""

from __future__ import annotations

import logging

from showers.domain.entities import ChainConfigurationError
from showers.domain.services import (
    ChainGeometryResolver,
    FabricationService,
    NotchConfigurationError,
    NotchGeometryResolver,
    PerspectiveProjector,
)
from showers.domain.value_objects import NotchOutline, PanelSegment

from .dtos import DerivedState, DesignState, PanelFabrication

logger = logging.getLogger(__name__)


class RecomputeDesignCommand:
    """Command to recompute everything derived from a design.

    Runs the full pipeline on every call: trace the chain, check supports,
    outline notches, project the faces, then size every panel. Nothing is
    cached between calls.
    """

    def __init__(
        self,
        chain_resolver: ChainGeometryResolver | None = None,
        notch_resolver: NotchGeometryResolver | None = None,
        projector: PerspectiveProjector | None = None,
        fabrication_service: FabricationService | None = None,
    ) -> None:
        self.chain_resolver = chain_resolver or ChainGeometryResolver()
        self.notch_resolver = notch_resolver or NotchGeometryResolver()
        self.projector = projector or PerspectiveProjector()
        self.fabrication_service = fabrication_service or FabricationService()

    def execute(self, state: DesignState) -> DerivedState:
        """Execute the recompute.

        Args:
            state: Current design.

        Returns:
            DerivedState. Configuration problems are reported in ``errors``
            rather than raised.
        """
        errors = state.validate(self.fabrication_service.rules)
        if errors:
            return DerivedState(errors=tuple(errors))

        chain = state.chain
        try:
            segments = self.chain_resolver.resolve_chain(chain)
        except ChainConfigurationError as e:
            return DerivedState(errors=(str(e),))

        logger.debug("Traced %d panels from anchor %s", len(segments), chain.anchor_id)

        errors = []
        warnings: list[str] = []

        support = self.fabrication_service.check_supports(chain, segments)
        warnings.extend(support.warnings)

        outlines: dict[str, NotchOutline] = {}
        for segment in segments:
            panel = chain.panel(segment.panel_id)
            try:
                outlines[panel.id] = self.notch_resolver.resolve(
                    segment, panel.notches, state.glass_thickness_mm
                )
            except NotchConfigurationError as e:
                errors.append(f"Panel {panel.id}: {e}")
            errors.extend(
                f"Panel {panel.id}: {message}"
                for message in panel.elevation_errors(state.panel_height_mm)
            )

        projection = self.projector.project(
            segments,
            chain.panels,
            panel_height_mm=state.panel_height_mm,
            view_angle_deg=state.view_angle_deg,
            viewport=state.viewport,
        )

        fabrication = self._fabricate(
            state, segments, support.support_panel_required, errors
        )
        for item in fabrication.values():
            warnings.extend(item.warnings)

        logger.debug(
            "Recompute finished: %d warnings, %d errors", len(warnings), len(errors)
        )

        return DerivedState(
            segments=tuple(segments),
            notch_outlines=outlines,
            projection=projection,
            support=support,
            fabrication=fabrication,
            warnings=tuple(warnings),
            errors=tuple(errors),
        )

    def _fabricate(
        self,
        state: DesignState,
        segments: list[PanelSegment],
        support_panel_required: bool,
        errors: list[str],
    ) -> dict[str, PanelFabrication]:
        service = self.fabrication_service
        corners = service.corner_configs(state.chain, segments)

        result: dict[str, PanelFabrication] = {}
        for panel in state.chain.ordered_panels():
            deductions = service.panel_deductions(
                panel,
                tight_height_mm=state.panel_height_mm,
                corner_config=corners[panel.id],
                floor_to_ceiling=state.floor_to_ceiling,
                support_panel_required=support_panel_required,
                mounting_style=state.mounting_style,
                options=state.options,
                rakes=state.rakes.get(panel.id),
            )
            if deductions.cut_width <= 0 or deductions.cut_height <= 0:
                errors.append(f"Panel {panel.id}: cut size is not positive after deductions")
                continue
            weight = service.weight_kg(deductions, state.glass_thickness_mm)

            placement = selection = handle = None
            if panel.is_door:
                placement, selection, handle = service.door_hardware(
                    deductions.cut_width,
                    deductions.cut_height,
                    weight,
                    requested_hinge=state.requested_hinge,
                    handle_type=state.handle_type,
                )

            result[panel.id] = PanelFabrication(
                panel_id=panel.id,
                corner_config=corners[panel.id],
                deductions=deductions,
                weight_kg=weight,
                hinge_placement=placement,
                hinge_selection=selection,
                handle_placement=handle,
            )
        return result


def recompute(state: DesignState) -> DerivedState:
    """Recompute all derived data for a design with default services."""
    return RecomputeDesignCommand().execute(state)

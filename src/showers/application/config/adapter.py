"""Adapter to convert DesignConfiguration into domain objects and DTOs.

This module maps the Pydantic configuration models onto the FabricationRules
table, the PanelChain aggregate, the DesignState consumed by
RecomputeDesignCommand, and the DoorConfigurator used for a single
laser-measured door.
"""

from __future__ import annotations

from dataclasses import replace

from showers.application.config.schemas import (
    ChainConfigSchema,
    DesignConfiguration,
    DoorConfigSchema,
    PanelConfigSchema,
    PanelRakeConfigSchema,
)
from showers.application.door_configurator import DoorConfigurator
from showers.application.dtos import DesignState
from showers.domain.entities import Panel, PanelChain
from showers.domain.services import Viewport
from showers.domain.services.fabrication import (
    DEFAULT_RULES,
    DeductionOptions,
    DoorConfiguration,
    FabricationRules,
    PanelRakes,
)
from showers.domain.value_objects import (
    DoorMeasurements,
    DoorProperties,
    FloorRake,
    NotchSpec,
    PanelKind,
    TopEdge,
    WallRake,
)


def config_to_rules(
    config: DesignConfiguration, base: FabricationRules = DEFAULT_RULES
) -> FabricationRules:
    """Build the FabricationRules table for a configuration.

    Rule overrides replace individual constants; the chain options supply
    glass thickness, air gap, panel height and view angle.

    Raises:
        ValueError: If the combined rules are inconsistent (for example a
            density table without the configured glass thickness).
    """
    changes: dict[str, object] = {
        "glass_thickness_mm": float(config.options.glass_thickness_mm),
        "ceiling_air_gap_mm": config.options.ceiling_air_gap_mm,
        "panel_height_mm": config.options.panel_height_mm,
        "view_angle_deg": config.view.view_angle_deg,
    }
    if config.rules is not None:
        changes.update(config.rules.overrides())
    return replace(base, **changes)


def _panel_from_config(panel_config: PanelConfigSchema) -> Panel:
    door_properties = None
    if panel_config.kind == PanelKind.DOOR:
        door = panel_config.door
        door_properties = (
            DoorProperties(
                hinge_side=door.hinge_side, swing_direction=door.swing_direction
            )
            if door is not None
            else DoorProperties()
        )

    notches = panel_config.notches
    top_edge = panel_config.top_edge
    return Panel(
        id=panel_config.id,
        kind=panel_config.kind,
        width_mm=panel_config.width_mm,
        door_properties=door_properties,
        notches=NotchSpec(
            bottom_left=notches.bottom_left,
            bottom_right=notches.bottom_right,
            width_mm=notches.width_mm,
            height_mm=notches.height_mm,
        ),
        top_edge=TopEdge(
            type=top_edge.type,
            direction=top_edge.direction,
            drop_mm=top_edge.drop_mm,
        ),
    )


def config_to_chain(chain_config: ChainConfigSchema) -> PanelChain:
    """Convert a chain schema into a PanelChain aggregate.

    Raises:
        ChainConfigurationError: If the chain cannot be assembled.
    """
    return PanelChain.from_panels(
        [_panel_from_config(p) for p in chain_config.panels],
        angles=chain_config.angles(),
        anchor_id=chain_config.anchor,
        left_wall=chain_config.left_wall,
        right_wall=chain_config.right_wall,
    )


def _rakes_from_config(rake_config: PanelRakeConfigSchema) -> PanelRakes:
    floor = rake_config.floor
    wall = rake_config.wall
    return PanelRakes(
        floor=FloorRake(floor.amount_mm, floor.lower_side) if floor else None,
        wall=WallRake(wall.amount_mm, wall.direction) if wall else None,
    )


def config_to_design_state(config: DesignConfiguration) -> DesignState:
    """Convert a configuration with a chain into a DesignState.

    Raises:
        ValueError: If the configuration has no chain.
    """
    if config.chain is None:
        raise ValueError("Configuration has no panel chain")

    options = config.options
    view = config.view
    return DesignState(
        chain=config_to_chain(config.chain),
        mounting_style=options.mounting_style,
        options=DeductionOptions(
            seals_required=options.seals_required,
            threshold=options.threshold,
            ceiling_air_gap_mm=options.ceiling_air_gap_mm,
        ),
        floor_to_ceiling=options.floor_to_ceiling,
        panel_height_mm=options.panel_height_mm,
        glass_thickness_mm=float(options.glass_thickness_mm),
        rakes={
            panel_id: _rakes_from_config(rake)
            for panel_id, rake in options.rakes.items()
        },
        requested_hinge=options.requested_hinge,
        handle_type=options.handle_type,
        view_angle_deg=view.view_angle_deg,
        viewport=Viewport(
            width=view.width,
            height=view.height,
            padding=view.padding,
            zoom=view.zoom,
        ),
    )


def config_to_door_configuration(door_config: DoorConfigSchema) -> DoorConfiguration:
    """Convert a door schema into a DoorConfiguration."""
    measurements = DoorMeasurements()
    for name, value in door_config.measurements.items():
        measurements = measurements.with_value(name, value)
    return DoorConfiguration(
        measurements=measurements,
        door_type=door_config.door_type,
        height_mode=door_config.height_mode,
        seals_required=door_config.seals_required,
        threshold=door_config.threshold,
        ceiling_air_gap_mm=door_config.ceiling_air_gap_mm,
        requested_hinge=door_config.requested_hinge,
        handle_type=door_config.handle_type,
        glass_thickness_mm=float(door_config.glass_thickness_mm),
        glass_type=door_config.glass_type,
        hardware_finish=door_config.hardware_finish,
    )


def config_to_door_configurator(config: DesignConfiguration) -> DoorConfigurator:
    """Create a DoorConfigurator pre-filled from the configuration's door.

    Raises:
        ValueError: If the configuration has no door.
    """
    if config.door is None:
        raise ValueError("Configuration has no door")
    rules = config_to_rules(config)
    return DoorConfigurator(
        configuration=config_to_door_configuration(config.door),
        rules=rules,
    )

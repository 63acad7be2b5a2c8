"""Unit tests for the configuration adapters."""

import pytest

from showers.application import DesignState, DoorConfigurator
from showers.application.config import (
    DesignConfiguration,
    config_to_chain,
    config_to_design_state,
    config_to_door_configuration,
    config_to_door_configurator,
    config_to_rules,
)
from showers.domain.value_objects import (
    DoorConfigType,
    HingeSide,
    JunctionAngle,
    MountingStyle,
    TopEdgeType,
    WallRakeDirection,
)


@pytest.fixture
def configuration() -> DesignConfiguration:
    return DesignConfiguration.model_validate(
        {
            "schema_version": "1.1",
            "chain": {
                "panels": [
                    {
                        "id": "left",
                        "kind": "fixed",
                        "width_mm": 600,
                        "notches": {
                            "bottom_left": True,
                            "width_mm": 50,
                            "height_mm": 30,
                        },
                    },
                    {
                        "id": "door",
                        "kind": "door",
                        "width_mm": 700,
                        "door": {"hinge_side": "left", "swing_direction": "both"},
                        "top_edge": {
                            "type": "sloped",
                            "direction": "right",
                            "drop_mm": 150,
                        },
                    },
                    {"id": "return", "kind": "fixed", "width_mm": 500},
                ],
                "junctions": [
                    {"left": "left", "right": "door"},
                    {"left": "door", "right": "return", "angle_deg": 90},
                ],
                "right_wall": False,
            },
            "options": {
                "mounting_style": "clamps",
                "glass_thickness_mm": 8,
                "ceiling_air_gap_mm": 25,
                "panel_height_mm": 1950,
                "rakes": {
                    "return": {"wall": {"amount_mm": 4, "direction": "in"}}
                },
            },
            "view": {"view_angle_deg": -20, "zoom": 1.5},
            "rules": {"hinge_side_seal_mm": 7},
            "door": {
                "door_type": "double",
                "measurements": {
                    "left_wall_to_vertical_laser_bottom": 450,
                    "vertical_laser_to_right_wall_bottom": 400,
                },
            },
        }
    )


class TestConfigToRules:
    def test_options_and_overrides_applied(
        self, configuration: DesignConfiguration
    ) -> None:
        rules = config_to_rules(configuration)
        assert rules.glass_thickness_mm == 8
        assert rules.ceiling_air_gap_mm == 25
        assert rules.panel_height_mm == 1950
        assert rules.view_angle_deg == -20
        assert rules.hinge_side_seal_mm == 7
        assert rules.handle_side_seal_mm == 9

    def test_density_table_must_cover_thickness(
        self, configuration: DesignConfiguration
    ) -> None:
        configuration.rules.glass_weight_per_m2 = {10: 25.0}
        with pytest.raises(ValueError, match="No glass weight defined for 8mm"):
            config_to_rules(configuration)


class TestConfigToChain:
    def test_chain_structure(self, configuration: DesignConfiguration) -> None:
        chain = config_to_chain(configuration.chain)
        assert chain.order == ["left", "door", "return"]
        assert chain.anchor_id == "door"
        assert chain.left_wall
        assert not chain.right_wall
        assert chain.junction_after("door").angle_deg == JunctionAngle.RIGHT_ANGLE

    def test_panel_details(self, configuration: DesignConfiguration) -> None:
        chain = config_to_chain(configuration.chain)

        left = chain.panel("left")
        assert left.notches.bottom_left
        assert left.notches.width_mm == 50
        assert left.door_properties is None

        door = chain.panel("door")
        assert door.door_properties.hinge_side == HingeSide.LEFT
        assert door.top_edge.type == TopEdgeType.SLOPED
        assert door.top_edge.drop_mm == 150

    def test_door_without_properties_gets_defaults(
        self, configuration: DesignConfiguration
    ) -> None:
        configuration.chain.panels[1].door = None
        chain = config_to_chain(configuration.chain)
        assert chain.panel("door").door_properties.hinge_side == HingeSide.RIGHT


class TestConfigToDesignState:
    def test_design_state(self, configuration: DesignConfiguration) -> None:
        state = config_to_design_state(configuration)
        assert isinstance(state, DesignState)
        assert state.mounting_style == MountingStyle.CLAMPS
        assert state.glass_thickness_mm == 8
        assert state.panel_height_mm == 1950
        assert state.options.ceiling_air_gap_mm == 25
        assert state.view_angle_deg == -20
        assert state.viewport.zoom == 1.5
        assert state.validate() == []

    def test_rakes(self, configuration: DesignConfiguration) -> None:
        rakes = config_to_design_state(configuration).rakes
        assert set(rakes) == {"return"}
        assert rakes["return"].floor is None
        assert rakes["return"].wall.amount_mm == 4
        assert rakes["return"].wall.direction == WallRakeDirection.IN

    def test_door_only_configuration_has_no_state(self) -> None:
        config = DesignConfiguration(schema_version="1.1", door={})
        with pytest.raises(ValueError, match="no panel chain"):
            config_to_design_state(config)


class TestDoorAdapters:
    def test_door_configuration(self, configuration: DesignConfiguration) -> None:
        door = config_to_door_configuration(configuration.door)
        assert door.door_type == DoorConfigType.DOUBLE
        assert door.measurements.left_wall_to_vertical_laser_bottom == 450
        assert door.measurements.glass_height_hinge_side_mm is None

    def test_door_configurator(self, configuration: DesignConfiguration) -> None:
        configurator = config_to_door_configurator(configuration)
        assert isinstance(configurator, DoorConfigurator)
        assert configurator.rules.hinge_side_seal_mm == 7
        assert configurator.result.derived.opening_width_bottom_mm == 850

    def test_configuration_without_door(
        self, configuration: DesignConfiguration
    ) -> None:
        configuration.door = None
        with pytest.raises(ValueError, match="no door"):
            config_to_door_configurator(configuration)

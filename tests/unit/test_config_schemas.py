"""Unit tests for the design configuration schemas."""

import pytest
from pydantic import ValidationError

from showers.application.config import (
    ChainConfigSchema,
    DesignConfiguration,
    DoorConfigSchema,
    NotchConfigSchema,
    OptionsConfigSchema,
    PanelConfigSchema,
    RulesConfigSchema,
    TopEdgeConfigSchema,
    ViewConfigSchema,
)
from showers.domain.value_objects import MountingStyle, PanelKind, ThresholdType


def _panels() -> list[dict]:
    return [
        {"id": "left", "kind": "fixed", "width_mm": 600},
        {"id": "door", "kind": "door", "width_mm": 700},
        {"id": "right", "kind": "fixed", "width_mm": 500},
    ]


class TestPanelConfigSchema:
    def test_minimal_panel(self) -> None:
        panel = PanelConfigSchema(id="d", kind="door", width_mm=700)
        assert panel.kind == PanelKind.DOOR
        assert panel.door is None
        assert not panel.notches.bottom_left
        assert panel.top_edge.drop_mm is None

    @pytest.mark.parametrize("width", [5, 3001])
    def test_width_out_of_range(self, width: float) -> None:
        with pytest.raises(ValidationError):
            PanelConfigSchema(id="d", kind="door", width_mm=width)

    def test_door_properties_on_fixed_panel_rejected(self) -> None:
        with pytest.raises(ValidationError, match="only valid for door panels"):
            PanelConfigSchema(
                id="f", kind="fixed", width_mm=600, door={"hinge_side": "left"}
            )

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Extra inputs"):
            PanelConfigSchema(id="d", kind="door", width_mm=700, colour="red")

    def test_notch_requires_dimensions(self) -> None:
        with pytest.raises(ValidationError, match="width_mm and height_mm are required"):
            NotchConfigSchema(bottom_left=True, width_mm=50)

    def test_sloped_top_requires_direction_and_drop(self) -> None:
        with pytest.raises(ValidationError, match="direction and drop_mm"):
            TopEdgeConfigSchema(type="sloped", drop_mm=100)


class TestChainConfigSchema:
    def test_junctions_default_to_straight(self) -> None:
        chain = ChainConfigSchema(panels=_panels())
        assert chain.angles() == [180, 180]

    def test_junction_angles_in_chain_order(self) -> None:
        chain = ChainConfigSchema(
            panels=_panels(),
            junctions=[
                {"left": "door", "right": "right", "angle_deg": 90},
                {"left": "left", "right": "door"},
            ],
        )
        assert chain.angles() == [180, 90]

    def test_duplicate_ids_rejected(self) -> None:
        panels = _panels()
        panels[2]["id"] = "left"
        with pytest.raises(ValidationError, match="Duplicate panel ids: left"):
            ChainConfigSchema(panels=panels)

    def test_wrong_junction_count_rejected(self) -> None:
        with pytest.raises(ValidationError, match="needs 2 junctions"):
            ChainConfigSchema(
                panels=_panels(), junctions=[{"left": "left", "right": "door"}]
            )

    def test_non_adjacent_junction_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not join adjacent panels"):
            ChainConfigSchema(
                panels=_panels(),
                junctions=[
                    {"left": "left", "right": "right"},
                    {"left": "door", "right": "right"},
                ],
            )

    def test_unsupported_angle_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChainConfigSchema(
                panels=_panels()[:2],
                junctions=[{"left": "left", "right": "door", "angle_deg": 135}],
            )

    def test_chain_without_door_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one door"):
            ChainConfigSchema(panels=[{"id": "f", "kind": "fixed", "width_mm": 600}])

    def test_anchor_must_be_a_door(self) -> None:
        with pytest.raises(ValidationError, match="is not a door panel"):
            ChainConfigSchema(panels=_panels(), anchor="left")


class TestOptionAndViewSchemas:
    def test_option_defaults(self) -> None:
        options = OptionsConfigSchema()
        assert options.mounting_style == MountingStyle.CHANNEL
        assert options.threshold == ThresholdType.NONE
        assert options.ceiling_air_gap_mm == 40.0
        assert options.glass_thickness_mm == 10

    def test_air_gap_limited_to_slider_range(self) -> None:
        with pytest.raises(ValidationError):
            OptionsConfigSchema(ceiling_air_gap_mm=150)

    def test_unknown_glass_thickness_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OptionsConfigSchema(glass_thickness_mm=12)

    def test_view_angle_range(self) -> None:
        with pytest.raises(ValidationError):
            ViewConfigSchema(view_angle_deg=120)

    def test_view_padding_must_fit(self) -> None:
        with pytest.raises(ValidationError, match="must exceed padding"):
            ViewConfigSchema(width=150)


class TestDoorConfigSchema:
    def test_known_measurements(self) -> None:
        door = DoorConfigSchema(
            measurements={"left_wall_to_vertical_laser_bottom": 450}
        )
        assert door.measurements["left_wall_to_vertical_laser_bottom"] == 450

    def test_unknown_measurement_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown measurements: width"):
            DoorConfigSchema(measurements={"width": 800})

    def test_non_positive_measurement_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be positive"):
            DoorConfigSchema(
                measurements={"left_wall_to_vertical_laser_bottom": 0}
            )


class TestRulesConfigSchema:
    def test_only_set_fields_are_overrides(self) -> None:
        rules = RulesConfigSchema(hinge_side_seal_mm=7, bottom_seal_mm=12)
        assert rules.overrides() == {"hinge_side_seal_mm": 7, "bottom_seal_mm": 12}

    def test_string_density_keys_are_coerced(self) -> None:
        rules = RulesConfigSchema.model_validate(
            {"glass_weight_per_m2": {"10": 25.5, "12": 30}}
        )
        assert rules.glass_weight_per_m2 == {10: 25.5, 12: 30.0}

    def test_non_positive_density_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid glass weight"):
            RulesConfigSchema(glass_weight_per_m2={10: 0})

    def test_unknown_rule_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RulesConfigSchema(magic_mm=3)


class TestDesignConfiguration:
    def test_minimal_configuration(self) -> None:
        config = DesignConfiguration(
            schema_version="1.0", chain={"panels": _panels()}
        )
        assert config.chain is not None
        assert config.rules is None
        assert config.door is None

    @pytest.mark.parametrize("version", ["1.0", "1.1", "1.7"])
    def test_supported_versions(self, version: str) -> None:
        config = DesignConfiguration(
            schema_version=version, chain={"panels": _panels()}
        )
        assert config.schema_version == version

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version: 2.0"):
            DesignConfiguration(schema_version="2.0", chain={"panels": _panels()})

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            DesignConfiguration(schema_version="one", chain={"panels": _panels()})

    def test_empty_configuration_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must contain a chain or a door"):
            DesignConfiguration(schema_version="1.0")

    def test_door_only_configuration(self) -> None:
        config = DesignConfiguration(schema_version="1.1", door={})
        assert config.chain is None
        assert config.door is not None

    def test_rakes_for_unknown_panel_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown panels: ghost"):
            DesignConfiguration(
                schema_version="1.0",
                chain={"panels": _panels()},
                options={
                    "rakes": {"ghost": {"floor": {"amount_mm": 5, "lower_side": "left"}}}
                },
            )

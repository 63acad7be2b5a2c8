"""Integration tests from a JSON design file to derived fabrication data."""

import json
from pathlib import Path

import pytest

from showers.application import RecomputeDesignCommand, ServiceFactory
from showers.application.config import (
    config_to_design_state,
    config_to_door_configurator,
    config_to_rules,
    load_config,
)
from showers.domain.value_objects import HingeFamily

pytestmark = pytest.mark.integration


WALK_IN = {
    "schema_version": "1.1",
    "chain": {
        "panels": [
            {
                "id": "left",
                "kind": "fixed",
                "width_mm": 600,
                "notches": {"bottom_left": True, "width_mm": 80, "height_mm": 120},
            },
            {
                "id": "door",
                "kind": "door",
                "width_mm": 700,
                "door": {"hinge_side": "right"},
            },
            {"id": "return", "kind": "fixed", "width_mm": 500},
        ],
        "junctions": [
            {"left": "left", "right": "door"},
            {"left": "door", "right": "return", "angle_deg": 90},
        ],
    },
    "options": {
        "panel_height_mm": 2000,
        "glass_thickness_mm": 8,
        "threshold": "tapered_threshold",
        "rakes": {"door": {"floor": {"amount_mm": 6, "lower_side": "left"}}},
    },
    "view": {"view_angle_deg": 45},
    "rules": {"hinge_side_seal_mm": 6},
    "door": {
        "measurements": {
            "left_wall_to_vertical_laser_bottom": 400,
            "vertical_laser_to_right_wall_bottom": 400,
            "glass_height_hinge_side_mm": 1900,
        }
    },
}


@pytest.fixture
def design_file(tmp_path: Path) -> Path:
    path = tmp_path / "walk-in.json"
    path.write_text(json.dumps(WALK_IN, indent=2), encoding="utf-8")
    return path


class TestConfigToRecompute:
    def test_chain_from_file(self, design_file: Path) -> None:
        config = load_config(design_file)
        factory = ServiceFactory(rules=config_to_rules(config))
        command: RecomputeDesignCommand = factory.create_recompute_command()

        derived = command.execute(config_to_design_state(config))
        assert derived.is_valid, derived.errors

        door = derived.fabrication["door"].deductions
        # 700 - 6 hinge side - 9 handle side
        assert door.cut_width == 685
        # 2000 - 18 tapered threshold, rake added on the low side
        assert door.cut_height_right == 1982
        assert door.cut_height_left == 1988

        assert derived.fabrication["return"].deductions.cut_width == 482
        assert derived.notch_outlines["left"].is_notched
        assert derived.projection.view_angle_deg == 45

    def test_glass_thickness_drives_weight(self, design_file: Path) -> None:
        config = load_config(design_file)
        factory = ServiceFactory(rules=config_to_rules(config))
        derived = factory.create_recompute_command().execute(
            config_to_design_state(config)
        )
        left = derived.fabrication["left"]
        assert left.weight_kg == pytest.approx(0.595 * 1.98 * 20)

    def test_door_from_file(self, design_file: Path) -> None:
        configurator = config_to_door_configurator(load_config(design_file))
        result = configurator.result
        # 800 - 6 - 9
        assert result.glass_size.width_bottom_mm == 785
        assert result.glass_size.height_left_mm == 1890
        assert result.hinge_selection.family == HingeFamily.GENEVA
        assert configurator.next_required_inputs() == (
            "left_wall_to_vertical_laser_top",
            "vertical_laser_to_right_wall_top",
            "floor_to_horizontal_laser_left",
            "floor_to_horizontal_laser_right",
        )

"""Unit tests for the configuration loader."""

import json
from pathlib import Path

import pytest

from showers.application.config import ConfigError, load_config, load_config_from_dict
from showers.application.config.loader import _format_json_path


def _valid_data() -> dict:
    return {
        "schema_version": "1.0",
        "chain": {
            "panels": [
                {"id": "door", "kind": "door", "width_mm": 700},
                {"id": "return", "kind": "fixed", "width_mm": 500},
            ],
            "junctions": [{"left": "door", "right": "return", "angle_deg": 90}],
        },
        "options": {"ceiling_air_gap_mm": 30},
    }


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "design.json"
    path.write_text(json.dumps(_valid_data()), encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_valid_file(self, config_file: Path) -> None:
        config = load_config(config_file)
        assert config.schema_version == "1.0"
        assert config.chain.angles() == [90]
        assert config.options.ceiling_air_gap_mm == 30

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path
        assert "Config file not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "chain": }', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert "Invalid JSON" in error.message

    def test_validation_error_details(self, tmp_path: Path) -> None:
        data = _valid_data()
        data["chain"]["panels"][1]["width_mm"] = 5
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "chain.panels[1].width_mm"
        assert error.details[0]["value"] == 5
        assert "Configuration validation failed" in error.message
        assert "(got: 5)" in error.message

    def test_model_error_reported_without_whole_object(self) -> None:
        data = _valid_data()
        data["chain"]["anchor"] = "return"
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        error = exc_info.value
        assert error.path is None
        assert error.details[0]["path"] == "chain"
        assert "is not a door panel" in error.message
        assert "got:" not in error.message


class TestLoadConfigFromDict:
    def test_valid_dict(self) -> None:
        config = load_config_from_dict(_valid_data())
        assert len(config.chain.panels) == 2

    def test_missing_version(self) -> None:
        data = _valid_data()
        del data["schema_version"]
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_unknown_top_level_key(self) -> None:
        data = _valid_data()
        data["colour"] = "blue"
        with pytest.raises(ConfigError, match="colour"):
            load_config_from_dict(data)


class TestFormatJsonPath:
    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("chain", "anchor"), "chain.anchor"),
            (("chain", "panels", 0, "width_mm"), "chain.panels[0].width_mm"),
            ((0,), "[0]"),
            ((), ""),
        ],
    )
    def test_format(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected

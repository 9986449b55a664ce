"""Tests for AppConfig and its persistence."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from argbcolor.exceptions import ConfigFileInvalidError, ConfigValidationError
from argbcolor.models import AppConfig, Color


class TestAppConfig:
    """Test the AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.palette == {}
        assert config.output_format == "hex"

    @pytest.mark.unit
    def test_palette_strings_become_colors(self, brand_config):
        assert brand_config.palette["Brand"] == Color.from_uint32(0xFF112233)

    @pytest.mark.unit
    def test_palette_accepts_names(self):
        config = AppConfig(palette={"Accent": "tomato"})
        assert config.palette["Accent"] == Color.from_rgb(0xFF, 0x63, 0x47)

    @pytest.mark.unit
    def test_invalid_palette_color(self):
        with pytest.raises(ValidationError):
            AppConfig(palette={"Brand": "#12345"})

    @pytest.mark.unit
    def test_invalid_palette_name(self):
        with pytest.raises(ValidationError):
            AppConfig(palette={"#Brand": "#ff112233"})

    @pytest.mark.unit
    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            AppConfig(output_format="css")

    @pytest.mark.unit
    def test_color_table_includes_palette(self, brand_config):
        table = brand_config.color_table()
        assert table.lookup("brand") == Color.from_uint32(0xFF112233)
        assert table.lookup("red") == Color.from_rgb(255, 0, 0)

    @pytest.mark.unit
    def test_json_uses_color_strings(self, brand_config):
        data = json.loads(brand_config.model_dump_json())
        assert data["palette"] == {"Brand": "#ff112233"}
        assert AppConfig.model_validate_json(brand_config.model_dump_json()) == brand_config


class TestAppConfigFiles:
    """Test loading and saving config files."""

    @pytest.mark.integration
    def test_missing_file_gives_defaults(self, config_path: Path):
        assert AppConfig.load_or_default(config_path) == AppConfig()
        assert not config_path.exists()

    @pytest.mark.integration
    def test_save_and_load(self, config_path: Path, brand_config):
        brand_config.save(config_path)
        assert AppConfig.load_or_default(config_path) == brand_config

    @pytest.mark.integration
    def test_invalid_json(self, config_path: Path):
        config_path.write_text("{not json")
        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(config_path)

    @pytest.mark.integration
    def test_empty_file(self, config_path: Path):
        config_path.write_text("   \n")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert "empty" in exc_info.value.user_message

    @pytest.mark.integration
    def test_invalid_palette_value(self, config_path: Path):
        config_path.write_text(json.dumps({"palette": {"Brand": "NotAColor"}}))
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert exc_info.value.field.startswith("palette")
        assert exc_info.value.file_path == str(config_path)
        assert "color name" in exc_info.value.recovery_hint

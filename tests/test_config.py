"""
Tests for prop_codegen.core.config.
"""
import json

import pytest

from prop_codegen.core.config import (
    IMAGE_CONVERSIONS_INCLUDE,
    ConfigManager,
    CppTypeConfig,
    get_config_manager,
    load_config,
)
from prop_codegen.core.errors import ConfigError


class TestCppTypeConfig:
    """Tests for the default configuration."""

    def test_defaults(self):
        config = CppTypeConfig()
        assert config.bool_type == "bool"
        assert config.string_type == "std::string"
        assert config.int_type == "int"
        assert config.double_type == "double"
        assert config.float_type == "Float"
        assert config.image_source_include == IMAGE_CONVERSIONS_INCLUDE


class TestConfigManager:
    """Tests for loading and merging configuration."""

    def test_no_overrides(self):
        assert ConfigManager().get_config() == CppTypeConfig()

    def test_custom_overrides(self):
        config = ConfigManager().get_config({"int_type": "int32_t"})
        assert config.int_type == "int32_t"
        assert config.string_type == "std::string"

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"int_type": "int32_t", "float_type": "float"}))

        config = ConfigManager().get_config({"float_type": "double"}, config_file=path)
        assert config.int_type == "int32_t"
        assert config.float_type == "double"

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="time_type"):
            ConfigManager().get_config({"time_type": "std::chrono"})

    @pytest.mark.parametrize("value", ["", "   ", 3, None])
    def test_invalid_value(self, value):
        with pytest.raises(ConfigError, match="int_type"):
            ConfigManager().get_config({"int_type": value})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager().get_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("int_type: int")
        with pytest.raises(ConfigError, match="must be JSON"):
            ConfigManager().get_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            ConfigManager().get_config(config_file=path)

    def test_json_not_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            ConfigManager().get_config(config_file=path)

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "saved.json"
        config = CppTypeConfig(string_type="folly::fbstring")
        ConfigManager().save_config(config, path)
        assert ConfigManager().get_config(config_file=path) == config


def test_load_config_uses_global_manager():
    assert get_config_manager() is get_config_manager()
    assert load_config({"bool_type": "bool_t"}).bool_type == "bool_t"

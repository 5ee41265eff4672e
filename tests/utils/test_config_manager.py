"""Tests for ConfigManager class."""

from pathlib import Path
from unittest.mock import patch

import pytest

from solid_examples.utils.config_manager import ConfigManager
from solid_examples.utils.constants import DEFAULT_CONFIG_PATH

SAMPLE_CONFIG = """
[storage]
base_path = "/tmp/solid"

[run]
default_examples = ["ocp_02", "lsp_04"]

[logging]
wrap_width = 100
"""


class TestConfigManagerInit:
    """Tests for ConfigManager initialization."""

    def test_init_with_path(self):
        """Test ConfigManager initialization with explicit path."""
        manager = ConfigManager("~/custom.toml")
        assert manager.config_path == Path("~/custom.toml").expanduser()
        assert manager.explicit is True
        assert manager._config is None

    def test_init_without_path(self):
        """Test ConfigManager initialization with default path."""
        manager = ConfigManager()
        assert manager.config_path == Path(DEFAULT_CONFIG_PATH).expanduser()
        assert manager.explicit is False


class TestConfigManagerLoad:
    """Tests for ConfigManager.load() method."""

    def test_load_cached_config(self):
        """Test load() returns cached config."""
        manager = ConfigManager()
        manager._config = {"test": "value"}
        assert manager.load() == {"test": "value"}

    def test_missing_default_file_is_empty(self, tmp_path):
        """Test a missing default config file yields an empty config."""
        with patch("solid_examples.utils.config_manager.DEFAULT_CONFIG_PATH", str(tmp_path / "none.toml")):
            manager = ConfigManager()
        assert manager.load() == {}

    def test_missing_explicit_file(self, tmp_path):
        """Test load() raises FileNotFoundError for a missing explicit file."""
        config_path = tmp_path / "nonexistent.toml"
        manager = ConfigManager(str(config_path))

        with pytest.raises(FileNotFoundError) as exc_info:
            manager.load()

        assert str(config_path) in str(exc_info.value)

    def test_load_success(self, temp_config):
        """Test load() successfully loads TOML file."""
        manager = ConfigManager(str(temp_config(SAMPLE_CONFIG)))
        result = manager.load()

        assert result["storage"]["base_path"] == "/tmp/solid"
        assert manager._config == result

    def test_load_invalid_toml(self, temp_config):
        """Test load() raises ValueError for invalid TOML."""
        manager = ConfigManager(str(temp_config("invalid toml content [unclosed")))

        with pytest.raises(ValueError, match="Invalid TOML"):
            manager.load()

    def test_load_directory(self, tmp_path):
        """Test load() raises ValueError when the path cannot be read."""
        manager = ConfigManager(str(tmp_path))

        with pytest.raises(ValueError, match="Failed to load"):
            manager.load()


class TestConfigManagerAccess:
    """Tests for get, get_section, has_key and reload."""

    @pytest.fixture
    def manager(self, temp_config):
        return ConfigManager(str(temp_config(SAMPLE_CONFIG)))

    def test_get_nested(self, manager):
        assert manager.get("storage.base_path") == "/tmp/solid"
        assert manager.get("run.default_examples") == ["ocp_02", "lsp_04"]
        assert manager.get("logging.wrap_width") == 100

    def test_get_default(self, manager):
        assert manager.get("storage.missing", "fallback") == "fallback"
        assert manager.get("storage.base_path.deeper", "fallback") == "fallback"

    def test_get_section(self, manager):
        assert manager.get_section("run") == {"default_examples": ["ocp_02", "lsp_04"]}
        assert manager.get_section("missing") == {}

    def test_has_key(self, manager):
        assert manager.has_key("logging.wrap_width") is True
        assert manager.has_key("logging.level") is False

    def test_has_key_unreadable_config(self, tmp_path):
        assert ConfigManager(str(tmp_path / "missing.toml")).has_key("storage") is False

    def test_reload(self, manager):
        """Test reload() picks up changes on disk."""
        manager.load()
        manager.config_path.write_text('[storage]\nbase_path = "/srv"\n', encoding="utf-8")

        assert manager.get("storage.base_path") == "/tmp/solid"
        manager.reload()
        assert manager.get("storage.base_path") == "/srv"

# File: tests/unit/test_config_manager.py
"""
Unit tests for configuration loading.
"""

import json
from pathlib import Path
import pytest

from conflict_engine.core.config_manager import Config
from conflict_engine.models import ConfigurationError, EngineConfig


@pytest.fixture
def temp_config_file(tmp_path, sample_engine_json):
    """Write a sample engine.json into a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_file = config_dir / "engine.json"
    config_file.write_text(json.dumps(sample_engine_json))
    return config_file


class TestLoadEngineConfig:
    """Tests for Config.load_engine_config."""

    def test_file_values_loaded(self, temp_config_file):
        config = Config.load_engine_config(temp_config_file)

        assert isinstance(config, EngineConfig)
        assert config.day_start_hour == 7
        assert config.granularity_minutes == 15
        assert config.timezone == "Europe/Amsterdam"

    def test_partial_file_uses_env_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "MAX_COLUMNS", 4)
        config_file = tmp_path / "engine.json"
        config_file.write_text(json.dumps({"day_end_hour": 18}))

        config = Config.load_engine_config(config_file)

        assert config.day_end_hour == 18
        assert config.max_columns == 4

    def test_missing_default_file_uses_env(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "absent.json")

        config = Config.load_engine_config()

        assert config.to_dict() == EngineConfig.from_dict(Config.defaults()).to_dict()

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load_engine_config(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "engine.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            Config.load_engine_config(config_file)

    def test_non_object_json(self, tmp_path):
        config_file = tmp_path / "engine.json"
        config_file.write_text("[1, 2]")

        with pytest.raises(ConfigurationError, match="JSON object"):
            Config.load_engine_config(config_file)

    def test_invalid_values_rejected(self, tmp_path):
        config_file = tmp_path / "engine.json"
        config_file.write_text(json.dumps({"granularity_minutes": 45}))

        with pytest.raises(ConfigurationError, match="divide 60"):
            Config.load_engine_config(config_file)

    def test_repository_config_is_valid(self):
        repo_config = Path(__file__).resolve().parents[2] / "config" / "engine.json"
        config = Config.load_engine_config(repo_config)
        assert config.max_columns == 2

# File: conflict_engine/core/config_manager.py
"""
Centralized configuration management for the conflict engine.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv

from conflict_engine.models.config import EngineConfig, DEFAULT_FALLBACK_TIMES
from conflict_engine.models.errors import ConfigurationError

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    """Application configuration."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from conflict_engine/core/
    CONFIG_DIR = BASE_DIR / "config"
    LOGS_DIR = BASE_DIR / "logs"

    # Files
    CONFIG_FILE = Path(os.getenv("ENGINE_CONFIG_FILE", str(CONFIG_DIR / "engine.json")))

    # Business-day window
    DAY_START_HOUR = _env_int("ENGINE_DAY_START_HOUR", 6)
    DAY_END_HOUR = _env_int("ENGINE_DAY_END_HOUR", 22)

    # Layout and advisor policy
    MAX_COLUMNS = _env_int("ENGINE_MAX_COLUMNS", 2)
    GRANULARITY_MINUTES = _env_int("ENGINE_GRANULARITY_MINUTES", 30)
    DEFAULT_DURATION_MINUTES = _env_int("ENGINE_DEFAULT_DURATION", 60)
    FALLBACK_TIMES: List[str] = _env_list("ENGINE_FALLBACK_TIMES", DEFAULT_FALLBACK_TIMES)

    # Business timezone for the "now" indicator
    TIMEZONE = os.getenv("ENGINE_TIMEZONE", "UTC")

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Engine settings taken from the environment."""
        return {
            'day_start_hour': cls.DAY_START_HOUR,
            'day_end_hour': cls.DAY_END_HOUR,
            'max_columns': cls.MAX_COLUMNS,
            'granularity_minutes': cls.GRANULARITY_MINUTES,
            'default_duration_minutes': cls.DEFAULT_DURATION_MINUTES,
            'fallback_times': list(cls.FALLBACK_TIMES),
            'timezone': cls.TIMEZONE,
        }

    @classmethod
    def load_engine_config(cls, path: Optional[Path] = None) -> EngineConfig:
        """
        Build a validated EngineConfig.

        Values from the JSON config file (if present) override the
        environment defaults.
        """
        data = cls.defaults()
        config_file = Path(path) if path else cls.CONFIG_FILE

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    file_data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {config_file}: {e}") from e
            if not isinstance(file_data, dict):
                raise ConfigurationError(f"{config_file} must contain a JSON object")
            data.update(file_data)
        elif path:
            raise FileNotFoundError(f"Config file not found: {config_file}")

        return EngineConfig.from_dict(data)

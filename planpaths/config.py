"""
YAML-based configuration for planpaths.

Controls how search results are rendered and which plan section is searched
by default. Every setting has a built-in default, so running without a config
file is fine.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from planpaths.search.path_format import PATH_STYLES

CONFIG_ENV_VAR = "PLANPATHS_CONFIG"
CONFIG_FILENAME = "planpaths.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class OutputConfig:
    """How occurrences are printed."""
    style: str = "jq"
    show_values: bool = True
    unwrap_constants: bool = False


@dataclass
class SearchConfig:
    """Search defaults."""
    section: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"


@dataclass
class PlanPathsConfig:
    """
    Configuration loaded from YAML.

    Structure:
        output -> style / show_values / unwrap_constants
        search -> section
        logging -> level
    """
    output: OutputConfig = field(default_factory=OutputConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> PlanPathsConfig:
        """Load configuration from YAML file."""
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {yaml_path}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict) -> PlanPathsConfig:
        """Parse configuration dictionary."""
        output_data = data.get('output') or {}
        if not isinstance(output_data, dict):
            output_data = {}

        style = output_data.get('style', 'jq')
        if style not in PATH_STYLES:
            raise ValueError(f"Invalid output style '{style}' (expected one of {', '.join(PATH_STYLES)})")

        output = OutputConfig(
            style=style,
            show_values=bool(output_data.get('show_values', True)),
            unwrap_constants=bool(output_data.get('unwrap_constants', False)),
        )

        search_data = data.get('search') or {}
        if not isinstance(search_data, dict):
            search_data = {}
        section = search_data.get('section')
        search = SearchConfig(section=section if isinstance(section, str) and section else None)

        logging_data = data.get('logging') or {}
        if not isinstance(logging_data, dict):
            logging_data = {}
        level = str(logging_data.get('level', 'WARNING')).upper()
        if level not in LOG_LEVELS:
            level = 'WARNING'

        return cls(output=output, search=search, logging=LoggingConfig(level=level))


# Global configuration instance
_config: Optional[PlanPathsConfig] = None


def get_config(config_path: Optional[str | Path] = None) -> PlanPathsConfig:
    """
    Get the global configuration.

    Args:
        config_path: Path to YAML config file. If None, uses default locations:
                    1. PLANPATHS_CONFIG environment variable
                    2. ./planpaths.yaml (current directory)
                    3. ~/.planpaths/planpaths.yaml (home directory)
                    Falls back to built-in defaults when none exists.

    Returns:
        PlanPathsConfig instance
    """
    global _config

    if _config is not None and config_path is None:
        return _config

    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            candidates = [
                Path.cwd() / CONFIG_FILENAME,
                Path.home() / '.planpaths' / CONFIG_FILENAME,
            ]
            for candidate in candidates:
                if candidate.exists():
                    config_path = candidate
                    break

    if config_path is None:
        _config = PlanPathsConfig()
    else:
        _config = PlanPathsConfig.from_yaml(config_path)
    return _config


def reset_config() -> None:
    """Reset the global configuration cache."""
    global _config
    _config = None


def set_config(config: PlanPathsConfig) -> None:
    """Set a custom configuration."""
    global _config
    _config = config

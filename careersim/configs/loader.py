"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates the sections the simulator reads.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty or not a mapping
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a mapping: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in ("global", "scoring"):
        if section in config and not isinstance(config[section], dict):
            issues.append(f"Section '{section}' must be a mapping, got {config[section]!r}")
    scoring = config.get("scoring")
    if isinstance(scoring, dict) and "blend" in scoring and not isinstance(scoring["blend"], dict):
        issues.append(f"scoring.blend must be a mapping, got {scoring['blend']!r}")

    # Log level
    level = str(get_config_value(config, "global.log_level", "INFO")).upper()
    if level not in VALID_LOG_LEVELS:
        issues.append(f"Unknown global.log_level: {level}")

    # Blend constants
    blend = get_config_value(config, "scoring.blend", {})
    if isinstance(blend, dict) and blend:
        stated = blend.get("stated_weight", 0.6)
        event = blend.get("event_weight", 0.4)
        if abs(stated + event - 1.0) > 0.01:
            issues.append(f"Blend weights don't sum to 1: {stated} + {event}")

        offset = blend.get("event_offset", 0.5)
        if not 0 <= offset <= 1:
            issues.append(f"scoring.blend.event_offset must be in [0, 1], got {offset}")

        divisor = blend.get("event_divisor", 8.0)
        if divisor <= 0:
            issues.append(f"scoring.blend.event_divisor must be positive, got {divisor}")

    unknown = set(config) - {"global", "scoring"}
    for section in sorted(unknown):
        issues.append(f"Unknown configuration section: {section}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.blend.event_divisor")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value

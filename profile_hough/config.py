"""
Configuration management for profile_hough
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List

import yaml

from profile_hough.types import Constraints

# Detector values used by the scan application: a 0.81" radius searched over
# +/-15" by +/-30" on a 0.05" grid (all in milli-inches).
DEFAULT_CONFIG = {
    "detector": {
        "radius": 810,
        "step": 50,
        "x_lower": -15000,
        "x_upper": 15000,
        "y_lower": -30000,
        "y_upper": 30000
    },
    "processing": {
        "min_weight": 0.0
    },
    "logging": {
        "level": "INFO",
        "file": None
    }
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _unknown_keys(base: Dict[str, Any], override: Dict[str, Any], prefix: str = "") -> List[str]:
    unknown = []
    for key, value in override.items():
        path = f"{prefix}{key}"
        if key not in base:
            unknown.append(path)
            continue
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            unknown.extend(_unknown_keys(base[key], value, prefix=f"{path}."))
    return unknown


def _misshapen_sections(base: Dict[str, Any], override: Dict[str, Any], prefix: str = "") -> List[str]:
    misshapen = []
    for key, value in override.items():
        if not isinstance(base.get(key), dict):
            continue
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            misshapen.extend(_misshapen_sections(base[key], value, prefix=f"{path}."))
        else:
            misshapen.append(path)
    return misshapen


def merge_config(override: Dict[str, Any] = None) -> Dict[str, Any]:
    """Overlay override on a copy of DEFAULT_CONFIG, rejecting unknown keys
    and sections replaced by non-mappings."""
    override = override or {}
    if not isinstance(override, dict):
        raise ValueError(f"Config override must be a mapping, got {type(override).__name__}")
    unknown = _unknown_keys(DEFAULT_CONFIG, override)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    misshapen = _misshapen_sections(DEFAULT_CONFIG, override)
    if misshapen:
        raise ValueError(f"Config sections must be mappings: {', '.join(misshapen)}")
    return deep_merge(deepcopy(DEFAULT_CONFIG), override)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load a YAML config file merged over the defaults."""
    with open(Path(config_path), 'r') as f:
        override = yaml.safe_load(f) or {}
    if not isinstance(override, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return merge_config(override)


def radius_from_config(config: Dict[str, Any]) -> int:
    return config["detector"]["radius"]


def constraints_from_config(config: Dict[str, Any]) -> Constraints:
    return Constraints.from_dict(config["detector"])

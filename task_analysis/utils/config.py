"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'analysis': {
            'holiday_label': 'holiday',
            'workday_label': 'workday',
            'no_group_label': '-',
        },
        'calendar': {
            'working_days': [0, 1, 2, 3, 4],  # Monday to Friday
        },
        'output': {
            'indent': 2,
        },
    }


def merge_config(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Layer a partial configuration over the defaults."""
    config = get_default_config()
    if overrides:
        _merge_into(config, overrides)
    return config


def _merge_into(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge_into(base[key], value)
        else:
            base[key] = copy.deepcopy(value)

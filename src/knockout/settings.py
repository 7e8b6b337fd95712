"""
Bracket settings stored as YAML.
"""
import os
from typing import Dict

import yaml

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
DEFAULT_SETTINGS_FILE = os.environ.get('BRACKET_SETTINGS_FILE', os.path.join(BASE_DIR, 'data', 'bracket.yaml'))


def get_default_settings() -> Dict:
    """Return default settings."""
    return {
        'bracket_style': 'single_elimination',
        'third_place_match': True,
        'log_level': 'WARNING',
    }


def load_settings(path: str = None) -> Dict:
    """Load settings from YAML file, merging with defaults."""
    defaults = get_default_settings()
    path = path or DEFAULT_SETTINGS_FILE
    if not os.path.exists(path):
        return defaults
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if not data:
        return defaults
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    # Merge with defaults to ensure all keys exist
    for key, value in defaults.items():
        if key not in data:
            data[key] = value
    return data


def save_settings(settings: Dict, path: str = None):
    """Save settings to YAML file."""
    path = path or DEFAULT_SETTINGS_FILE
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(settings, f, default_flow_style=False)

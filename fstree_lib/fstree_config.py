# -*- coding: utf-8 -*-
"""
Configuration settings, constants, and default directory handling for fstree.
"""

import json
from pathlib import Path
from typing import Optional, Dict, Any

# --- Constants ---

CONFIG_FILENAME = ".fstree_config.json"
DEFAULT_HTML_FILENAME = "tree.html"

# Initial values the searches report when nothing qualified.
LARGEST_SIZE_SENTINEL = -1
DENSEST_COUNT_SENTINEL = -1

# Keys persisted by save_config; the root directory is stored separately.
SAVED_KEYS = ("style", "colorize", "follow_symlinks", "verbose")


# --- Saved Configuration ---
def get_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME

def get_saved_config() -> Dict[str, Any]:
    """Get all saved configuration options"""
    config_file = get_config_path()
    try:
        if config_file.exists():
            config = json.loads(config_file.read_text(encoding='utf-8'))
            if isinstance(config, dict):
                return config
    except (OSError, ValueError):
        pass # Unreadable or corrupted config means defaults
    return {}

def get_default_dir() -> Optional[str]:
    """Get stored default directory from user config"""
    return get_saved_config().get('default_dir')

def _write_config(config_data: Dict[str, Any]) -> bool:
    try:
        get_config_path().write_text(json.dumps(config_data, indent=2), encoding='utf-8')
        return True
    except OSError as e:
        print(f"Warning: Error saving configuration: {e}")
        return False

def set_default_dir(directory: str) -> bool:
    """Store default directory in user config"""
    config_data = get_saved_config()
    config_data['default_dir'] = str(Path(directory).resolve())
    return _write_config(config_data)

def save_config(config_to_save: Dict[str, Any]) -> bool:
    """Save display/behaviour settings for future runs"""
    config_data = get_saved_config()
    for key in SAVED_KEYS:
        if key in config_to_save:
            config_data[key] = config_to_save[key]
    return _write_config(config_data)

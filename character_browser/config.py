"""
Configuration settings for the Character Browser
"""

import copy
import os
import json
from typing import Dict, Any
from urllib.parse import urlparse

from character_browser.errors import ConfigError


DEFAULT_CONFIG = {
    "api": {
        "base_url": "https://rickandmortyapi.com/api/character",
        "timeout": 15,
        "impersonate": "chrome110"
    },
    "pagination": {
        "start_page": 1,
        "discard_stale_responses": True
    },
    "ui": {
        "title": "Character List"
    },
    "logging": {
        "level": "INFO",
        "file": "logs/character_browser.log"
    }
}

CONFIG_FILE = os.path.expanduser("~/.character_browser_config.json")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `override` into `base` section by section."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(config_file):
        try:
            with open(config_file, 'r') as f:
                file_config = json.load(f)
            if isinstance(file_config, dict):
                _deep_merge(config, file_config)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Error loading config file: {e}")

    # Override with environment variables
    if os.environ.get("CHARACTER_API_URL"):
        config["api"]["base_url"] = os.environ["CHARACTER_API_URL"]

    if os.environ.get("CHARACTER_API_TIMEOUT"):
        try:
            config["api"]["timeout"] = float(os.environ["CHARACTER_API_TIMEOUT"])
        except ValueError:
            raise ConfigError(
                f"CHARACTER_API_TIMEOUT must be a number, got {os.environ['CHARACTER_API_TIMEOUT']!r}"
            )

    if os.environ.get("CHARACTER_BROWSER_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["CHARACTER_BROWSER_LOG_LEVEL"]

    return config


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the values the core depends on; raise ConfigError on the first bad one.
    """
    api = config.get("api", {})
    base_url = api.get("base_url")
    parsed = urlparse(base_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"api.base_url must be an http(s) URL, got {base_url!r}")

    timeout = api.get("timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"api.timeout must be a positive number, got {timeout!r}")

    start_page = config.get("pagination", {}).get("start_page", 1)
    if isinstance(start_page, bool) or not isinstance(start_page, int) or start_page < 1:
        raise ConfigError(f"pagination.start_page must be an integer >= 1, got {start_page!r}")

    return config


def save_config(config: Dict[str, Any], config_file: str = CONFIG_FILE) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(config_file, 'w') as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        print(f"Error saving config file: {e}")
        return False

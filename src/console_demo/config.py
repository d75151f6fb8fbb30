"""Default values and override resolution for the console program."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional


LOG_LEVEL_ENV_VAR = "CONSOLE_DEMO_LOG_LEVEL"

DEFAULT_CONFIG: Dict[str, Any] = {
    "parity": {
        "numbers": [1, 2, 3, 4, 5],
    },
    "spacer": {
        "text": "Hello, world!",
    },
    "logging": {
        "level": "WARNING",
    },
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of base updated by override; nested sections merge, leaves replace."""
    merged = {key: deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def build_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a fresh copy of the defaults, optionally merged with overrides."""
    return deep_merge(DEFAULT_CONFIG, overrides or {})


def resolve_log_level(
    cli_value: Optional[str],
    env: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve log verbosity with the following precedence:
    1) --log-level passed by user
    2) CONSOLE_DEMO_LOG_LEVEL environment variable
    3) logging.level from DEFAULT_CONFIG
    """
    if cli_value:
        return cli_value.upper()
    environment = os.environ if env is None else env
    env_value = environment.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_value:
        return env_value.upper()
    return str(DEFAULT_CONFIG["logging"]["level"])

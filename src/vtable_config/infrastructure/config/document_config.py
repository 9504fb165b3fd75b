#!/usr/bin/env python3

"""Settings for decoding and writing vtable documents."""

import os
from typing import Any

from ...domain.models.keyed_container import DuplicatePolicy
from ..logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "VTABLE_"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Collision handling when a document repeats an address
    "DUPLICATE_POLICY": DuplicatePolicy.REJECT.value,

    # Output formatting
    "JSON_INDENT": 4,

    # Key holding the vtable array inside an enclosing config document
    "VTABLES_KEY": "vtables",

    "LOG_MEMORY_USAGE": True,
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden by ``VTABLE_<KEY>``; values are converted to
    the type of the default and ignored when conversion fails.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key, default in DEFAULT_CONFIG.items():
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is None:
            continue

        if isinstance(default, bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(default, int):
            try:
                config[key] = int(env_value)
            except ValueError:
                logger.warning(f"Ignoring non-integer {ENV_PREFIX}{key}={env_value!r}")
        else:
            config[key] = env_value

    return config


def get_duplicate_policy() -> DuplicatePolicy:
    """Get the configured duplicate policy, defaulting to REJECT."""
    raw = str(get_config()["DUPLICATE_POLICY"]).strip().lower()
    try:
        return DuplicatePolicy(raw)
    except ValueError:
        logger.warning(f"Unknown duplicate policy {raw!r}; using '{DuplicatePolicy.REJECT.value}'")
        return DuplicatePolicy.REJECT

"""External network registry loading for launchpad-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from .exceptions import ConfigurationError
from .paths import get_registry_path


def load_network_registry(registry_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load additional network entries from a JSON registry file.

    The file holds a single object mapping network name to
    ``{"url": ..., "accounts": [...], "chainId": ...}``; only ``url`` is required.

    Args:
        registry_path: Registry file (defaults to $NETWORK_REGISTRY_PATH)

    Returns:
        Dictionary mapping network name -> raw entry
        Empty dict if no registry is configured

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object
    """
    if registry_path is None:
        registry_path = get_registry_path()
    if registry_path is None:
        return {}

    try:
        with open(registry_path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Network registry not found at {registry_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Network registry {registry_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Network registry {registry_path} must contain a JSON object, "
            f"got {type(data).__name__}"
        )

    logger.debug("Loaded {} network(s) from registry {}", len(data), registry_path)
    return data


def validate_network_entry(name: Any, entry: Any) -> Mapping[str, Any]:
    """
    Check the shape of a single network entry.

    Args:
        name: Network name
        entry: Raw entry from the static table or a provider

    Returns:
        The entry, unchanged

    Raises:
        ConfigurationError: If the entry is malformed
    """
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"Network name must be a non-empty string, got {name!r}")

    if not isinstance(entry, Mapping):
        raise ConfigurationError(
            f"Network '{name}' must be a mapping, got {type(entry).__name__}"
        )

    url = entry.get("url")
    if not isinstance(url, str) or not url:
        raise ConfigurationError(f"Network '{name}' is missing an RPC url")

    if "accounts" in entry:
        accounts = entry["accounts"]
        if not isinstance(accounts, (list, tuple)) or not all(
            isinstance(a, str) or a is None for a in accounts
        ):
            raise ConfigurationError(f"Network '{name}' accounts must be a list of keys")

    if "chainId" in entry and entry["chainId"] is not None:
        chain_id = entry["chainId"]
        if isinstance(chain_id, bool) or not isinstance(chain_id, int):
            raise ConfigurationError(f"Network '{name}' chainId must be an integer")

    return entry

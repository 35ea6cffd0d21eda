"""Path management utilities for launchpad-deployments library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import ARTIFACTS_DIR_ENV, REGISTRY_PATH_ENV


def get_default_artifacts_dir() -> Path:
    """
    Get default Hardhat artifacts directory.

    Returns:
        $ARTIFACTS_DIR if set, otherwise ./artifacts
    """
    override = os.environ.get(ARTIFACTS_DIR_ENV)
    if override:
        return Path(override).absolute()
    return Path.cwd() / "artifacts"


def get_artifacts_dir(artifacts_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get artifacts directory.

    Args:
        artifacts_root: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Absolute path to the artifacts directory
    """
    if artifacts_root is None:
        return get_default_artifacts_dir()
    return Path(artifacts_root).absolute()


def get_registry_path() -> Optional[Path]:
    """
    Get the network registry file configured in the environment.

    Returns:
        Path from $NETWORK_REGISTRY_PATH, or None when unset
    """
    value = os.environ.get(REGISTRY_PATH_ENV)
    if not value:
        return None
    return Path(value).absolute()

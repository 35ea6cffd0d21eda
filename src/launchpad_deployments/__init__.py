"""
launchpad-deployments: deploy compiled Hardhat artifacts to configured EVM networks
"""

from importlib.metadata import PackageNotFoundError, version

from .config import DeployConfig, load_config, resolve_networks, select_network
from .constants import COMPILER_SETTINGS
from .deployer import Deployer, DeployStage
from .exceptions import (
    ArtifactNotFoundError,
    AuthenticationError,
    ConfigurationError,
    DeployError,
    NetworkError,
    NetworkNotFoundError,
    TransactionRevertedError,
)
from .runner import RunOutcome, run_deploy, run_signers
from .types import CompilerSettings, ContractArtifact, DeploymentResult, NetworkProfile

try:
    __version__ = version("launchpad-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Deployer",
    "DeployStage",
    "DeployConfig",
    "load_config",
    "resolve_networks",
    "select_network",
    "run_deploy",
    "run_signers",
    "RunOutcome",
    "COMPILER_SETTINGS",
    "CompilerSettings",
    "ContractArtifact",
    "DeploymentResult",
    "NetworkProfile",
    "DeployError",
    "ConfigurationError",
    "AuthenticationError",
    "NetworkNotFoundError",
    "ArtifactNotFoundError",
    "NetworkError",
    "TransactionRevertedError",
]

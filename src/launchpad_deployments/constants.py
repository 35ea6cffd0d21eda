"""Configuration constants for launchpad-deployments library."""

from .types import CompilerSettings

COMPILER_SETTINGS = CompilerSettings(
    version="0.8.18",
    optimizer_enabled=True,
    optimizer_runs=100,
    via_ir=True,
)

# Statically configured networks, merged before any registry entries
STATIC_NETWORKS = {
    "mumbai": {
        "url": "https://alfajores-forno.celo-testnet.org",
    },
}

DEFAULT_NETWORK = "mumbai"
DEFAULT_CONTRACT = "LaunchPadDeployer"

# Environment variables
CREDENTIAL_ENV = "PRIVATE_KEY"
NETWORK_ENV = "DEPLOY_NETWORK"
CONTRACT_ENV = "DEPLOY_CONTRACT"
ARTIFACTS_DIR_ENV = "ARTIFACTS_DIR"
REGISTRY_PATH_ENV = "NETWORK_REGISTRY_PATH"
LOG_LEVEL_ENV = "LOG_LEVEL"
POLL_INTERVAL_ENV = "RECEIPT_POLL_INTERVAL"

DEFAULT_POLL_INTERVAL = 2.0

"""Network and compiler configuration resolution for launchpad-deployments library."""

import math
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from loguru import logger

from .constants import (
    COMPILER_SETTINGS,
    CREDENTIAL_ENV,
    DEFAULT_NETWORK,
    DEFAULT_POLL_INTERVAL,
    NETWORK_ENV,
    POLL_INTERVAL_ENV,
    STATIC_NETWORKS,
)
from .exceptions import ConfigurationError, NetworkNotFoundError
from .registry import load_network_registry, validate_network_entry
from .types import CompilerSettings, NetworkProfile

NetworkProvider = Callable[[], Mapping[str, Any]]


@dataclass(frozen=True)
class DeployConfig:
    """Resolved configuration for one run."""

    networks: Dict[str, NetworkProfile]
    compiler: CompilerSettings = COMPILER_SETTINGS
    default_network: str = DEFAULT_NETWORK
    poll_interval: float = DEFAULT_POLL_INTERVAL
    metadata: Dict[str, Any] = field(default_factory=dict)

    def network(self, name: Optional[str] = None) -> NetworkProfile:
        """
        Get a configured network profile.

        Args:
            name: Network name (defaults to the configured default network)

        Returns:
            NetworkProfile

        Raises:
            NetworkNotFoundError: If the network is not configured
        """
        return select_network(self.networks, name or self.default_network)


def credential_env_name(network: str) -> str:
    """
    Get the per-network credential variable name.

    Args:
        network: Network name (e.g., "zeta-testnet")

    Returns:
        Variable name (e.g., "ZETA_TESTNET_PRIVATE_KEY")
    """
    return f"{network.upper().replace('-', '_')}_{CREDENTIAL_ENV}"


def resolve_credentials(
    network: str,
    entry: Mapping[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[str, ...]:
    """
    Resolve the signing keys for a network.

    Lookup order: explicit ``accounts`` in the entry, then
    ``$<NETWORK>_PRIVATE_KEY``, then the shared ``$PRIVATE_KEY``.
    Empty values count as absent.

    Args:
        network: Network name
        entry: Raw network entry
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Tuple of private keys, possibly empty
    """
    if environ is None:
        environ = os.environ

    explicit = tuple(a for a in entry.get("accounts") or () if a)
    if explicit:
        return explicit

    for var in (credential_env_name(network), CREDENTIAL_ENV):
        value = environ.get(var)
        if value:
            return (value,)

    return ()


def parse_poll_interval(value: Optional[str]) -> float:
    """
    Parse the receipt poll interval setting.

    Args:
        value: Seconds as text, or None/empty for the default

    Returns:
        Poll interval in seconds

    Raises:
        ConfigurationError: If the value is not a finite, non-negative number
    """
    if not value:
        return DEFAULT_POLL_INTERVAL
    try:
        interval = float(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{POLL_INTERVAL_ENV} must be a number of seconds, got {value!r}"
        ) from e
    if not math.isfinite(interval) or interval < 0:
        raise ConfigurationError(
            f"{POLL_INTERVAL_ENV} must be a non-negative number of seconds, got {value!r}"
        )
    return interval


def merge_networks(*sources: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge network tables in order; a later entry replaces an earlier one wholesale.

    Args:
        sources: Network tables mapping name -> raw entry

    Returns:
        Merged table

    Raises:
        ConfigurationError: If a source is not a mapping
    """
    merged: Dict[str, Any] = {}
    for source in sources:
        if not isinstance(source, Mapping):
            raise ConfigurationError(
                f"Network provider must return a mapping, got {type(source).__name__}"
            )
        merged.update(source)
    return merged


def resolve_networks(
    static: Optional[Mapping[str, Any]] = None,
    provider: Optional[NetworkProvider] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, NetworkProfile]:
    """
    Build network profiles from the static table and an external provider.

    Args:
        static: Static network table (defaults to STATIC_NETWORKS)
        provider: Callable returning extra entries (defaults to the JSON registry)
        environ: Environment mapping for credentials (defaults to os.environ)

    Returns:
        Dictionary mapping network name -> NetworkProfile

    Raises:
        ConfigurationError: If the provider fails or returns malformed entries
    """
    if static is None:
        static = STATIC_NETWORKS
    if provider is None:
        provider = load_network_registry

    try:
        extra = provider()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Network provider failed: {e}") from e

    merged = merge_networks(static, extra)

    profiles: Dict[str, NetworkProfile] = {}
    for name, entry in merged.items():
        entry = validate_network_entry(name, entry)
        profiles[name] = NetworkProfile(
            name=name,
            rpc_url=entry["url"],
            accounts=resolve_credentials(name, entry, environ),
            chain_id=entry.get("chainId"),
        )

    overridden = sorted(set(static) & set(extra))
    if overridden:
        logger.debug("Provider overrides static networks: {}", ", ".join(overridden))

    return profiles


def select_network(networks: Mapping[str, NetworkProfile], name: str) -> NetworkProfile:
    """
    Look up a network profile by name.

    Raises:
        NetworkNotFoundError: If the network is not configured
    """
    if name not in networks:
        available = ", ".join(sorted(networks)) or "none"
        raise NetworkNotFoundError(
            f"Network '{name}' is not configured (available: {available})"
        )
    return networks[name]


def load_config(
    provider: Optional[NetworkProvider] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DeployConfig:
    """
    Resolve the full run configuration.

    Args:
        provider: Extra network provider (defaults to the JSON registry)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        DeployConfig with the active network taken from $DEPLOY_NETWORK
        and the poll interval from $RECEIPT_POLL_INTERVAL

    Raises:
        ConfigurationError: If network or poll interval configuration is malformed
    """
    if environ is None:
        environ = os.environ

    networks = resolve_networks(provider=provider, environ=environ)
    return DeployConfig(
        networks=networks,
        compiler=COMPILER_SETTINGS,
        default_network=environ.get(NETWORK_ENV) or DEFAULT_NETWORK,
        poll_interval=parse_poll_interval(environ.get(POLL_INTERVAL_ENV)),
        metadata={"solc_settings": COMPILER_SETTINGS.to_solc_settings()},
    )

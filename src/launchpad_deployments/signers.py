"""Signing identities for launchpad-deployments library."""

from typing import List

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address
from web3 import Web3

from .exceptions import AuthenticationError
from .rpc import rpc_errors
from .types import NetworkProfile


def account_from_key(private_key: str, network: str) -> LocalAccount:
    """
    Build a local account from a private key.

    Raises:
        AuthenticationError: If the key cannot be parsed
    """
    try:
        return Account.from_key(private_key)
    except Exception as e:
        # Key parsing errors come from several layers; do not echo the key itself
        raise AuthenticationError(f"Invalid private key configured for network '{network}'") from e


def load_signer(profile: NetworkProfile) -> LocalAccount:
    """
    Get the account that signs deployments on a network (first configured key).

    Args:
        profile: Network profile

    Returns:
        LocalAccount

    Raises:
        AuthenticationError: If the network has no credential configured
    """
    if not profile.accounts:
        raise AuthenticationError(
            f"No signing key configured for network '{profile.name}'. "
            "Set PRIVATE_KEY or the network-specific key variable."
        )
    return account_from_key(profile.accounts[0], profile.name)


def list_signers(profile: NetworkProfile, w3: Web3) -> List[str]:
    """
    List the signing identities available on a network.

    Locally configured keys take precedence; without any, the node's own
    unlocked accounts (``eth_accounts``) are returned.

    Args:
        profile: Network profile
        w3: web3 connection to the same network

    Returns:
        Checksummed addresses, in configuration order
    """
    if profile.accounts:
        return [account_from_key(key, profile.name).address for key in profile.accounts]
    with rpc_errors(f"listing accounts on {profile.name}"):
        addresses = w3.eth.accounts
    return [to_checksum_address(address) for address in addresses]

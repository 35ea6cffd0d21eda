"""Result-returning entry points for launchpad-deployments library."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from web3 import Web3

from .config import NetworkProvider, load_config
from .constants import DEFAULT_CONTRACT
from .deployer import Deployer
from .rpc import connect
from .signers import list_signers


@dataclass
class RunOutcome:
    """Outcome of one run: exactly one of result or error is set."""

    result: Optional[Any] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def run_deploy(
    contract_name: str = DEFAULT_CONTRACT,
    network: Optional[str] = None,
    artifacts_dir: Optional[Path] = None,
    provider: Optional[NetworkProvider] = None,
    w3: Optional[Web3] = None,
    poll_interval: Optional[float] = None,
) -> RunOutcome:
    """
    Resolve configuration and deploy one contract.

    Every error raised on the way is caught here once, logged, and returned
    in the outcome; nothing is retried.

    Args:
        contract_name: Name of the compiled contract
        network: Network name (defaults to $DEPLOY_NETWORK or "mumbai")
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)
        provider: Extra network provider (defaults to the JSON registry)
        w3: web3 connection override
        poll_interval: Seconds between receipt queries (defaults to $RECEIPT_POLL_INTERVAL)

    Returns:
        RunOutcome whose result is a DeploymentResult on success
    """
    try:
        config = load_config(provider=provider)
        profile = config.network(network)
        logger.debug("Compiler settings: {}", config.metadata["solc_settings"])
        deployer = Deployer(
            profile,
            artifacts_dir=artifacts_dir,
            w3=w3,
            poll_interval=config.poll_interval if poll_interval is None else poll_interval,
        )
        return RunOutcome(result=deployer.deploy(contract_name))
    except Exception as e:
        logger.error("Deployment failed: {}: {}", type(e).__name__, e)
        return RunOutcome(error=e)


def run_signers(
    network: Optional[str] = None,
    provider: Optional[NetworkProvider] = None,
    w3: Optional[Web3] = None,
) -> RunOutcome:
    """
    Look up the signing identities of the active network and do nothing else.

    Args:
        network: Network name (defaults to $DEPLOY_NETWORK or "mumbai")
        provider: Extra network provider (defaults to the JSON registry)
        w3: web3 connection override

    Returns:
        RunOutcome whose result is the list of signer addresses
    """
    try:
        config = load_config(provider=provider)
        profile = config.network(network)
        signers = list_signers(profile, w3 or connect(profile.rpc_url))
        logger.debug("{} signer(s) available on {}", len(signers), profile.name)
        return RunOutcome(result=signers)
    except Exception as e:
        logger.error("Run failed: {}: {}", type(e).__name__, e)
        return RunOutcome(error=e)

"""Contract deployment for launchpad-deployments library."""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from eth_utils import to_checksum_address, to_hex
from loguru import logger
from web3 import Web3

from .artifacts import load_artifact
from .constants import DEFAULT_POLL_INTERVAL
from .exceptions import NetworkError, TransactionRevertedError
from .paths import get_artifacts_dir
from .rpc import RECEIPT_TIMEOUT, connect, rpc_errors
from .signers import load_signer
from .types import DeploymentResult, NetworkProfile


class DeployStage(Enum):
    """
    Stages of a single deployment run.

    Succeeded and Failed are terminal. There are no retries between stages.
    """

    START = "start"
    RESOLVING_ARTIFACT = "resolving-artifact"
    SUBMITTING = "submitting"
    CONFIRMING = "confirming"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Deployer:
    """Deploys compiled contracts to one network."""

    def __init__(
        self,
        profile: NetworkProfile,
        artifacts_dir: Optional[Path] = None,
        w3: Optional[Web3] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Initialize the deployer.

        Args:
            profile: Network to deploy to
            artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)
            w3: web3 connection (defaults to one for profile.rpc_url)
            poll_interval: Seconds between receipt queries
        """
        self.profile = profile
        self.artifacts_dir = get_artifacts_dir(artifacts_dir)
        self.w3 = w3 or connect(profile.rpc_url)
        self.poll_interval = poll_interval
        self.stage = DeployStage.START

    def _enter(self, stage: DeployStage) -> None:
        logger.debug("{} -> {}", self.stage.value, stage.value)
        self.stage = stage

    def deploy(self, contract_name: str) -> DeploymentResult:
        """
        Deploy a contract and wait for on-chain confirmation.

        The artifact and the signing key are resolved before any RPC call is made.
        The wait for the receipt has no practical bound.

        Args:
            contract_name: Name of the compiled contract

        Returns:
            DeploymentResult with the checksummed contract address

        Raises:
            ArtifactNotFoundError: If the contract has no deployable artifact
            AuthenticationError: If no signing key is configured
            NetworkError: If the RPC endpoint fails
            TransactionRevertedError: If the deployment is rejected on chain
        """
        try:
            return self._deploy(contract_name)
        except Exception:
            self._enter(DeployStage.FAILED)
            raise

    def _deploy(self, contract_name: str) -> DeploymentResult:
        self._enter(DeployStage.RESOLVING_ARTIFACT)
        artifact = load_artifact(self.artifacts_dir, contract_name)
        account = load_signer(self.profile)

        self._enter(DeployStage.SUBMITTING)
        logger.info(
            "Deploying {} to {} from {}",
            artifact.contract_name,
            self.profile.name,
            account.address,
        )
        with rpc_errors(f"deploying {artifact.contract_name}"):
            factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            transaction = factory.constructor().build_transaction(
                self._transaction_params(account.address)
            )
            signed = account.sign_transaction(transaction)
            tx_hash = to_hex(self.w3.eth.send_raw_transaction(signed.raw_transaction))
        logger.info("Transaction sent: {}", tx_hash)

        self._enter(DeployStage.CONFIRMING)
        logger.info("Waiting for confirmation...")
        with rpc_errors(f"waiting for {tx_hash}"):
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=RECEIPT_TIMEOUT, poll_latency=self.poll_interval
            )

        if receipt.get("status") == 0:
            raise TransactionRevertedError(
                f"Deployment of {artifact.contract_name} reverted in transaction {tx_hash}"
            )

        contract_address = receipt.get("contractAddress")
        if not contract_address:
            raise NetworkError(f"Receipt for {tx_hash} carries no contract address")

        result = DeploymentResult(
            contract_name=artifact.contract_name,
            address=to_checksum_address(contract_address),
            network=self.profile.name,
            transaction_hash=tx_hash,
            block=receipt.get("blockNumber"),
            deployer=account.address,
        )

        self._enter(DeployStage.SUCCEEDED)
        return result

    def _transaction_params(self, sender: str) -> Dict[str, Any]:
        """
        Fixed fields of the legacy creation transaction.

        web3 fills in the gas limit (``eth_estimateGas``) and, when the profile
        has none, the chain ID.
        """
        params: Dict[str, Any] = {
            "from": sender,
            "nonce": self.w3.eth.get_transaction_count(sender, "pending"),
            "gasPrice": self.w3.eth.gas_price,
        }
        if self.profile.chain_id is not None:
            params["chainId"] = self.profile.chain_id
        return params

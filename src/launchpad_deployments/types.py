"""Data types and dataclasses for launchpad-deployments library."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class CompilerSettings:
    """Solidity compiler options the artifacts are expected to be built with."""

    version: str
    optimizer_enabled: bool
    optimizer_runs: int
    via_ir: bool

    def to_solc_settings(self) -> Dict[str, Any]:
        """
        Render the solc standard-JSON ``settings`` fragment.

        Returns:
            Dictionary with ``optimizer`` and ``viaIR`` keys
        """
        return {
            "optimizer": {
                "enabled": self.optimizer_enabled,
                "runs": self.optimizer_runs,
            },
            "viaIR": self.via_ir,
        }


@dataclass(frozen=True)
class NetworkProfile:
    """A named RPC endpoint plus the signing keys used on it."""

    name: str
    rpc_url: str
    accounts: Tuple[str, ...] = ()  # Private keys, first one deploys
    chain_id: Optional[int] = None  # Queried from the node when None

    def __repr__(self) -> str:
        # Keys never end up in logs
        return (
            f"NetworkProfile(name={self.name!r}, rpc_url={self.rpc_url!r}, "
            f"accounts=<{len(self.accounts)} keys>, chain_id={self.chain_id!r})"
        )


@dataclass
class ContractArtifact:
    """Compiled contract loaded from a Hardhat artifact file."""

    contract_name: str
    source_name: str  # e.g., "contracts/LaunchPadDeployer.sol"
    abi: List[Dict[str, Any]]
    bytecode: str  # 0x-prefixed creation bytecode
    solc_version: Optional[str] = None  # From build-info, when reachable


@dataclass
class DeploymentResult:
    """Outcome of a confirmed contract deployment."""

    # Required fields
    contract_name: str
    address: str  # Checksummed address

    # Optional fields
    network: Optional[str] = None
    transaction_hash: Optional[str] = None
    block: Optional[int] = None
    deployer: Optional[str] = None

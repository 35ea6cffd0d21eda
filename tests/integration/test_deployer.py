"""Integration tests for the Deployer against a mocked JSON-RPC node."""

from pathlib import Path

import pytest
from eth_account import Account
from eth_utils import is_checksum_address

from launchpad_deployments import (
    ArtifactNotFoundError,
    AuthenticationError,
    Deployer,
    DeployStage,
    NetworkError,
    NetworkProfile,
    TransactionRevertedError,
)

RPC_URL = "http://test-rpc.example.com"
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


@pytest.fixture
def profile() -> NetworkProfile:
    return NetworkProfile(name="devnet", rpc_url=RPC_URL, accounts=(TEST_PRIVATE_KEY,))


@pytest.fixture
def deployer(profile: NetworkProfile, artifacts_dir: Path) -> Deployer:
    return Deployer(profile, artifacts_dir=artifacts_dir, poll_interval=0)


class TestSuccessfulDeployment:
    """Test deployments that confirm on chain."""

    def test_returns_deployment_result(self, fake_node, deployer: Deployer):
        """Test that a confirmed deployment yields a checksummed address."""
        result = deployer.deploy("LaunchPadDeployer")

        assert result.contract_name == "LaunchPadDeployer"
        assert result.address
        assert is_checksum_address(result.address)
        assert result.network == "devnet"
        assert result.transaction_hash == "0x" + f"{1:064x}"
        assert result.block == 1001
        assert result.deployer == Account.from_key(TEST_PRIVATE_KEY).address
        assert deployer.stage is DeployStage.SUCCEEDED

    def test_rpc_calls(self, fake_node, deployer: Deployer):
        """Test that a deployment sends one transaction and then waits for it."""
        deployer.deploy("LaunchPadDeployer")

        assert fake_node.methods.count("eth_sendRawTransaction") == 1
        assert "eth_getTransactionCount" in fake_node.methods
        assert fake_node.methods[-1] == "eth_getTransactionReceipt"

    def test_configured_chain_id_is_signed(self, fake_node, artifacts_dir: Path):
        """Test that a profile with a chain ID deploys and signs with the configured key."""
        profile = NetworkProfile(
            name="devnet", rpc_url=RPC_URL, accounts=(TEST_PRIVATE_KEY,), chain_id=31337
        )
        Deployer(profile, artifacts_dir=artifacts_dir, poll_interval=0).deploy("LaunchPadDeployer")

        assert len(fake_node.raw_transactions) == 1
        assert (
            Account.recover_transaction(fake_node.raw_transactions[0])
            == Account.from_key(TEST_PRIVATE_KEY).address
        )

    def test_transaction_is_signed_by_deployer(self, fake_node, deployer: Deployer):
        """Test that the broadcast transaction recovers to the configured key."""
        deployer.deploy("LaunchPadDeployer")

        raw = fake_node.raw_transactions[0]
        assert raw.startswith("0x")
        assert Account.recover_transaction(raw) == Account.from_key(TEST_PRIVATE_KEY).address

    def test_waits_for_confirmation(self, fake_node, deployer: Deployer):
        """Test that pending receipts are polled until the transaction is mined."""
        fake_node.pending_polls = 3

        result = deployer.deploy("LaunchPadDeployer")

        assert result.address
        assert fake_node.methods.count("eth_getTransactionReceipt") == 4

    def test_two_runs_give_two_deployments(self, fake_node, deployer: Deployer):
        """Test that deploying twice is not deduplicated."""
        first = deployer.deploy("LaunchPadDeployer")
        second = deployer.deploy("LaunchPadDeployer")

        assert first.address != second.address
        assert fake_node.methods.count("eth_sendRawTransaction") == 2


class TestFailedDeployment:
    """Test deployments that fail at each stage."""

    def test_unknown_contract_makes_no_rpc_call(self, fake_node, deployer: Deployer):
        """Test that a missing artifact fails before any network call."""
        with pytest.raises(ArtifactNotFoundError):
            deployer.deploy("DoesNotExist")

        assert fake_node.methods == []
        assert deployer.stage is DeployStage.FAILED

    def test_missing_key_makes_no_rpc_call(self, fake_node, artifacts_dir: Path):
        """Test that a missing credential fails before any network call."""
        profile = NetworkProfile(name="devnet", rpc_url=RPC_URL)
        deployer = Deployer(profile, artifacts_dir=artifacts_dir, poll_interval=0)

        with pytest.raises(AuthenticationError):
            deployer.deploy("LaunchPadDeployer")

        assert fake_node.methods == []

    def test_reverted_deployment(self, fake_node, deployer: Deployer):
        """Test that a failed receipt raises TransactionRevertedError."""
        fake_node.revert = True

        with pytest.raises(TransactionRevertedError):
            deployer.deploy("LaunchPadDeployer")

        assert deployer.stage is DeployStage.FAILED

    def test_estimate_revert_sends_nothing(self, fake_node, deployer: Deployer):
        """Test that a constructor reverting during gas estimation aborts the deploy."""
        fake_node.estimate_error = {"code": 3, "message": "execution reverted"}

        with pytest.raises(TransactionRevertedError):
            deployer.deploy("LaunchPadDeployer")

        assert "eth_sendRawTransaction" not in fake_node.methods
        assert deployer.stage is DeployStage.FAILED

    def test_rejected_transaction(self, fake_node, deployer: Deployer):
        """Test that a node refusing the transaction raises NetworkError."""
        original = fake_node._result

        def reject_send(method, params):
            if method == "eth_sendRawTransaction":
                raise LookupError(method)
            return original(method, params)

        fake_node._result = reject_send

        with pytest.raises(NetworkError):
            deployer.deploy("LaunchPadDeployer")

        assert "eth_getTransactionReceipt" not in fake_node.methods

    def test_unreachable_network(self, fake_node, artifacts_dir: Path):
        """Test that an unreachable endpoint raises NetworkError."""
        profile = NetworkProfile(
            name="offline", rpc_url="http://unreachable.example.com", accounts=(TEST_PRIVATE_KEY,)
        )

        with pytest.raises(NetworkError):
            Deployer(profile, artifacts_dir=artifacts_dir, poll_interval=0).deploy(
                "LaunchPadDeployer"
            )

    def test_receipt_without_address(self, fake_node, deployer: Deployer):
        """Test that a receipt lacking a contract address is an error."""
        original = fake_node._result

        def strip_address(method, params):
            result = original(method, params)
            if method == "eth_getTransactionReceipt" and result:
                result = dict(result, contractAddress=None)
            return result

        fake_node._result = strip_address

        with pytest.raises(NetworkError, match="no contract address"):
            deployer.deploy("LaunchPadDeployer")

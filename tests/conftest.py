"""Shared pytest fixtures for launchpad-deployments tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import responses

RPC_URL = "http://test-rpc.example.com"

# Well-known development key (Hardhat account #0), never funded on a real network
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

ENV_VARS = [
    "PRIVATE_KEY",
    "MUMBAI_PRIVATE_KEY",
    "DEPLOY_NETWORK",
    "DEPLOY_CONTRACT",
    "ARTIFACTS_DIR",
    "NETWORK_REGISTRY_PATH",
    "LOG_LEVEL",
    "RECEIPT_POLL_INTERVAL",
]


class FakeNode:
    """
    In-memory JSON-RPC node served through the responses mock.

    Every accepted raw transaction creates a contract at a fresh address.
    """

    def __init__(
        self,
        chain_id: int = 31337,
        pending_polls: int = 0,
        revert: bool = False,
        accounts: Optional[List[str]] = None,
        estimate_error: Optional[Dict[str, Any]] = None,
    ):
        self.chain_id = chain_id
        self.pending_polls = pending_polls
        self.revert = revert
        self.node_accounts = accounts or []
        self.estimate_error = estimate_error
        self.nonce = 0
        self.methods: List[str] = []
        self.raw_transactions: List[str] = []
        self.receipts: Dict[str, Dict[str, Any]] = {}
        self._polls: Dict[str, int] = {}

    def _result(self, method: str, params: List[Any]) -> Any:
        if method == "eth_chainId":
            return hex(self.chain_id)
        if method == "eth_getTransactionCount":
            return hex(self.nonce)
        if method == "eth_gasPrice":
            return hex(1_000_000_000)
        if method == "eth_estimateGas":
            return hex(500_000)
        if method == "eth_accounts":
            return self.node_accounts
        if method == "eth_sendRawTransaction":
            self.nonce += 1
            self.raw_transactions.append(params[0])
            tx_hash = "0x" + f"{self.nonce:064x}"
            self.receipts[tx_hash] = {
                "transactionHash": tx_hash,
                "transactionIndex": "0x0",
                "blockHash": "0x" + f"{1000 + self.nonce:064x}",
                "blockNumber": hex(1000 + self.nonce),
                "from": "0x" + "00" * 20,
                "to": None,
                "contractAddress": "0x" + f"{0xC0DE0000 + self.nonce:040x}",
                "cumulativeGasUsed": hex(400_000),
                "gasUsed": hex(400_000),
                "effectiveGasPrice": hex(1_000_000_000),
                "logs": [],
                "logsBloom": "0x" + "00" * 256,
                "type": "0x0",
                "status": "0x0" if self.revert else "0x1",
            }
            self._polls[tx_hash] = 0
            return tx_hash
        if method == "eth_getTransactionReceipt":
            tx_hash = params[0]
            if self._polls.get(tx_hash, 0) < self.pending_polls:
                self._polls[tx_hash] += 1
                return None
            return self.receipts.get(tx_hash)
        raise LookupError(method)

    def callback(self, request):
        body = json.loads(request.body)
        method = body["method"]
        self.methods.append(method)
        response: Dict[str, Any] = {"jsonrpc": "2.0", "id": body["id"]}
        if method == "eth_estimateGas" and self.estimate_error:
            response["error"] = self.estimate_error
        else:
            try:
                response["result"] = self._result(method, body["params"])
            except LookupError:
                response["error"] = {"code": -32601, "message": f"Method {method} not found"}
        return (200, {}, json.dumps(response))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell configuration out of the tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample Hardhat artifacts tree into a temporary directory."""
    target = tmp_path / "artifacts"
    shutil.copytree(fixtures_dir / "artifacts", target)
    return target


@pytest.fixture
def registry_path(fixtures_dir: Path) -> Path:
    """Return path to the sample network registry."""
    return fixtures_dir / "network_registry.json"


@pytest.fixture
def private_key(monkeypatch) -> str:
    """Configure the shared signing key."""
    monkeypatch.setenv("PRIVATE_KEY", TEST_PRIVATE_KEY)
    return TEST_PRIVATE_KEY


@pytest.fixture
def devnet_provider():
    """Network provider pointing the test network at the mocked RPC URL."""
    return lambda: {"devnet": {"url": RPC_URL, "chainId": 31337}}


@pytest.fixture
def fake_node():
    """Serve a FakeNode on RPC_URL for the duration of the test."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        node = FakeNode()
        rsps.add_callback(
            responses.POST,
            RPC_URL,
            callback=node.callback,
            content_type="application/json",
        )
        yield node

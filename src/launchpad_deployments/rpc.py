"""web3 connection and RPC error mapping for launchpad-deployments library."""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import requests
from web3 import Web3
from web3.exceptions import ContractLogicError, Web3Exception
from web3.providers import HTTPProvider
from web3.types import RPCResponse

from .exceptions import NetworkError, TransactionRevertedError

# wait_for_transaction_receipt requires a finite timeout; ten years stands in
# for waiting until the process is stopped
RECEIPT_TIMEOUT = 10 * 365 * 24 * 60 * 60


class DeployHTTPProvider(HTTPProvider):
    """HTTP provider that tolerates ``"error": null`` and rejects non-object responses."""

    def decode_rpc_response(self, raw_response: bytes) -> RPCResponse:
        try:
            response: Any = super().decode_rpc_response(raw_response)
        except ValueError as e:
            raise NetworkError(f"RPC endpoint returned a non-JSON response: {e}") from e

        if not isinstance(response, dict):
            raise NetworkError(
                f"RPC endpoint returned a {type(response).__name__} instead of a JSON object"
            )

        # Some nodes and proxies send an explicit null error on success
        if "error" in response and response["error"] is None:
            response = {k: v for k, v in response.items() if k != "error"}

        return response


def connect(rpc_url: str, timeout: Optional[float] = None) -> Web3:
    """
    Create a web3 connection to an RPC endpoint.

    No request is sent until the connection is used.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Per-request timeout in seconds (None waits indefinitely)

    Returns:
        Web3 instance with request retries disabled
    """
    provider = DeployHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": timeout},
        exception_retry_configuration=None,
    )
    return Web3(provider)


@contextmanager
def rpc_errors(action: str) -> Iterator[None]:
    """
    Translate web3 and transport failures into library exceptions.

    Args:
        action: What was being done, for the error message

    Raises:
        TransactionRevertedError: If the node reports an execution revert
        NetworkError: If the request fails or the node returns any other error
    """
    try:
        yield
    except ContractLogicError as e:
        raise TransactionRevertedError(f"{action} reverted: {e}") from e
    except Web3Exception as e:
        if "revert" in str(e).lower():
            raise TransactionRevertedError(f"{action} reverted: {e}") from e
        raise NetworkError(f"RPC error while {action}: {e}") from e
    except requests.RequestException as e:
        raise NetworkError(f"Network error while {action}: {e}") from e

"""Console entry points for launchpad-deployments."""

import os
import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from .constants import CONTRACT_ENV, DEFAULT_CONTRACT, LOG_LEVEL_ENV
from .runner import run_deploy, run_signers


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at $LOG_LEVEL (default INFO)."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=(level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper(),
    )


def deploy_main() -> int:
    """Deploy the configured contract and print its address."""
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    contract_name = os.environ.get(CONTRACT_ENV) or DEFAULT_CONTRACT
    outcome = run_deploy(contract_name)
    if outcome.ok:
        print(f"{outcome.result.contract_name} deployed to:  {outcome.result.address}")
    return outcome.exit_code


def signers_main() -> int:
    """Look up the available signers; prints nothing on success."""
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()
    return run_signers().exit_code


def deploy() -> None:
    sys.exit(deploy_main())


def signers() -> None:
    sys.exit(signers_main())

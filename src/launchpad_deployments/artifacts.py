"""Hardhat artifact discovery and parsing for launchpad-deployments library."""

import json
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .constants import COMPILER_SETTINGS
from .exceptions import ArtifactNotFoundError
from .types import ContractArtifact


def find_artifact_file(artifacts_dir: Path, contract_name: str) -> Path:
    """
    Locate the artifact file for a contract.

    Assumption: Hardhat writes one ``{ContractName}.json`` per contract under
    ``artifacts/<source path>/``, next to a ``.dbg.json`` file, and keeps
    compiler inputs under ``artifacts/build-info``.

    Args:
        artifacts_dir: Root of the Hardhat artifacts tree
        contract_name: Contract name, or fully qualified "path/File.sol:Name"

    Returns:
        Path to the artifact JSON file

    Raises:
        ArtifactNotFoundError: If no artifact or more than one artifact matches
    """
    if ":" in contract_name:
        # Fully qualified name pins the source file
        source_name, name = contract_name.rsplit(":", 1)
        candidate = artifacts_dir / source_name / f"{name}.json"
        if candidate.is_file():
            return candidate
        raise ArtifactNotFoundError(
            f"Artifact for '{contract_name}' not found in {artifacts_dir}"
        )

    matches: List[Path] = [
        p
        for p in artifacts_dir.rglob(f"{contract_name}.json")
        if not p.name.endswith(".dbg.json")
        and "build-info" not in p.relative_to(artifacts_dir).parts
    ]

    if not matches:
        raise ArtifactNotFoundError(
            f"Artifact for '{contract_name}' not found in {artifacts_dir}. "
            "Compile the contracts first."
        )
    if len(matches) > 1:
        sources = ", ".join(str(p.parent.relative_to(artifacts_dir)) for p in sorted(matches))
        raise ArtifactNotFoundError(
            f"Contract name '{contract_name}' is ambiguous ({sources}); "
            "use the fully qualified name"
        )

    return matches[0]


def read_solc_version(artifact_file: Path) -> Optional[str]:
    """
    Read the compiler version recorded in the artifact's build-info.

    Args:
        artifact_file: Path to {ContractName}.json

    Returns:
        Version string (e.g., "0.8.18"), or None if the debug file or
        build-info cannot be read
    """
    dbg_file = artifact_file.with_name(f"{artifact_file.stem}.dbg.json")
    try:
        with open(dbg_file) as f:
            build_info = (dbg_file.parent / json.load(f)["buildInfo"]).resolve()
        with open(build_info) as f:
            return json.load(f).get("solcVersion")
    except (FileNotFoundError, KeyError, TypeError, json.JSONDecodeError):
        return None


def parse_artifact(file_path: Path) -> ContractArtifact:
    """
    Parse a Hardhat artifact JSON file.

    Args:
        file_path: Path to artifact file

    Returns:
        ContractArtifact

    Raises:
        ArtifactNotFoundError: If the file is unreadable or holds no creation bytecode
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactNotFoundError(f"Artifact {file_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ArtifactNotFoundError(f"Artifact {file_path} is not a JSON object")

    if "abi" not in data or "bytecode" not in data:
        raise ArtifactNotFoundError(f"Artifact {file_path} is missing abi or bytecode")

    bytecode = data["bytecode"]
    if not isinstance(bytecode, str):
        raise ArtifactNotFoundError(
            f"Artifact {file_path} bytecode must be a hex string, got {type(bytecode).__name__}"
        )
    if not isinstance(data["abi"], list):
        raise ArtifactNotFoundError(f"Artifact {file_path} abi must be a list")

    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    # Interfaces and abstract contracts compile to empty bytecode
    if bytecode == "0x":
        raise ArtifactNotFoundError(
            f"Contract '{data.get('contractName', file_path.stem)}' has no bytecode "
            "(interface or abstract contract?)"
        )

    return ContractArtifact(
        contract_name=data.get("contractName", file_path.stem),
        source_name=data.get("sourceName", ""),
        abi=data["abi"],
        bytecode=bytecode,
        solc_version=read_solc_version(file_path),
    )


def load_artifact(artifacts_dir: Path, contract_name: str) -> ContractArtifact:
    """
    Find and parse the artifact for a contract.

    Warns if the artifact was built with a different compiler version than
    COMPILER_SETTINGS.

    Raises:
        ArtifactNotFoundError: If the contract has no deployable artifact
    """
    if not artifacts_dir.is_dir():
        raise ArtifactNotFoundError(
            f"Artifacts directory {artifacts_dir} does not exist. Compile the contracts first."
        )

    artifact = parse_artifact(find_artifact_file(artifacts_dir, contract_name))

    if artifact.solc_version and artifact.solc_version != COMPILER_SETTINGS.version:
        logger.warning(
            "{} was compiled with solc {}, expected {}",
            artifact.contract_name,
            artifact.solc_version,
            COMPILER_SETTINGS.version,
        )

    return artifact

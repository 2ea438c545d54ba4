"""
Artifact Loader
Resolves contract names to compiled Hardhat artifacts (ABI + bytecode)
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, List, Optional
from loguru import logger

from .exceptions import ArtifactNotFoundError, InvalidArtifactError


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract definition"""

    contract_name: str
    abi: List[Dict]
    bytecode: str
    path: str


class ArtifactLoader:
    """
    Loads compiled contracts from a Hardhat artifacts directory
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Loader

        Args:
            artifacts_dir: Root of the compiled artifacts tree
        """
        self.artifacts_dir = artifacts_dir
        self._cache: Dict[str, ContractArtifact] = {}

    def load(self, contract_name: str) -> ContractArtifact:
        """
        Load a compiled contract by name

        Args:
            contract_name: Solidity contract name (e.g. "CreditScore")

        Returns:
            ContractArtifact with ABI and deployment bytecode
        """
        if contract_name in self._cache:
            return self._cache[contract_name]

        path = self.find_artifact_path(contract_name)

        if path is None:
            raise ArtifactNotFoundError(contract_name, self.artifacts_dir)

        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, ValueError) as e:
            raise InvalidArtifactError(path, str(e)) from e

        if not isinstance(contract_json, dict) or 'abi' not in contract_json:
            raise InvalidArtifactError(path, "Missing 'abi' field.")

        bytecode = contract_json.get('bytecode') or ''

        if bytecode in ('', '0x'):
            raise InvalidArtifactError(
                path,
                "No deployment bytecode. Are you attempting to deploy an interface?"
            )

        if not bytecode.startswith('0x'):
            bytecode = '0x' + bytecode

        artifact = ContractArtifact(
            contract_name=contract_json.get('contractName', contract_name),
            abi=contract_json['abi'],
            bytecode=bytecode,
            path=path
        )

        self._cache[contract_name] = artifact
        logger.debug(f"Loaded artifact for {contract_name} from {path}")

        return artifact

    def find_artifact_path(self, contract_name: str) -> Optional[str]:
        """
        Locate the artifact JSON for a contract

        Checks the standard Hardhat layout first, then searches the tree.
        """
        file_name = f"{contract_name}.json"

        standard_path = os.path.join(
            self.artifacts_dir, 'contracts', f"{contract_name}.sol", file_name
        )
        if os.path.isfile(standard_path):
            return standard_path

        if not os.path.isdir(self.artifacts_dir):
            return None

        for root, dirs, files in os.walk(self.artifacts_dir):
            # build-info holds compiler input/output, never contract artifacts
            dirs[:] = sorted(d for d in dirs if d != 'build-info')

            if file_name in files:
                return os.path.join(root, file_name)

        return None

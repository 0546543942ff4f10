"""
Loads compiled contract artifacts (ABI and bytecode) from a Hardhat artifacts tree
"""

import os
import json
from dataclasses import dataclass
from typing import Any, Dict, List

from .errors import DeploymentError, ContractNotFoundError


@dataclass
class ContractArtifact:
    """Compiled contract ready for deployment"""
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str


def find_artifact_path(artifacts_dir: str, name: str) -> str:
    """
    Resolve the artifact file for a contract name.

    The standard Hardhat location artifacts/contracts/<name>.sol/<name>.json is
    tried first, then any <name>.json elsewhere under the artifacts root.
    """
    direct = os.path.join(artifacts_dir, 'contracts', f'{name}.sol', f'{name}.json')
    if os.path.isfile(direct):
        return direct

    matches = []
    for root, dirs, files in os.walk(artifacts_dir):
        # build-info holds compiler input/output, not contract artifacts
        dirs[:] = [d for d in dirs if d != 'build-info']
        if f'{name}.json' in files:
            matches.append(os.path.join(root, f'{name}.json'))

    if not matches:
        raise ContractNotFoundError(name, artifacts_dir)
    if len(matches) > 1:
        raise DeploymentError(
            f"Contract name {name} is ambiguous, found {len(matches)} artifacts: {sorted(matches)}",
            contract=name,
        )
    return matches[0]


def load_artifact(artifacts_dir: str, name: str) -> ContractArtifact:
    """Load the ABI and creation bytecode of a contract by name."""
    path = find_artifact_path(artifacts_dir, name)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DeploymentError(f"Could not read artifact {path}: {e}", contract=name) from e

    abi = data.get('abi')
    bytecode = data.get('bytecode')
    if abi is None or bytecode is None:
        raise DeploymentError(f"Artifact {path} is missing abi or bytecode", contract=name)
    if bytecode in ('', '0x'):
        raise DeploymentError(
            f"{name} has no bytecode, it is an interface or abstract contract and cannot be deployed",
            contract=name,
        )

    return ContractArtifact(name=name, abi=abi, bytecode=bytecode)

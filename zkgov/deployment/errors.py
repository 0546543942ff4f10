"""Errors raised while deploying contracts."""

from typing import Optional


class DeploymentError(Exception):
    """A contract deployment failed"""

    def __init__(self, message: str, contract: Optional[str] = None):
        super().__init__(message)
        self.contract = contract


class ContractNotFoundError(DeploymentError):
    """No compiled artifact exists for the requested contract name"""

    def __init__(self, contract: str, artifacts_dir: str):
        super().__init__(
            f"Artifact for contract {contract} not found in {artifacts_dir}. "
            "Compile the contracts first.",
            contract=contract,
        )
        self.artifacts_dir = artifacts_dir


class TransactionRevertedError(DeploymentError):
    """The deployment transaction was mined with status 0"""

    def __init__(self, contract: str, tx_hash: str):
        super().__init__(f"Deployment of {contract} reverted (tx {tx_hash})", contract=contract)
        self.tx_hash = tx_hash

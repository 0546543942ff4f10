"""
Deployment Scripts
==================

Deploys the identity registry, the ZKP verifier and the governance
contract in sequence through a web3 backed contract factory.
"""

from .errors import DeploymentError, ContractNotFoundError, TransactionRevertedError
from .factory import Deployer, ContractFactory, DeployedContract, connect

__all__ = [
    'DeploymentError',
    'ContractNotFoundError',
    'TransactionRevertedError',
    'Deployer',
    'ContractFactory',
    'DeployedContract',
    'connect',
]

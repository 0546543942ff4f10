"""
Contract factory backed by web3: looks up a compiled contract by name,
sends its creation transaction and waits for the deployment receipt
"""

import logging
from typing import Any, Dict, Optional
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from .artifacts import ContractArtifact, load_artifact
from .config import DeployConfig, DEFAULT_RECEIPT_TIMEOUT
from .errors import DeploymentError, TransactionRevertedError

logger = logging.getLogger(__name__)


def connect(config: DeployConfig) -> Web3:
    """Open a Web3 connection to the configured RPC endpoint"""
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise DeploymentError(f"Could not connect to RPC URL: {config.rpc_url}")
    logger.info(f"Connected to blockchain at {config.rpc_url}")
    return w3


class DeployedContract:
    """
    Handle to a contract whose creation transaction has been sent.

    ``address`` stays None until ``deployed()`` has seen a successful receipt.
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, tx_hash: Any,
                 receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = w3
        self.name = artifact.name
        self.abi = artifact.abi
        self.tx_hash = Web3.to_hex(tx_hash)
        self.receipt_timeout = receipt_timeout
        self.address: Optional[str] = None
        self.receipt: Optional[Dict[str, Any]] = None

    def deployed(self) -> "DeployedContract":
        """
        Block until the deployment transaction is mined

        Returns:
            self, with ``address`` and ``receipt`` set

        Raises:
            TransactionRevertedError: if the receipt has status 0
            DeploymentError: if no receipt arrives within the timeout
        """
        if self.address is not None:
            return self

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash, timeout=self.receipt_timeout)
        except Exception as e:
            raise DeploymentError(
                f"No receipt for {self.name} deployment (tx {self.tx_hash}): {e}",
                contract=self.name,
            ) from e

        self.receipt = receipt
        if receipt['status'] != 1:
            raise TransactionRevertedError(self.name, self.tx_hash)

        self.address = receipt['contractAddress']
        logger.debug(f"{self.name} confirmed in block {receipt['blockNumber']}")
        return self

    def contract(self):
        """Web3 contract instance bound to the deployed address"""
        if self.address is None:
            raise DeploymentError(f"{self.name} is not deployed yet", contract=self.name)
        return self.w3.eth.contract(address=self.address, abi=self.abi)


class ContractFactory:
    """Deploys new instances of one compiled contract"""

    def __init__(self, deployer: "Deployer", artifact: ContractArtifact):
        self.deployer = deployer
        self.artifact = artifact
        self.name = artifact.name

    def deploy(self, *args) -> DeployedContract:
        """Send the creation transaction with the given constructor arguments"""
        w3 = self.deployer.w3
        try:
            contract = w3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)
            tx_hash = self.deployer.send(contract.constructor(*args))
        except DeploymentError:
            raise
        except Exception as e:
            raise DeploymentError(f"Failed to send {self.name} deployment: {e}", contract=self.name) from e

        deployment = DeployedContract(w3, self.artifact, tx_hash, self.deployer.receipt_timeout)
        logger.info(f"{self.name} deployment sent: {deployment.tx_hash}")
        return deployment


class Deployer:
    """Sending account plus the artifacts it deploys from"""

    def __init__(self, w3: Web3, artifacts_dir: str, private_key: Optional[str] = None,
                 chain_id: Optional[int] = None, gas_limit: Optional[int] = None,
                 receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = w3
        self.artifacts_dir = artifacts_dir
        self.private_key = private_key
        self.chain_id = chain_id
        self.gas_limit = gas_limit
        self.receipt_timeout = receipt_timeout

        if private_key:
            self.address = w3.eth.account.from_key(private_key).address
        else:
            # Local dev nodes (Hardhat, Anvil) expose unlocked accounts
            accounts = w3.eth.accounts
            if not accounts:
                raise DeploymentError("PRIVATE_KEY not set and the node has no unlocked accounts")
            self.address = accounts[0]

    @classmethod
    def from_config(cls, w3: Web3, config: DeployConfig) -> "Deployer":
        return cls(
            w3,
            config.artifacts_dir,
            private_key=config.private_key,
            chain_id=config.chain_id,
            gas_limit=config.gas_limit,
            receipt_timeout=config.receipt_timeout,
        )

    def get_contract_factory(self, name: str) -> ContractFactory:
        return ContractFactory(self, load_artifact(self.artifacts_dir, name))

    def send(self, constructor) -> Any:
        """Sign and send a constructor call, returning the transaction hash"""
        tx_params: Dict[str, Any] = {
            'from': self.address,
            'gasPrice': self.w3.eth.gas_price,
        }
        if self.gas_limit is not None:
            tx_params['gas'] = self.gas_limit

        if not self.private_key:
            return constructor.transact(tx_params)

        tx_params['nonce'] = self.w3.eth.get_transaction_count(self.address, 'pending')
        if self.chain_id is not None:
            tx_params['chainId'] = self.chain_id

        tx = constructor.build_transaction(tx_params)
        signed_tx = self.w3.eth.account.sign_transaction(tx, self.private_key)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

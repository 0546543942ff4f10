"""
Deployment configuration read from the environment and an optional .env file
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_RPC_URL = "http://localhost:8545"
DEFAULT_ARTIFACTS_DIR = "artifacts"
DEFAULT_DEPLOYMENT_FILE = "deployment.json"
DEFAULT_RECEIPT_TIMEOUT = 300
DEFAULT_LOG_FILE = "deploy.log"


def _get_int(name: str, default: Optional[int] = None) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class DeployConfig:
    """Settings for a single deployment run"""
    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    chain_id: Optional[int] = None
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    deployment_file: str = DEFAULT_DEPLOYMENT_FILE
    gas_limit: Optional[int] = None
    receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT
    log_file: Optional[str] = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls) -> "DeployConfig":
        """
        Build the configuration from environment variables

        Returns:
            DeployConfig with defaults for every unset variable

        Raises:
            ValueError: if CHAIN_ID, GAS_LIMIT or RECEIPT_TIMEOUT is not an integer
        """
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
        return cls(
            rpc_url=os.getenv("RPC_URL", DEFAULT_RPC_URL),
            private_key=os.getenv("PRIVATE_KEY") or None,
            chain_id=_get_int("CHAIN_ID"),
            artifacts_dir=os.getenv("ARTIFACTS_DIR", DEFAULT_ARTIFACTS_DIR),
            deployment_file=os.getenv("DEPLOYMENT_FILE", DEFAULT_DEPLOYMENT_FILE),
            gas_limit=_get_int("GAS_LIMIT"),
            receipt_timeout=_get_int("RECEIPT_TIMEOUT", DEFAULT_RECEIPT_TIMEOUT),
            log_file=log_file or None,
        )

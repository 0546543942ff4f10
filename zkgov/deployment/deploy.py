#!/usr/bin/env python3
"""
Deploys the identity registry, the ZKP verifier and the
privacy-preserving governance contract, in that order.

Exits 0 when all three are deployed, 1 on any failure.
"""

import sys
import json
import logging
from datetime import datetime
from typing import Dict, Optional

from zkgov.contracts import DEPLOYMENT_ORDER
from .config import DeployConfig
from .factory import Deployer, DeployedContract, connect

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[str] = None):
    """Log to stderr and, when given, to a log file"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def deploy_contract(deployer: Deployer, name: str, *args) -> DeployedContract:
    """Deploy a contract by name and wait until it is confirmed"""
    factory = deployer.get_contract_factory(name)
    contract = factory.deploy(*args)
    return contract.deployed()


def deploy_all(deployer: Deployer) -> Dict[str, str]:
    """
    Deploy the three protocol contracts sequentially.

    Any failure propagates before the next deployment starts; contracts
    already deployed are left in place.

    Returns:
        Deployed addresses keyed by identity, zkpVerifier and governance
    """
    identity_name, verifier_name, governance_name = DEPLOYMENT_ORDER

    identity = deploy_contract(deployer, identity_name)
    logger.info(f"Identity Contract deployed to: {identity.address}")

    zkp_verifier = deploy_contract(deployer, verifier_name)
    logger.info(f"ZKP Verifier deployed to: {zkp_verifier.address}")

    governance = deploy_contract(deployer, governance_name, identity.address, zkp_verifier.address)
    logger.info(f"Governance Contract deployed to: {governance.address}")

    return {
        'identity': identity.address,
        'zkpVerifier': zkp_verifier.address,
        'governance': governance.address,
    }


def write_deployment_record(path: str, addresses: Dict[str, str], chain_id: int, deployer_address: str):
    """Write deployed addresses for off-chain tooling to pick up"""
    record = dict(addresses)
    record['chainId'] = chain_id
    record['deployer'] = deployer_address
    record['timestamp'] = datetime.now().isoformat()

    with open(path, 'w') as f:
        json.dump(record, f, indent=2)
    logger.info(f"Deployment record written to {path}")


def main() -> int:
    try:
        config = DeployConfig.from_env()
        setup_logging(config.log_file)
    except (ValueError, OSError) as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        w3 = connect(config)
        deployer = Deployer.from_config(w3, config)
        logger.info(f"Deploying from account: {deployer.address}")

        addresses = deploy_all(deployer)

        chain_id = config.chain_id if config.chain_id is not None else w3.eth.chain_id
        write_deployment_record(config.deployment_file, addresses, chain_id, deployer.address)
    except Exception:
        logger.exception("Deployment failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

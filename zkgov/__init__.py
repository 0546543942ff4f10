"""
Privacy-Preserving Governance
=============================

Off-chain tooling for the privacy-preserving governance protocol.

Structure:
- contracts/: Names of the on-chain contracts and their deployment order
- deployment/: Contract deployment scripts
"""

__version__ = "1.0.0"
__author__ = "ZK Governance Team"

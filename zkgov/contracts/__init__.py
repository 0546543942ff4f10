"""
Protocol Contracts
==================

Contracts deployed for the privacy-preserving governance protocol:
- Identity: Identity registry for eligible voters
- ZKPVerifier: Zero-knowledge proof verifier
- PrivacyPreservingGovernance: Governance contract bound to the two above
"""

IDENTITY = "Identity"
ZKP_VERIFIER = "ZKPVerifier"
GOVERNANCE = "PrivacyPreservingGovernance"

# Governance takes the identity and verifier addresses as constructor arguments
DEPLOYMENT_ORDER = (IDENTITY, ZKP_VERIFIER, GOVERNANCE)

__all__ = ['IDENTITY', 'ZKP_VERIFIER', 'GOVERNANCE', 'DEPLOYMENT_ORDER']

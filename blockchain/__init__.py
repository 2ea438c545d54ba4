"""
Blockchain Interaction Package
Handles artifact loading, signing, and contract deployment
"""

from .exceptions import (
    DeploymentFailure,
    DeploymentError,
    ConfirmationTimeoutError,
    ConfirmationFailure,
)
from .artifact_loader import ArtifactLoader, ContractArtifact
from .wallet_manager import WalletManager
from .contract_deployer import ContractDeployer, DeployedContract

__all__ = [
    'DeploymentFailure',
    'DeploymentError',
    'ConfirmationTimeoutError',
    'ConfirmationFailure',
    'ArtifactLoader',
    'ContractArtifact',
    'WalletManager',
    'ContractDeployer',
    'DeployedContract'
]

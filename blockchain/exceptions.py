"""
Deployment Exceptions
Every failure a deployment run can hit derives from DeploymentFailure
"""

from typing import Optional


class DeploymentFailure(Exception):
    """
    Base error for anything that goes wrong during a deployment run.
    """


class DeploymentError(DeploymentFailure):
    """
    Raised when the deployment request cannot be made or is rejected.
    """


class ArtifactNotFoundError(DeploymentError):
    """
    Raised when no compiled artifact exists for a contract name.
    """

    def __init__(self, contract_name: str, artifacts_dir: str):
        self.contract_name = contract_name
        self.artifacts_dir = artifacts_dir
        super().__init__(
            f"Artifact for contract '{contract_name}' not found in '{artifacts_dir}'. "
            "Run 'npx hardhat compile' first."
        )


class InvalidArtifactError(DeploymentError):
    """
    Raised when an artifact file is unreadable or has nothing to deploy.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        message = f"Invalid contract artifact '{path}'."
        if reason:
            message = f"{message} {reason}"

        super().__init__(message)


class InsufficientFundsError(DeploymentError):
    """
    Raised when the deployer balance cannot cover the deployment cost.
    """

    def __init__(self, address: str, balance: int, required: int):
        self.address = address
        self.balance = balance
        self.required = required
        super().__init__(
            f"Insufficient funds in {address}: balance {balance} wei, "
            f"deployment needs up to {required} wei."
        )


class WalletConfigError(DeploymentError):
    """
    Raised when the deployer key is missing or malformed.
    """


class NetworkConfigError(DeploymentError):
    """
    Raised when the network configuration is missing or incomplete.
    """


class NetworkConnectionError(DeploymentError):
    """
    Raised when the RPC endpoint does not respond.
    """


class NetworkMismatchError(DeploymentError):
    """
    Raised when the RPC endpoint serves a different chain than configured.
    """

    def __init__(self, chain_id: int, expected_chain_id: int, network_name: str):
        self.chain_id = chain_id
        self.expected_chain_id = expected_chain_id
        super().__init__(
            f"Provider connected to chain ID '{chain_id}', which does not match "
            f"network chain ID '{expected_chain_id}'. Are you connected to '{network_name}'?"
        )


class ConfirmationTimeoutError(DeploymentFailure):
    """
    Raised when the deployment transaction is not mined in time.
    """

    def __init__(self, tx_hash: str, timeout: float):
        self.tx_hash = tx_hash
        self.timeout = timeout
        super().__init__(
            f"Deployment transaction {tx_hash} not confirmed after {timeout} seconds."
        )


class ConfirmationFailure(DeploymentFailure):
    """
    Raised when the deployment transaction was mined but did not create a contract.
    """

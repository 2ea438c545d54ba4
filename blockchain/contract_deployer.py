"""
Contract Deployer
Submits contract deployment transactions and tracks their confirmation
"""

import asyncio
from typing import Any, Dict, Optional
import aiohttp
from web3 import AsyncWeb3, Web3
from web3.exceptions import TimeExhausted, Web3Exception
from loguru import logger

from utils.explorer import transaction_url
from .artifact_loader import ArtifactLoader
from .wallet_manager import WalletManager
from .exceptions import (
    ConfirmationFailure,
    ConfirmationTimeoutError,
    DeploymentError,
    InsufficientFundsError,
)

# Errors raised by web3 and its HTTP transport for a failed RPC call
RPC_ERRORS = (
    Web3Exception,
    ValueError,
    OSError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
)


class DeployedContract:
    """
    Handle for a submitted deployment

    The address is known once wait_for_deployment() returns.
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        contract_name: str,
        tx_hash: str,
        confirmation_timeout: float = 300
    ):
        self.w3 = w3
        self.contract_name = contract_name
        self.tx_hash = tx_hash
        self.confirmation_timeout = confirmation_timeout

        self.address: Optional[str] = None
        self.receipt: Optional[Dict] = None

    @property
    def target(self) -> Optional[str]:
        """Deployed address (alias)"""
        return self.address

    async def wait_for_deployment(self) -> 'DeployedContract':
        """
        Wait until the deployment transaction is mined

        Returns:
            self, with address and receipt set
        """
        if self.address is not None:
            return self

        logger.info(f"Waiting for confirmation of {self.tx_hash}...")

        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(
                self.tx_hash,
                timeout=self.confirmation_timeout
            )
        except TimeExhausted as e:
            raise ConfirmationTimeoutError(self.tx_hash, self.confirmation_timeout) from e
        except Exception as e:
            raise ConfirmationFailure(
                f"Error waiting for deployment transaction {self.tx_hash}: {e}"
            ) from e

        if receipt['status'] != 1:
            raise ConfirmationFailure(
                f"Deployment transaction {self.tx_hash} reverted "
                f"(gas used: {receipt.get('gasUsed')})"
            )

        contract_address = receipt.get('contractAddress')

        if not contract_address:
            raise ConfirmationFailure(
                f"Deployment transaction {self.tx_hash} did not create a contract"
            )

        self.receipt = receipt
        self.address = Web3.to_checksum_address(contract_address)

        logger.success(f"{self.contract_name} deployed at {self.address}")
        logger.debug(f"Gas used: {receipt.get('gasUsed')}")

        return self

    def __repr__(self) -> str:
        return f"<{self.contract_name} {self.address or 'pending ' + self.tx_hash}>"


class ContractDeployer:
    """
    Deploys compiled contracts from the deployer wallet
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        wallet: WalletManager,
        artifact_loader: ArtifactLoader,
        network
    ):
        """
        Initialize Contract Deployer

        Args:
            w3: Connected AsyncWeb3 instance
            wallet: Wallet that signs and pays for the deployment
            artifact_loader: Source of compiled contracts
            network: Target network settings
        """
        self.w3 = w3
        self.wallet = wallet
        self.artifact_loader = artifact_loader
        self.network = network

    async def deploy_contract(self, contract_name: str, *constructor_args: Any) -> DeployedContract:
        """
        Submit a deployment transaction for a contract

        Args:
            contract_name: Name of the compiled contract
            constructor_args: Arguments for the contract constructor

        Returns:
            DeployedContract handle (not yet confirmed)
        """
        artifact = self.artifact_loader.load(contract_name)

        Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        constructor = Contract.constructor(*constructor_args)

        logger.info(f"Deploying {contract_name} from {self.wallet.address}")

        gas_limit = await self._estimate_gas_limit(constructor)

        try:
            nonce = await self.w3.eth.get_transaction_count(self.wallet.address, 'pending')
            gas_price = await self.w3.eth.gas_price
            balance = await self.wallet.get_balance(self.w3)
        except RPC_ERRORS as e:
            raise DeploymentError(f"Error preparing deployment of {contract_name}: {e}") from e

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {Web3.from_wei(gas_price, 'gwei')} gwei")

        max_cost = gas_limit * gas_price
        if balance < max_cost:
            raise InsufficientFundsError(self.wallet.address, balance, max_cost)

        logger.info(f"Estimated deployment cost: {Web3.from_wei(max_cost, 'ether')} ETH")

        try:
            transaction = await constructor.build_transaction({
                'from': self.wallet.address,
                'nonce': nonce,
                'gas': gas_limit,
                'gasPrice': gas_price,
                'chainId': self.network.chain_id
            })

            signed_tx = self.wallet.sign_transaction(transaction)
            tx_hash = await self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except RPC_ERRORS as e:
            raise DeploymentError(f"Deployment of {contract_name} rejected: {e}") from e

        tx_hash = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash}")
        logger.debug(transaction_url(tx_hash, self.network.explorer_url))

        return DeployedContract(
            w3=self.w3,
            contract_name=artifact.contract_name,
            tx_hash=tx_hash,
            confirmation_timeout=self.network.confirmation_timeout
        )

    async def _estimate_gas_limit(self, constructor) -> int:
        """Estimate deployment gas with buffer, falling back to the default limit"""
        try:
            gas_estimate = await constructor.estimate_gas({'from': self.wallet.address})
            return int(gas_estimate * self.network.gas_buffer)
        except RPC_ERRORS as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return self.network.default_gas_limit

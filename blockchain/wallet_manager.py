"""
Wallet Manager
Holds the deployer account used to sign the deployment transaction
"""

import os
from typing import Dict, Optional
from web3 import AsyncWeb3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from .exceptions import WalletConfigError

load_dotenv()


class WalletManager:
    """
    Single deployer wallet loaded from a private key
    """

    def __init__(self, private_key: Optional[str] = None, key_env: str = 'PRIVATE_KEY'):
        """
        Initialize wallet manager

        Args:
            private_key: Hex private key (None = read from environment)
            key_env: Environment variable holding the private key
        """
        private_key = private_key or os.getenv(key_env)

        if not private_key:
            raise WalletConfigError(f"{key_env} must be set in .env")

        try:
            self.account = Account.from_key(private_key)
        except (ValueError, TypeError) as e:
            raise WalletConfigError(f"{key_env} is not a valid private key") from e

        self.address = self.account.address

        logger.info(f"Deployer wallet: {self.address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    async def get_balance(self, w3: AsyncWeb3) -> int:
        """Get deployer balance in wei"""
        return await w3.eth.get_balance(self.address)

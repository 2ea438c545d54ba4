"""
RPC Manager
Connects to the Sepolia RPC endpoint configured in config/network_config.json
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, Optional
import aiohttp
from web3 import AsyncWeb3, AsyncHTTPProvider
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import (
    NetworkConfigError,
    NetworkConnectionError,
    NetworkMismatchError,
)

load_dotenv()

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'config',
    'network_config.json'
)


@dataclass(frozen=True)
class NetworkConfig:
    """Settings for the single deployment network"""

    name: str
    chain_id: int
    explorer_url: str
    http_url_env: str = 'SEPOLIA_RPC_URL'
    private_key_env: str = 'PRIVATE_KEY'
    confirmation_timeout: float = 300
    gas_buffer: float = 1.2
    default_gas_limit: int = 3000000


class RPCManager:
    """
    Builds the AsyncWeb3 connection for the deployment network
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, config: Optional[Dict] = None):
        """
        Initialize RPC Manager

        Args:
            config_path: Path to network config JSON
            config: Already-parsed config (skips reading config_path)
        """
        if config is None:
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)
            except (OSError, ValueError) as e:
                raise NetworkConfigError(f"Cannot read network config '{config_path}': {e}") from e

        self.network = self._parse_config(config)
        self.w3: Optional[AsyncWeb3] = None

        logger.info(f"RPC Manager initialized for {self.network.name} (chain {self.network.chain_id})")

    def _parse_config(self, config: Dict) -> NetworkConfig:
        """Build NetworkConfig from raw JSON"""
        try:
            network = config['network']
            deployment = config.get('deployment', {})

            return NetworkConfig(
                name=network['name'],
                chain_id=int(network['chain_id']),
                explorer_url=network['explorer_url'],
                http_url_env=network.get('http_url_env', 'SEPOLIA_RPC_URL'),
                private_key_env=network.get('private_key_env', 'PRIVATE_KEY'),
                confirmation_timeout=float(deployment.get('confirmation_timeout', 300)),
                gas_buffer=float(deployment.get('gas_buffer', 1.2)),
                default_gas_limit=int(deployment.get('default_gas_limit', 3000000))
            )
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkConfigError(f"Incomplete network config: {e}") from e

    def get_network_config(self) -> NetworkConfig:
        """Get the deployment network settings"""
        return self.network

    def get_rpc_url(self) -> str:
        """Read the RPC URL from the environment"""
        rpc_url = os.getenv(self.network.http_url_env)

        if not rpc_url:
            raise NetworkConfigError(f"{self.network.http_url_env} must be set in .env")

        return rpc_url

    async def connect(self) -> AsyncWeb3:
        """
        Connect to the configured network

        Returns:
            Connected AsyncWeb3 instance on the expected chain
        """
        if self.w3 is not None:
            return self.w3

        w3 = AsyncWeb3(AsyncHTTPProvider(self.get_rpc_url()))

        try:
            if not await w3.is_connected():
                raise NetworkConnectionError(f"Failed to connect to {self.network.name} RPC")

            chain_id = await w3.eth.chain_id

            if chain_id != self.network.chain_id:
                raise NetworkMismatchError(chain_id, self.network.chain_id, self.network.name)
        except Exception:
            # is_connected() may already have opened the provider session
            await w3.provider.disconnect()
            raise

        logger.success(f"Connected to {self.network.name}")

        self.w3 = w3
        return w3

    async def disconnect(self):
        """Close the provider HTTP session"""
        if self.w3 is None:
            return

        w3, self.w3 = self.w3, None

        try:
            await w3.provider.disconnect()
        except (aiohttp.ClientError, OSError) as e:
            logger.warning(f"Error closing {self.network.name} RPC session: {e}")

        logger.debug(f"Disconnected from {self.network.name}")

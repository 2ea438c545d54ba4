"""
Deploy Runner
Runs a single CreditScore deployment and reports the outcome
"""

import os
import sys
from typing import Awaitable, Callable, Optional
from loguru import logger
from dotenv import load_dotenv

from blockchain.artifact_loader import ArtifactLoader
from blockchain.contract_deployer import ContractDeployer
from blockchain.wallet_manager import WalletManager
from utils.explorer import SEPOLIA_EXPLORER_URL, address_url
from utils.rpc_manager import RPCManager

load_dotenv()

CONTRACT_NAME = "CreditScore"


async def build_default_deployer(rpc_manager: RPCManager) -> ContractDeployer:
    """Wire the deployer from .env and config/network_config.json"""
    network = rpc_manager.get_network_config()

    w3 = await rpc_manager.connect()
    wallet = WalletManager(key_env=network.private_key_env)
    artifact_loader = ArtifactLoader(os.getenv('ARTIFACTS_DIR', 'artifacts'))

    return ContractDeployer(w3, wallet, artifact_loader, network)


class DeployRunner:
    """
    One deployment attempt per run, no retries
    """

    def __init__(
        self,
        deployer: Optional[ContractDeployer] = None,
        deployer_factory: Optional[Callable[[], Awaitable[ContractDeployer]]] = None,
        contract_name: str = CONTRACT_NAME,
        explorer_url: str = SEPOLIA_EXPLORER_URL
    ):
        """
        Initialize Deploy Runner

        Args:
            deployer: Deployment service (None = build with deployer_factory)
            deployer_factory: Async factory for the deployment service
                (None = build from environment)
            contract_name: Contract to deploy
            explorer_url: Block explorer base URL for the printed link
        """
        self.deployer = deployer
        self.deployer_factory = deployer_factory
        self.contract_name = contract_name
        self.explorer_url = explorer_url
        self.rpc_manager: Optional[RPCManager] = None

    async def _get_deployer(self) -> ContractDeployer:
        if self.deployer is None:
            if self.deployer_factory is not None:
                self.deployer = await self.deployer_factory()
            else:
                self.rpc_manager = RPCManager()
                self.deployer = await build_default_deployer(self.rpc_manager)

        return self.deployer

    async def run(self) -> int:
        """
        Deploy the contract and print its address

        Returns:
            Process exit status (0 on success, 1 on any failure)
        """
        try:
            deployer = await self._get_deployer()

            contract = await deployer.deploy_contract(self.contract_name)
            await contract.wait_for_deployment()

        except Exception as e:
            logger.opt(exception=e).debug(f"{self.contract_name} deployment failed")
            logger.error(f"{self.contract_name} deployment failed")
            print(repr(e), file=sys.stderr)
            return 1

        finally:
            if self.rpc_manager is not None:
                await self.rpc_manager.disconnect()

        print(
            f"{self.contract_name} contract deployed to "
            f"{address_url(contract.address, self.explorer_url)}"
        )
        print("Contract address:", contract.address)

        return 0

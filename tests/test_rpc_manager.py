"""
Unit Tests for Network Configuration and Connection
"""

import pytest
from unittest.mock import Mock, AsyncMock, patch

from utils.rpc_manager import RPCManager
from blockchain.exceptions import (
    NetworkConfigError,
    NetworkConnectionError,
    NetworkMismatchError,
)


@pytest.fixture
def config():
    """Test network configuration"""
    return {
        'network': {
            'name': 'sepolia',
            'chain_id': 11155111,
            'explorer_url': 'https://sepolia.etherscan.io',
            'http_url_env': 'TEST_SEPOLIA_RPC_URL'
        },
        'deployment': {
            'confirmation_timeout': 60
        }
    }


@pytest.fixture
def mock_async_web3(awaitable):
    """Factory for mock AsyncWeb3 instances"""
    def make(connected=True, chain_id=11155111):
        w3 = Mock()
        w3.is_connected = AsyncMock(return_value=connected)
        w3.eth.chain_id = awaitable(chain_id)
        w3.provider.disconnect = AsyncMock()
        return w3

    return make


class TestNetworkConfig:

    def test_default_config_file(self):
        network = RPCManager().get_network_config()

        assert network.name == 'sepolia'
        assert network.chain_id == 11155111
        assert network.explorer_url == 'https://sepolia.etherscan.io'
        assert network.http_url_env == 'SEPOLIA_RPC_URL'

    def test_deployment_defaults(self, config):
        network = RPCManager(config=config).get_network_config()

        assert network.confirmation_timeout == 60
        assert network.gas_buffer == 1.2
        assert network.default_gas_limit == 3000000
        assert network.private_key_env == 'PRIVATE_KEY'

    def test_incomplete_config(self):
        with pytest.raises(NetworkConfigError):
            RPCManager(config={'network': {'name': 'sepolia'}})

    def test_unreadable_config_file(self, tmp_path):
        with pytest.raises(NetworkConfigError):
            RPCManager(config_path=str(tmp_path / 'missing.json'))

    def test_missing_rpc_url(self, config, monkeypatch):
        monkeypatch.delenv('TEST_SEPOLIA_RPC_URL', raising=False)

        with pytest.raises(NetworkConfigError):
            RPCManager(config=config).get_rpc_url()


class TestConnect:

    @pytest.fixture(autouse=True)
    def rpc_url(self, monkeypatch):
        monkeypatch.setenv('TEST_SEPOLIA_RPC_URL', 'http://127.0.0.1:8545')

    @pytest.mark.asyncio
    async def test_connect(self, config, mock_async_web3):
        w3 = mock_async_web3()

        with patch('utils.rpc_manager.AsyncHTTPProvider') as provider, \
                patch('utils.rpc_manager.AsyncWeb3', return_value=w3):
            manager = RPCManager(config=config)
            assert await manager.connect() is w3
            assert await manager.connect() is w3

        provider.assert_called_once_with('http://127.0.0.1:8545')

    @pytest.mark.asyncio
    async def test_not_connected(self, config, mock_async_web3):
        w3 = mock_async_web3(connected=False)

        with patch('utils.rpc_manager.AsyncHTTPProvider'), \
                patch('utils.rpc_manager.AsyncWeb3', return_value=w3):
            with pytest.raises(NetworkConnectionError):
                await RPCManager(config=config).connect()

        w3.provider.disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_chain(self, config, mock_async_web3):
        w3 = mock_async_web3(chain_id=1)

        with patch('utils.rpc_manager.AsyncHTTPProvider'), \
                patch('utils.rpc_manager.AsyncWeb3', return_value=w3):
            with pytest.raises(NetworkMismatchError) as exc_info:
                await RPCManager(config=config).connect()

        assert exc_info.value.chain_id == 1
        assert exc_info.value.expected_chain_id == 11155111
        w3.provider.disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_disconnect_closes_session(self, config, mock_async_web3):
        w3 = mock_async_web3()

        with patch('utils.rpc_manager.AsyncHTTPProvider'), \
                patch('utils.rpc_manager.AsyncWeb3', return_value=w3):
            manager = RPCManager(config=config)
            await manager.connect()
            await manager.disconnect()
            await manager.disconnect()

        w3.provider.disconnect.assert_awaited_once()
        assert manager.w3 is None

    @pytest.mark.asyncio
    async def test_disconnect_without_connect(self, config):
        manager = RPCManager(config=config)

        await manager.disconnect()

        assert manager.w3 is None


if __name__ == "__main__":
    pytest.main([__file__, '-v'])

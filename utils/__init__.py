"""
Utilities Package
Network connection and block explorer helpers
"""

from .rpc_manager import RPCManager, NetworkConfig
from .explorer import address_url, transaction_url

__all__ = [
    'RPCManager',
    'NetworkConfig',
    'address_url',
    'transaction_url'
]

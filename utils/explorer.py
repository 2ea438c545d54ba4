"""
Block Explorer Links
"""

SEPOLIA_EXPLORER_URL = "https://sepolia.etherscan.io"


def address_url(address: str, explorer_url: str = SEPOLIA_EXPLORER_URL) -> str:
    """Explorer page for a contract or account address"""
    return f"{explorer_url.rstrip('/')}/address/{address}"


def transaction_url(tx_hash: str, explorer_url: str = SEPOLIA_EXPLORER_URL) -> str:
    """Explorer page for a transaction"""
    return f"{explorer_url.rstrip('/')}/tx/{tx_hash}"

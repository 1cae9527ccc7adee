"""
Whale Alert Client
------------------
Async client for the Whale Alert cryptocurrency transaction tracking API.

Usage:
    from whale_alert import APIClient, BlockchainType

    client = APIClient(api_key="...")
    result = await client.get_transaction("abc", BlockchainType.BITCOIN)
    if result.success:
        for transaction in result.value:
            ...
"""

from .api import (
    APIClient, APIResult, ClientConfig,
    BlockchainType, TransactionQuery,
    Status, BlockchainStatus, Transaction, TransactionOwner, TransactionResponseData,
)
from .core import NetworkingError, NetworkingErrorKind, DecodeError
from .infra import configure_logging, get_logger, load_client_config

__version__ = "1.0.0"

__all__ = [
    "APIClient",
    "APIResult",
    "ClientConfig",
    "BlockchainType",
    "TransactionQuery",
    "Status",
    "BlockchainStatus",
    "Transaction",
    "TransactionOwner",
    "TransactionResponseData",
    "NetworkingError",
    "NetworkingErrorKind",
    "DecodeError",
    "configure_logging",
    "get_logger",
    "load_client_config",
]

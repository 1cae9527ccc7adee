# API module - Whale Alert endpoints, response models and the async client
# One request, one outcome: a decoded value or a NetworkingError

from .client import APIClient, APIResult, parse_error_envelope
from .endpoints import (
    Endpoint, RootEndpoint, StatusEndpoint, TransactionEndpoint, AllTransactionsEndpoint,
    BlockchainType, TransactionQuery,
)
from .models import Status, BlockchainStatus, Transaction, TransactionOwner, TransactionResponseData
from ..infra.config import ClientConfig

__all__ = [
    "APIClient", "APIResult", "ClientConfig", "parse_error_envelope",
    "Endpoint", "RootEndpoint", "StatusEndpoint", "TransactionEndpoint", "AllTransactionsEndpoint",
    "BlockchainType", "TransactionQuery",
    "Status", "BlockchainStatus", "Transaction", "TransactionOwner", "TransactionResponseData",
]

"""
Endpoints
---------
URL targets of the Whale Alert API and the query builder for listings.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..infra.config import BASE_URL


class BlockchainType(str, Enum):
    """Blockchains tracked by Whale Alert. Values are URL path segments."""
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    RIPPLE = "ripple"
    NEO = "neo"
    EOS = "eos"
    STELLAR = "stellar"
    TRON = "tron"
    ICON = "icon"
    STEEM = "steem"
    BINANCECHAIN = "binancechain"


class Endpoint:
    """Base class of the closed endpoint variant."""

    @property
    def path(self) -> str:
        raise NotImplementedError

    def url(self, base_url: str = BASE_URL) -> str:
        return f"{base_url.rstrip('/')}{self.path}"

    def __str__(self) -> str:
        return self.url()


@dataclass(frozen=True)
class RootEndpoint(Endpoint):
    @property
    def path(self) -> str:
        return ""


@dataclass(frozen=True)
class StatusEndpoint(Endpoint):
    @property
    def path(self) -> str:
        return "/status"


@dataclass(frozen=True)
class TransactionEndpoint(Endpoint):
    blockchain: Union[BlockchainType, str]
    hash: str

    @property
    def path(self) -> str:
        blockchain = self.blockchain.value if isinstance(self.blockchain, BlockchainType) else self.blockchain
        return f"/transaction/{blockchain}/{self.hash}"


@dataclass(frozen=True)
class AllTransactionsEndpoint(Endpoint):
    @property
    def path(self) -> str:
        return "/transactions"


QueryParams = List[Tuple[str, str]]


def _epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())


@dataclass(frozen=True)
class TransactionQuery:
    """
    Parameters of a transaction listing.

    Fields left as None are omitted from the query string entirely.
    `cursor` is the opaque token from a previous page.
    """
    from_date: datetime
    to_date: Optional[datetime] = None
    cursor: Optional[Union[str, int]] = None
    min_value: Optional[int] = None
    limit: Optional[int] = 100
    currency: Optional[str] = None

    def to_params(self) -> QueryParams:
        """Render present fields as (name, string value) pairs in a stable order."""
        candidates = [
            ("start", _epoch_seconds(self.from_date)),
            ("end", _epoch_seconds(self.to_date) if self.to_date is not None else None),
            ("cursor", self.cursor),
            ("min_value", self.min_value),
            ("limit", self.limit),
            ("currency", self.currency),
        ]
        return [(name, str(value)) for name, value in candidates if value is not None]

    def next_page(self, cursor: Optional[str]) -> "TransactionQuery":
        """Copy of this query positioned at `cursor`."""
        return TransactionQuery(
            from_date=self.from_date,
            to_date=self.to_date,
            cursor=cursor,
            min_value=self.min_value,
            limit=self.limit,
            currency=self.currency,
        )

"""
Response Models
---------------
Immutable records decoded from Whale Alert JSON bodies.

Each model exposes `from_dict`, which raises DecodeError when the payload
does not match the documented schema. Unknown fields are ignored.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from ..core.errors import DecodeError


def _require(data: Dict[str, Any], key: str, kind: type, type_name: str) -> Any:
    if key not in data:
        raise DecodeError(type_name, f"missing field '{key}'")
    return _check(data[key], key, kind, type_name)


def _optional(data: Dict[str, Any], key: str, kind: type, type_name: str, default: Any = None) -> Any:
    value = data.get(key)
    if value is None:
        return default
    return _check(value, key, kind, type_name)


def _check(value: Any, key: str, kind: type, type_name: str) -> Any:
    # bool is an int subclass; JSON true/false is never a number here
    if isinstance(value, bool) and kind is not bool:
        raise DecodeError(type_name, f"field '{key}' has wrong type bool")
    if kind is float and isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            raise DecodeError(type_name, f"field '{key}' is out of range") from None
    if not isinstance(value, kind):
        raise DecodeError(type_name, f"field '{key}' has wrong type {type(value).__name__}")
    return value


def _expect_object(data: Any, type_name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(type_name, f"expected object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class BlockchainStatus:
    """Connection status of one tracked blockchain."""
    name: str
    symbols: Tuple[str, ...] = ()
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "BlockchainStatus":
        data = _expect_object(data, cls.__name__)
        symbols = _optional(data, "symbols", list, cls.__name__, default=[])
        return cls(
            name=_require(data, "name", str, cls.__name__),
            symbols=tuple(str(symbol) for symbol in symbols),
            status=_optional(data, "status", str, cls.__name__, default=""),
        )

    @property
    def is_connected(self) -> bool:
        return self.status == "connected"


@dataclass(frozen=True)
class Status:
    """Service health snapshot returned by /status."""
    result: str
    blockchain_count: int = 0
    blockchains: Tuple[BlockchainStatus, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Status":
        data = _expect_object(data, cls.__name__)
        blockchains = _optional(data, "blockchains", list, cls.__name__, default=[])
        return cls(
            result=_require(data, "result", str, cls.__name__),
            blockchain_count=_optional(data, "blockchain_count", int, cls.__name__, default=0),
            blockchains=tuple(BlockchainStatus.from_dict(item) for item in blockchains),
        )


@dataclass(frozen=True)
class TransactionOwner:
    """Sending or receiving side of a transaction."""
    address: str = ""
    owner: str = ""
    owner_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "TransactionOwner":
        data = _expect_object(data, cls.__name__)
        return cls(
            address=_optional(data, "address", str, cls.__name__, default=""),
            owner=_optional(data, "owner", str, cls.__name__, default=""),
            owner_type=_optional(data, "owner_type", str, cls.__name__, default=""),
        )

    @property
    def is_known(self) -> bool:
        """Whale Alert labels unattributed addresses with an 'unknown' owner type."""
        return bool(self.owner) and self.owner_type != "unknown"


@dataclass(frozen=True)
class Transaction:
    """A detected blockchain transfer."""
    blockchain: str
    symbol: str
    hash: str
    timestamp: int
    amount: float
    amount_usd: float
    id: str = ""
    transaction_type: str = ""
    sender: TransactionOwner = field(default_factory=TransactionOwner)
    receiver: TransactionOwner = field(default_factory=TransactionOwner)
    transaction_count: int = 1

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        data = _expect_object(data, cls.__name__)
        name = cls.__name__
        sender = data.get("from")
        receiver = data.get("to")
        # Some blockchains report numeric ids
        raw_id = data.get("id", "")
        return cls(
            blockchain=_require(data, "blockchain", str, name),
            symbol=_require(data, "symbol", str, name),
            hash=_require(data, "hash", str, name),
            timestamp=_require(data, "timestamp", int, name),
            amount=_require(data, "amount", float, name),
            amount_usd=_require(data, "amount_usd", float, name),
            id="" if raw_id is None else str(raw_id),
            transaction_type=_optional(data, "transaction_type", str, name, default=""),
            sender=TransactionOwner.from_dict(sender) if sender is not None else TransactionOwner(),
            receiver=TransactionOwner.from_dict(receiver) if receiver is not None else TransactionOwner(),
            transaction_count=_optional(data, "transaction_count", int, name, default=1),
        )

    @property
    def occurred_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass(frozen=True)
class TransactionResponseData:
    """A page of transactions with its pagination cursor."""
    result: str
    transactions: Tuple[Transaction, ...] = ()
    cursor: Optional[str] = None
    count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "TransactionResponseData":
        data = _expect_object(data, cls.__name__)
        name = cls.__name__
        transactions = _optional(data, "transactions", list, name, default=[])
        cursor = data.get("cursor")
        decoded = tuple(Transaction.from_dict(item) for item in transactions)
        return cls(
            result=_require(data, "result", str, name),
            transactions=decoded,
            cursor=None if cursor is None else str(cursor),
            count=_optional(data, "count", int, name, default=len(decoded)),
        )

"""
Whale Alert API Client
----------------------
Async client for the Whale Alert REST API.

Every request ends with exactly one outcome, an APIResult holding either a
decoded value or a NetworkingError. Failures are values, never raised.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar, Union
import inspect
import json
import time

import httpx

from ..core.errors import NetworkingError
from ..infra.config import ClientConfig
from ..infra.logging import RequestContext, get_logger
from .endpoints import (
    AllTransactionsEndpoint, BlockchainType, Endpoint, QueryParams,
    StatusEndpoint, TransactionEndpoint, TransactionQuery,
)
from .models import Status, Transaction, TransactionResponseData

T = TypeVar("T")
U = TypeVar("U")

Callback = Callable[[Optional[Any], Optional[NetworkingError]], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class APIResult(Generic[T]):
    """Outcome of one request: a value or an error, never both."""
    value: Optional[T] = None
    error: Optional[NetworkingError] = None
    status_code: int = 0

    @classmethod
    def ok(cls, value: T, status_code: int = 200) -> "APIResult[T]":
        return cls(value=value, status_code=status_code)

    @classmethod
    def failure(cls, error: NetworkingError, status_code: int = 0) -> "APIResult[T]":
        return cls(error=error, status_code=status_code)

    @property
    def success(self) -> bool:
        return self.error is None

    def map(self, transform: Callable[[T], U]) -> "APIResult[U]":
        """Transform the value of a successful result; errors pass through."""
        if self.error is not None:
            return APIResult(error=self.error, status_code=self.status_code)
        return APIResult(value=transform(self.value), status_code=self.status_code)


def parse_error_envelope(body: bytes) -> Optional[NetworkingError]:
    """
    Recognize the API's {"result": ..., "message": ...} error envelope.

    Both fields must be strings; anything else is not an envelope.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        return None

    if not isinstance(payload, dict):
        return None

    result = payload.get("result")
    message = payload.get("message")
    if isinstance(result, str) and isinstance(message, str):
        return NetworkingError.other(f"Result: {result} | Message: {message}.")
    return None


class APIClient:
    """
    Client for the Whale Alert API.

    Rules:
    - Without an API key every operation fails with MISSING_API_KEY
      and no network call is made
    - No retries, no caching; transient errors are reported as-is
    - An optional callback receives the same outcome the coroutine returns
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key or None
        self.config = config or ClientConfig()
        self._transport = transport
        self._logger = get_logger("api.client")

    @property
    def is_configured(self) -> bool:
        """Check if an API key was supplied."""
        return self._api_key is not None

    def _get_headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        headers.update(self.config.headers)
        return headers

    def _http_client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {"transport": self._transport}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        return httpx.AsyncClient(**kwargs)

    async def _send(self, url: httpx.URL) -> httpx.Response:
        if self._transport is None:
            async with self._http_client() as client:
                return await client.get(url, headers=self._get_headers())

        # A supplied transport belongs to the caller; closing this client would close it
        client = self._http_client()
        return await client.get(url, headers=self._get_headers())

    def build_url(self, endpoint: Endpoint, params: Optional[QueryParams] = None) -> httpx.URL:
        """URL for `endpoint`: api_key first, then each provided parameter."""
        query: QueryParams = []
        if self._api_key is not None:
            query.append(("api_key", self._api_key))
        query.extend(params or [])
        return httpx.URL(endpoint.url(self.config.base_url), params=query)

    # Operations

    async def get_status(self, callback: Optional[Callback] = None) -> APIResult[Status]:
        """Get the current status of Whale Alert."""
        result = await self._request(StatusEndpoint(), Status.from_dict)
        return await self._deliver(result, callback)

    async def get_transaction(
        self,
        hash: str,
        blockchain: Union[BlockchainType, str],
        callback: Optional[Callback] = None,
    ) -> APIResult[List[Transaction]]:
        """Returns the transaction from a specific blockchain by hash."""
        page = await self._request(
            TransactionEndpoint(blockchain, hash),
            TransactionResponseData.from_dict,
        )
        return await self._deliver(page.map(lambda data: list(data.transactions)), callback)

    async def get_all_transactions(
        self,
        from_date: datetime,
        to_date: Optional[datetime] = None,
        cursor: Optional[Union[str, int]] = None,
        min_value: Optional[int] = None,
        limit: Optional[int] = 100,
        currency: Optional[str] = None,
        callback: Optional[Callback] = None,
    ) -> APIResult[List[Transaction]]:
        """Returns transactions with timestamp after `from_date`."""
        query = TransactionQuery(
            from_date=from_date,
            to_date=to_date,
            cursor=cursor,
            min_value=min_value,
            limit=limit,
            currency=currency,
        )
        page = await self._request(
            AllTransactionsEndpoint(),
            TransactionResponseData.from_dict,
            params=query.to_params(),
        )
        return await self._deliver(page.map(lambda data: list(data.transactions)), callback)

    async def get_transaction_page(
        self,
        query: TransactionQuery,
        callback: Optional[Callback] = None,
    ) -> APIResult[TransactionResponseData]:
        """
        Returns one page of the transaction listing, including its cursor.

        Pass `query.next_page(page.cursor)` to fetch the following page.
        """
        page = await self._request(
            AllTransactionsEndpoint(),
            TransactionResponseData.from_dict,
            params=query.to_params(),
        )
        return await self._deliver(page, callback)

    # Request flow

    async def _deliver(self, result: APIResult[T], callback: Optional[Callback]) -> APIResult[T]:
        if callback is not None:
            outcome = callback(result.value, result.error)
            if inspect.isawaitable(outcome):
                await outcome
        return result

    async def _request(
        self,
        endpoint: Endpoint,
        decoder: Callable[[Any], T],
        params: Optional[QueryParams] = None,
    ) -> APIResult[T]:
        """Issue a GET for `endpoint` and decode the body with `decoder`."""
        if not self.is_configured:
            return APIResult.failure(NetworkingError.missing_api_key())

        url = self.build_url(endpoint, params)

        with RequestContext():
            self._logger.debug(f"GET {endpoint.path or '/'}", extra={"endpoint": endpoint.path})
            start_time = time.monotonic()

            try:
                response = await self._send(url)
            except httpx.HTTPError as e:
                self._logger.warning(f"Request to {endpoint.path or '/'} failed: {e}")
                return APIResult.failure(NetworkingError.missing_response())

            elapsed_ms = (time.monotonic() - start_time) * 1000
            status_code = response.status_code
            body = response.content

            if not body:
                self._logger.warning(f"Empty response body from {endpoint.path or '/'} ({status_code})")
                return APIResult.failure(NetworkingError.missing_response(), status_code)

            status_error = None
            if status_code != 200:
                status_error = NetworkingError.from_status_code(status_code)
                self._logger.warning(
                    f"Unexpected status {status_code} from {endpoint.path or '/'}",
                    extra={"endpoint": endpoint.path, "status_code": status_code, "elapsed_ms": elapsed_ms},
                )

            envelope_error = parse_error_envelope(body)
            if envelope_error is not None:
                return APIResult.failure(envelope_error, status_code)

            if status_error is not None:
                return APIResult.failure(status_error, status_code)

            # Unclassified non-200 codes still get a decode attempt
            try:
                value = decoder(json.loads(body))
            except (ValueError, RecursionError) as e:
                self._logger.warning(f"Error decoding JSON object for {endpoint}: {e}")
                return APIResult.failure(NetworkingError.other(str(e)), status_code)

            self._logger.debug(
                f"Decoded {endpoint.path or '/'} in {elapsed_ms:.0f}ms",
                extra={"endpoint": endpoint.path, "status_code": status_code, "elapsed_ms": elapsed_ms},
            )
            return APIResult.ok(value, status_code)

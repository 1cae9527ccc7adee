"""
Error Taxonomy
--------------
Typed networking errors with HTTP status classification.
Errors are values delivered to the caller, never raised.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional


class NetworkingErrorKind(Enum):
    """Closed set of failure kinds a request can end with."""
    MISSING_API_KEY = auto()      # Detected before any I/O
    MISSING_RESPONSE = auto()     # Transport failed or body was empty
    BAD_REQUEST = auto()
    UNAUTHORIZED = auto()
    FORBIDDEN = auto()
    NOT_FOUND = auto()
    NOT_ACCEPTABLE = auto()
    TOO_MANY_REQUESTS = auto()
    SERVER_ERROR = auto()
    SERVICE_UNAVAILABLE = auto()
    OTHER = auto()                # Error envelope or decode failure


# Descriptions as documented by the Whale Alert API
DESCRIPTIONS: Dict[NetworkingErrorKind, str] = {
    NetworkingErrorKind.MISSING_API_KEY: "API key was not set.",
    NetworkingErrorKind.MISSING_RESPONSE: "There was no data in the response body from the network.",
    NetworkingErrorKind.BAD_REQUEST: "Your request was not valid.",
    NetworkingErrorKind.UNAUTHORIZED: "No valid API key was provided.",
    NetworkingErrorKind.FORBIDDEN: "Access to this resource is restricted for the given caller.",
    NetworkingErrorKind.NOT_FOUND: "The requested resource does not exist.",
    NetworkingErrorKind.NOT_ACCEPTABLE: "An unsupported format was requested.",
    NetworkingErrorKind.TOO_MANY_REQUESTS: (
        "You have exceeded the allowed number of calls per minute. "
        "Lower call frequency or upgrade your plan for a higher rate limit."
    ),
    NetworkingErrorKind.SERVER_ERROR: "There was a problem with the API host server. Try again later.",
    NetworkingErrorKind.SERVICE_UNAVAILABLE: "API is temporarily offline for maintenance. Try again later.",
}

STATUS_CODE_KINDS: Dict[int, NetworkingErrorKind] = {
    400: NetworkingErrorKind.BAD_REQUEST,
    401: NetworkingErrorKind.UNAUTHORIZED,
    403: NetworkingErrorKind.FORBIDDEN,
    404: NetworkingErrorKind.NOT_FOUND,
    406: NetworkingErrorKind.NOT_ACCEPTABLE,
    429: NetworkingErrorKind.TOO_MANY_REQUESTS,
    500: NetworkingErrorKind.SERVER_ERROR,
    503: NetworkingErrorKind.SERVICE_UNAVAILABLE,
}

TRANSIENT_KINDS = frozenset({
    NetworkingErrorKind.TOO_MANY_REQUESTS,
    NetworkingErrorKind.SERVER_ERROR,
    NetworkingErrorKind.SERVICE_UNAVAILABLE,
})


@dataclass(frozen=True)
class NetworkingError:
    """
    A single request failure.

    Only OTHER carries a caller-visible message; every other kind is
    fully described by its kind.
    """
    kind: NetworkingErrorKind
    message: Optional[str] = None

    @classmethod
    def missing_api_key(cls) -> "NetworkingError":
        return cls(NetworkingErrorKind.MISSING_API_KEY)

    @classmethod
    def missing_response(cls) -> "NetworkingError":
        return cls(NetworkingErrorKind.MISSING_RESPONSE)

    @classmethod
    def other(cls, message: str) -> "NetworkingError":
        return cls(NetworkingErrorKind.OTHER, message)

    @classmethod
    def from_status_code(cls, status_code: int) -> Optional["NetworkingError"]:
        """Classify an HTTP status code. Unlisted codes yield None."""
        kind = STATUS_CODE_KINDS.get(status_code)
        if kind is None:
            return None
        return cls(kind)

    @property
    def description(self) -> str:
        """Human-readable description of the failure."""
        if self.kind == NetworkingErrorKind.OTHER:
            return self.message or ""
        return DESCRIPTIONS[self.kind]

    @property
    def is_transient(self) -> bool:
        """True for failures a caller might reasonably retry later."""
        return self.kind in TRANSIENT_KINDS

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        if self.kind == NetworkingErrorKind.OTHER:
            return f"NetworkingError({self.kind.name}: {self.message})"
        return f"NetworkingError({self.kind.name})"


class DecodeError(ValueError):
    """Raised by model decoders when a payload does not match the schema."""

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Could not decode {type_name}: {reason}")

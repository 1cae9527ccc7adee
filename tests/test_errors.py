"""
Error Taxonomy Tests
--------------------
Tests for NetworkingError classification and descriptions.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from whale_alert import NetworkingError, NetworkingErrorKind


class TestStatusCodeClassification:
    """Tests for mapping HTTP status codes."""

    def test_table(self):
        expected = {
            400: NetworkingErrorKind.BAD_REQUEST,
            401: NetworkingErrorKind.UNAUTHORIZED,
            403: NetworkingErrorKind.FORBIDDEN,
            404: NetworkingErrorKind.NOT_FOUND,
            406: NetworkingErrorKind.NOT_ACCEPTABLE,
            429: NetworkingErrorKind.TOO_MANY_REQUESTS,
            500: NetworkingErrorKind.SERVER_ERROR,
            503: NetworkingErrorKind.SERVICE_UNAVAILABLE,
        }

        for code, kind in expected.items():
            assert NetworkingError.from_status_code(code).kind == kind

    @pytest.mark.parametrize("code", [200, 201, 302, 402, 418, 502, 504])
    def test_unlisted_codes_unclassified(self, code):
        assert NetworkingError.from_status_code(code) is None


class TestNetworkingError:
    """Tests for error values."""

    def test_other_carries_message(self):
        error = NetworkingError.other("Result: error | Message: invalid API key.")

        assert error.kind == NetworkingErrorKind.OTHER
        assert str(error) == "Result: error | Message: invalid API key."

    def test_documented_descriptions(self):
        assert NetworkingError.missing_api_key().description == "API key was not set."
        assert "maintenance" in NetworkingError.from_status_code(503).description

    def test_every_kind_has_description(self):
        for kind in NetworkingErrorKind:
            if kind != NetworkingErrorKind.OTHER:
                assert NetworkingError(kind).description

    def test_transient_kinds(self):
        assert NetworkingError.from_status_code(429).is_transient
        assert NetworkingError.from_status_code(500).is_transient
        assert NetworkingError.from_status_code(503).is_transient
        assert not NetworkingError.from_status_code(401).is_transient
        assert not NetworkingError.missing_api_key().is_transient

    def test_equality_by_value(self):
        assert NetworkingError.other("x") == NetworkingError.other("x")
        assert NetworkingError.other("x") != NetworkingError.other("y")

    def test_repr(self):
        assert repr(NetworkingError.from_status_code(404)) == "NetworkingError(NOT_FOUND)"
        assert repr(NetworkingError.other("boom")) == "NetworkingError(OTHER: boom)"

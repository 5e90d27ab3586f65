"""Unit tests for the shared error handlers."""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from autopay.core.errors import (
    PaymentProviderError,
    create_safe_error_message,
    general_exception_handler,
    http_exception_handler,
)


def make_request():
    request = MagicMock()
    request.method = "GET"
    request.url.path = "/weather"
    return request


class TestSafeErrorMessages:
    def test_application_errors_keep_their_message(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = False
            error = PaymentProviderError("Payment provider timed out", details={"detail": "read timeout"})
            assert create_safe_error_message(error) == "Payment provider timed out"

    def test_unknown_errors_are_generic(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = False
            assert create_safe_error_message(RuntimeError("db password wrong")) == (
                "An error occurred while processing your request"
            )

    def test_debug_shows_raw_message(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = True
            assert create_safe_error_message(RuntimeError("raw")) == "raw"


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_http_exception_handler(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = False
            response = await http_exception_handler(make_request(), HTTPException(status_code=404, detail="nope"))

        assert response.status_code == 404
        assert json.loads(response.body) == {"error": "Request processing error", "detail": None}

    @pytest.mark.asyncio
    async def test_general_exception_handler_hides_details(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = False
            response = await general_exception_handler(make_request(), RuntimeError("boom"))

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "Internal server error", "detail": None}

    @pytest.mark.asyncio
    async def test_general_exception_handler_debug_includes_traceback(self):
        with patch("autopay.core.errors.settings") as mock_settings:
            mock_settings.debug = True
            response = await general_exception_handler(make_request(), RuntimeError("boom"))

        assert "RuntimeError: boom" in json.loads(response.body)["detail"]

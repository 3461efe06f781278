from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from monzo_client import MonzoClient

TEST_BASE_URL = "https://api.monzo.test"
TEST_TOKEN = "test_token"


class MockMonzoApi:
    """Canned responder recording every request it receives.

    Each test gets its own instance plugged into its own ``httpx.AsyncClient``
    through ``httpx.MockTransport``, so nothing is intercepted process-wide.
    """

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        raw_body: Optional[str] = None,
        exc: Optional[Callable[[httpx.Request], Exception]] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.raw_body = raw_body
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(request)
        content = self.raw_body if self.raw_body is not None else json.dumps(self.body)
        return httpx.Response(
            self.status_code,
            content=content.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    def run(self, operation: Callable[[MonzoClient], Any]) -> Any:
        """Drive ``operation(client)`` to completion on a fresh event loop."""

        async def _run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(self)) as http:
                monzo = MonzoClient(http, TEST_TOKEN, base_url=TEST_BASE_URL)
                return await operation(monzo)

        return asyncio.run(_run())


@pytest.fixture
def mock_api():
    """Factory for per-test ``MockMonzoApi`` instances."""
    return MockMonzoApi


@pytest.fixture
def http_client():
    """An unused ``httpx.AsyncClient`` for tests that never send a request."""
    http = httpx.AsyncClient()
    yield http
    asyncio.run(http.aclose())


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Monzo settings from the environment to isolate tests."""
    for key in ("MONZO_API_URL", "MONZO_ACCESS_TOKEN", "MONZO_TIMEOUT", "MONZO_CONNECT_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_accounts_data():
    return {
        "accounts": [
            {
                "id": "acc_00009237aqC8c5umZmrRdh",
                "description": "Peter Pan's Account",
                "created": "2015-11-13T12:17:42Z",
            }
        ]
    }


@pytest.fixture
def sample_transaction_data():
    """A settled card payment matching the API's transaction object."""
    return {
        "account_balance": 13013,
        "amount": -510,
        "created": "2015-08-22T12:20:18Z",
        "currency": "GBP",
        "description": "THE DE BEAUVOIR DELI C LONDON GBR",
        "merchant": "merch_00008zIcpbAKe8shBxXUtl",
        "id": "tx_00008zIcpb1TB4yeIFXMzx",
        "metadata": {"seen": "2015-09-15T10:19:17Z"},
        "notes": "Salmon sandwich 🍞",
        "is_load": False,
        "settled": "2015-08-23T12:20:18Z",
        "category": "eating_out",
    }


@pytest.fixture
def sample_pots_data():
    return {
        "pots": [
            {
                "id": "pot_0000778xxfgh4iu8z83nWb",
                "name": "Savings",
                "style": "beach_ball",
                "balance": 133700,
                "currency": "GBP",
                "created": "2017-11-09T12:30:53.695Z",
                "updated": "2017-11-09T13:30:53.695Z",
                "deleted": False,
            }
        ]
    }

"""Async client for the Monzo API.

Example::

    import asyncio
    import httpx
    from monzo_client import MonzoClient

    async def main():
        async with httpx.AsyncClient() as http:
            monzo = MonzoClient(http, "<access_token>")
            balance = await monzo.balance("<account_id>")
            print(f"Balance: {balance.balance} {balance.currency}")
            print(f"Spent today: {balance.spend_today}")

    asyncio.run(main())
"""

from .config import Settings, build_http_client
from .core import (
    DEFAULT_API_URL,
    Account,
    Balance,
    ConfigurationError,
    DeserializationError,
    ErrorResponse,
    HttpStatusError,
    MonzoClient,
    MonzoError,
    Pot,
    Transaction,
    TransportError,
)

__all__ = [
    "DEFAULT_API_URL",
    "MonzoClient",
    "Settings",
    "build_http_client",
    "Account",
    "Balance",
    "Transaction",
    "Pot",
    "ErrorResponse",
    "MonzoError",
    "ConfigurationError",
    "TransportError",
    "HttpStatusError",
    "DeserializationError",
]

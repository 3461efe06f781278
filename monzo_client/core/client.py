from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .data_models import (
    Account,
    Accounts,
    Balance,
    ErrorResponse,
    Pot,
    PotsResponse,
    Transaction,
    TransactionResponse,
    Transactions,
)
from .errors import DeserializationError, HttpStatusError, TransportError

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.monzo.com"

ModelT = TypeVar("ModelT", bound=BaseModel)


class MonzoClient:
    """Read-only wrapper over the Monzo API.

    The ``httpx.AsyncClient`` is borrowed from the caller: it is never
    opened or closed here, and can be shared between several clients.
    Every method performs exactly one GET request and either returns the
    parsed model or raises a :class:`~monzo_client.core.errors.MonzoError`.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        access_token: str,
        base_url: str = DEFAULT_API_URL,
    ):
        self._client = http_client
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, http_client: httpx.AsyncClient, settings: Settings) -> MonzoClient:
        return cls(http_client, settings.require_access_token(), base_url=settings.api_url)

    @property
    def access_token(self) -> str:
        return self._access_token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _get_common_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
        }

    async def accounts(self) -> List[Account]:
        """List the accounts the access token can see."""
        payload = await self._get("/accounts", Accounts)
        logger.info("Retrieved %d accounts from %s", len(payload.accounts), self.base_url)
        return payload.accounts

    async def balance(self, account_id: str) -> Balance:
        """Retrieve information about an account's balance."""
        return await self._get("/balance", Balance, params={"account_id": account_id})

    async def transactions(self, account_id: str) -> List[Transaction]:
        """List transactions of an account, in API order.

        Only the page returned by the API is exposed; no pagination is done.
        """
        payload = await self._get("/transactions", Transactions, params={"account_id": account_id})
        logger.info(
            "Retrieved %d transactions for account '%s' from %s",
            len(payload.transactions),
            account_id,
            self.base_url,
        )
        return payload.transactions

    async def transaction(self, account_id: str, transaction_id: str) -> Transaction:
        """Retrieve a single transaction of an account."""
        path = f"/transactions/{quote(transaction_id, safe='')}"
        payload = await self._get(path, TransactionResponse, params={"account_id": account_id})
        return payload.transaction

    async def pots(self) -> List[Pot]:
        payload = await self._get("/pots/listV1", PotsResponse)
        return payload.pots

    async def _get(
        self,
        path: str,
        model: Type[ModelT],
        params: Optional[Dict[str, Any]] = None,
    ) -> ModelT:
        url = f"{self.base_url}{path}"
        logger.info("GET %s params=%s", url, params or {})

        try:
            response = await self._client.get(url, headers=self._get_common_headers(), params=params)
        except httpx.RequestError as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise TransportError("GET", url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            error = self._parse_error_body(response)
            logger.warning("GET %s returned status %s: %s", url, response.status_code, response.text)
            raise HttpStatusError(response.status_code, response.text, error)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error("Unexpected %s payload from %s: %s", model.__name__, url, exc)
            raise DeserializationError(
                f"Could not decode {model.__name__} from {url}: {exc}",
                response.text,
            ) from exc

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> Optional[ErrorResponse]:
        if not response.content:
            return None
        try:
            return ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            return None

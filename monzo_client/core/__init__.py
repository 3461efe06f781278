"""Core package exposing the Monzo client, its models and errors."""

from .client import DEFAULT_API_URL, MonzoClient
from .data_models import Account, Balance, ErrorResponse, Pot, Transaction
from .errors import (
    ConfigurationError,
    DeserializationError,
    HttpStatusError,
    MonzoError,
    TransportError,
)

__all__ = [
    "DEFAULT_API_URL",
    "MonzoClient",
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

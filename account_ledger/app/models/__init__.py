from .schemas import (
    JsonNumber,
    AccountResponse,
    AddMoneyRequest,
    ErrorResponse,
)

__all__ = [
    "JsonNumber",
    "AccountResponse",
    "AddMoneyRequest",
    "ErrorResponse",
]

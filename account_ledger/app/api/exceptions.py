from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    DepositLimitExceededError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
)


logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[LedgerError], int] = {
    AccountNotFoundError: 404,
    AccountAlreadyExistsError: 409,
    DepositLimitExceededError: 400,
    InsufficientFundsError: 400,
    InvalidAmountError: 400,
}

# Keyed by the last path segment of the route that failed to decode.
_INVALID_BODY_MESSAGES = {
    "deposit": "Invalid deposit amount",
    "add-money": "Invalid deposit amount",
    "withdraw": "Invalid withdraw amount",
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        status_code = _STATUS_CODES.get(type(exc), 400)
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        action = request.url.path.rstrip("/").rsplit("/", 1)[-1]
        message = _INVALID_BODY_MESSAGES.get(action, "Invalid request")
        logger.debug("request.invalid", extra={"path": request.url.path, "errors": exc.errors()})
        return JSONResponse(status_code=400, content={"error": message})

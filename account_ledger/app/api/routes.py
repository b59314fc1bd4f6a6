from fastapi import APIRouter, Body, Depends, status

from ..core.dependencies import get_ledger_service
from ..models import AccountResponse, AddMoneyRequest, ErrorResponse, JsonNumber
from ..services import LedgerService


router = APIRouter(prefix="/accounts", tags=["accounts"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

@router.get("/{account_id}", response_model=AccountResponse, responses=_NOT_FOUND)
def get_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.get_account(account_id)

@router.post(
    "/{account_id}/create",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def create_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.create_account(account_id)

@router.post(
    "/{account_id}/deposit",
    response_model=AccountResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def deposit(
    account_id: str,
    amount: JsonNumber = Body(..., description="Raw JSON number to credit"),
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.deposit(account_id, amount)

@router.post(
    "/{account_id}/add-money",
    response_model=AccountResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def add_money(
    account_id: str,
    payload: AddMoneyRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.deposit(account_id, payload.amount)

@router.post(
    "/{account_id}/withdraw",
    response_model=AccountResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def withdraw(
    account_id: str,
    amount: JsonNumber = Body(..., description="Raw JSON number to debit"),
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.withdraw(account_id, amount)

__all__ = ["router"]

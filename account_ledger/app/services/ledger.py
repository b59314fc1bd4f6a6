from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Union

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    DepositLimitExceededError,
    InsufficientFundsError,
    InvalidAmountError,
)
from ..models import AccountResponse


logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float]

DEFAULT_DEPOSIT_LIMIT = Decimal("10000")
DEFAULT_MAX_WITHDRAW_RATIO = Decimal("0.9")
DEFAULT_MINIMUM_BALANCE = Decimal("100")


@dataclass
class _AccountRecord:
    id: str
    balance: Decimal = Decimal("0")
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


class LedgerService:
    """In-memory account ledger safe for use from many request threads.

    The id -> record map is guarded by a registry lock that is held only for
    insertion and lookup. Every balance check-and-update runs under the
    record's own lock, so operations on one account are linearizable while
    different accounts never wait on each other's mutations.
    """

    def __init__(
        self,
        deposit_limit: Decimal = DEFAULT_DEPOSIT_LIMIT,
        max_withdraw_ratio: Decimal = DEFAULT_MAX_WITHDRAW_RATIO,
        minimum_balance: Decimal = DEFAULT_MINIMUM_BALANCE,
    ) -> None:
        self.deposit_limit = Decimal(deposit_limit)
        self.max_withdraw_ratio = Decimal(max_withdraw_ratio)
        self.minimum_balance = Decimal(minimum_balance)
        self._accounts: Dict[str, _AccountRecord] = {}
        self._registry_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_account(self, account_id: str) -> _AccountRecord:
        with self._registry_lock:
            try:
                return self._accounts[account_id]
            except KeyError as exc:
                raise AccountNotFoundError() from exc

    def _to_amount(self, amount: Amount) -> Decimal:
        if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
            raise InvalidAmountError()
        if isinstance(amount, float):
            value = Decimal(str(amount))
        else:
            value = Decimal(amount)

        if not value.is_finite() or value <= 0:
            raise InvalidAmountError()
        return value

    def _account_to_response(self, account_id: str, balance: Decimal) -> AccountResponse:
        return AccountResponse(id=account_id, balance=float(balance))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, account_id: str) -> AccountResponse:
        with self._registry_lock:
            if account_id in self._accounts:
                raise AccountAlreadyExistsError()
            record = _AccountRecord(id=account_id)
            self._accounts[account_id] = record

        logger.info("account.created", extra={"account_id": account_id})
        return self._account_to_response(record.id, record.balance)

    def get_account(self, account_id: str) -> AccountResponse:
        account = self._get_account(account_id)
        with account.lock:
            balance = account.balance
        return self._account_to_response(account.id, balance)

    def deposit(self, account_id: str, amount: Amount) -> AccountResponse:
        value = self._to_amount(amount)
        account = self._get_account(account_id)

        with account.lock:
            if value > self.deposit_limit:
                logger.info(
                    "account.deposit.rejected",
                    extra={"account_id": account_id, "amount": str(value)},
                )
                raise DepositLimitExceededError()
            account.balance += value
            balance = account.balance

        logger.info(
            "account.deposit",
            extra={"account_id": account_id, "amount": str(value), "balance": str(balance)},
        )
        return self._account_to_response(account.id, balance)

    def withdraw(self, account_id: str, amount: Amount) -> AccountResponse:
        value = self._to_amount(amount)
        account = self._get_account(account_id)

        with account.lock:
            current = account.balance
            # Both the proportional cap and the reserve floor must hold.
            if (
                value > self.max_withdraw_ratio * current
                or current - value < self.minimum_balance
            ):
                logger.info(
                    "account.withdraw.rejected",
                    extra={
                        "account_id": account_id,
                        "amount": str(value),
                        "balance": str(current),
                    },
                )
                raise InsufficientFundsError()
            account.balance = current - value
            balance = account.balance

        logger.info(
            "account.withdraw",
            extra={"account_id": account_id, "amount": str(value), "balance": str(balance)},
        )
        return self._account_to_response(account.id, balance)

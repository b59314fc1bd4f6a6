from functools import lru_cache

from ..services import LedgerService
from .config import get_settings


@lru_cache()
def get_ledger_service() -> LedgerService:
    settings = get_settings()
    return LedgerService(
        deposit_limit=settings.deposit_limit,
        max_withdraw_ratio=settings.max_withdraw_ratio,
        minimum_balance=settings.minimum_balance,
    )

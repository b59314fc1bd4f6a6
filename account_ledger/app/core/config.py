from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Account Ledger API"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 7000

    deposit_limit: Decimal = Field(default=Decimal("10000"), gt=0)
    max_withdraw_ratio: Decimal = Field(default=Decimal("0.9"), gt=0, le=1)
    minimum_balance: Decimal = Field(default=Decimal("100"), ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

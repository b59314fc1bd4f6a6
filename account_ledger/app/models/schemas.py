from typing import Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

# Only JSON numbers; quoted values and booleans are rejected at decode time.
JsonNumber = Union[StrictInt, StrictFloat]


class AccountResponse(BaseModel):
    id: str
    balance: float = Field(..., ge=0, description="Current balance")


class AddMoneyRequest(BaseModel):
    amount: JsonNumber = Field(..., description="Amount to credit to the account")


class ErrorResponse(BaseModel):
    error: str

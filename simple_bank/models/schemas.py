from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

class AccountCreate(BaseModel):
    owner: str = Field(..., min_length=1, description="Name of the account holder")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    balance: int = Field(default=0, description="Opening balance in minor units")

class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner: str
    balance: int = Field(..., description="Balance in minor units (e.g. cents), may be negative")
    currency: str
    created_at: datetime

class EntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account_id: int
    amount: int = Field(..., description="Negative for debits, positive for credits")
    created_at: datetime

class EntryListResponse(BaseModel):
    items: list[EntryResponse]

class TransferResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime

class TransferRequest(BaseModel):
    from_account_id: int = Field(..., ge=1)
    to_account_id: int = Field(..., ge=1)
    amount: int = Field(..., ge=1, description="Amount in minor units (must be >= 1)")

class TransferTxParams(BaseModel):
    from_account_id: int
    to_account_id: int
    amount: int

class TransferTxResult(BaseModel):
    transfer: TransferResponse
    from_account: AccountResponse
    to_account: AccountResponse
    from_entry: EntryResponse
    to_entry: EntryResponse

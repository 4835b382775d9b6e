from __future__ import annotations
from datetime import datetime, UTC
from typing import Optional
from sqlmodel import Field, SQLModel

class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner: str = Field(index=True)
    balance: int = Field(default=0)
    currency: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

class Entry(SQLModel, table=True):
    __tablename__ = "entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_id: int = Field(foreign_key="accounts.id", index=True)
    amount: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

class Transfer(SQLModel, table=True):
    __tablename__ = "transfers"

    id: Optional[int] = Field(default=None, primary_key=True)
    from_account_id: int = Field(foreign_key="accounts.id", index=True)
    to_account_id: int = Field(foreign_key="accounts.id", index=True)
    amount: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

from __future__ import annotations

from typing import Optional

from sqlalchemy import or_, update
from sqlmodel import Session, select

from ..core.errors import AccountNotFoundError
from ..models import AccountModel, EntryModel, TransferModel


class LedgerRepository:
    """Single-row ledger operations bound to one SQLModel session.

    Every call runs inside whatever transaction the session currently has
    open; the repository never commits on its own.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _insert(self, row):
        self.session.add(row)
        self.session.flush()
        self.session.refresh(row)
        return row

    # Account operations -------------------------------------------------
    def create_account(self, *, owner: str, balance: int, currency: str) -> AccountModel:
        return self._insert(AccountModel(owner=owner, balance=balance, currency=currency))

    def get_account(self, account_id: int) -> Optional[AccountModel]:
        return self.session.get(AccountModel, account_id)

    def list_accounts(self, limit: int = 50, offset: int = 0) -> list[AccountModel]:
        stmt = select(AccountModel).order_by(AccountModel.id).offset(offset).limit(limit)
        return list(self.session.exec(stmt))

    def add_account_balance(self, account_id: int, amount: int) -> AccountModel:
        """Apply ``amount`` to the stored balance and return the updated row.

        The increment happens in SQL so the row lock is taken by the UPDATE
        itself and the read-modify-write cannot interleave with another
        transaction.
        """
        self.session.flush()
        accounts = AccountModel.__table__
        stmt = (
            update(accounts)
            .where(accounts.c.id == account_id)
            .values(balance=accounts.c.balance + amount)
        )
        result = self.session.connection().execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return self.session.get(AccountModel, account_id, populate_existing=True)

    # Ledger entries -----------------------------------------------------
    def create_entry(self, *, account_id: int, amount: int) -> EntryModel:
        return self._insert(EntryModel(account_id=account_id, amount=amount))

    def get_entry(self, entry_id: int) -> Optional[EntryModel]:
        return self.session.get(EntryModel, entry_id)

    def list_entries(
        self, account_id: int, limit: int = 50, offset: int = 0
    ) -> list[EntryModel]:
        stmt = (
            select(EntryModel)
            .where(EntryModel.account_id == account_id)
            .order_by(EntryModel.id)
            .offset(offset)
            .limit(limit)
        )
        return list(self.session.exec(stmt))

    # Transfers ----------------------------------------------------------
    def create_transfer(
        self, *, from_account_id: int, to_account_id: int, amount: int
    ) -> TransferModel:
        return self._insert(
            TransferModel(
                from_account_id=from_account_id,
                to_account_id=to_account_id,
                amount=amount,
            )
        )

    def get_transfer(self, transfer_id: int) -> Optional[TransferModel]:
        return self.session.get(TransferModel, transfer_id)

    def list_transfers(
        self,
        *,
        from_account_id: int,
        to_account_id: int,
        limit: int = 50,
        offset: int = 0,
    ) -> list[TransferModel]:
        stmt = (
            select(TransferModel)
            .where(
                or_(
                    TransferModel.from_account_id == from_account_id,
                    TransferModel.to_account_id == to_account_id,
                )
            )
            .order_by(TransferModel.id)
            .offset(offset)
            .limit(limit)
        )
        return list(self.session.exec(stmt))

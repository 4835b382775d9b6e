from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session

from ..core.config import get_settings
from ..core.errors import (
    AccountNotFoundError,
    CurrencyMismatchError,
    TransferNotFoundError,
    TransferValidationError,
)
from ..models import (
    AccountCreate,
    AccountModel,
    AccountResponse,
    EntryListResponse,
    EntryResponse,
    TransferRequest,
    TransferResponse,
)
from .repository import LedgerRepository


logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(
        self,
        session: Session,
        repository: Optional[LedgerRepository] = None,
    ) -> None:
        self.session = session
        self.repository = repository or LedgerRepository(session)

    def _get_account(self, account_id: int) -> AccountModel:
        account = self.repository.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, payload: AccountCreate) -> AccountResponse:
        account = self.repository.create_account(
            owner=payload.owner,
            balance=payload.balance,
            currency=payload.currency.upper(),
        )
        response = AccountResponse.model_validate(account)
        self.session.commit()
        logger.info(
            "account.created",
            extra={"account_id": response.id, "owner": response.owner},
        )
        return response

    def get_account(self, account_id: int) -> AccountResponse:
        return AccountResponse.model_validate(self._get_account(account_id))

    def list_accounts(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[AccountResponse]:
        limit = limit or get_settings().page_size
        return [
            AccountResponse.model_validate(account)
            for account in self.repository.list_accounts(limit=limit, offset=offset)
        ]

    def list_entries(
        self,
        account_id: int,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> EntryListResponse:
        self._get_account(account_id)
        limit = limit or get_settings().page_size
        entries = self.repository.list_entries(account_id, limit=limit, offset=offset)
        return EntryListResponse(
            items=[EntryResponse.model_validate(entry) for entry in entries]
        )

    def get_transfer(self, transfer_id: int) -> TransferResponse:
        transfer = self.repository.get_transfer(transfer_id)
        if transfer is None:
            raise TransferNotFoundError(f"Transfer {transfer_id} not found")
        return TransferResponse.model_validate(transfer)

    def validate_transfer(self, payload: TransferRequest) -> None:
        """Reject transfers the store would otherwise accept blindly.

        Both accounts must exist and hold the same currency. Balance
        sufficiency is left to the caller.
        """
        if payload.from_account_id == payload.to_account_id:
            raise TransferValidationError("Cannot transfer to the same account")

        source = self._get_account(payload.from_account_id)
        dest = self._get_account(payload.to_account_id)
        if source.currency != dest.currency:
            raise CurrencyMismatchError(
                f"Account {source.id} holds {source.currency}, "
                f"account {dest.id} holds {dest.currency}"
            )

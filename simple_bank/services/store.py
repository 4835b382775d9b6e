from __future__ import annotations

import logging
from typing import Callable, Tuple, TypeVar

from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..core.errors import TransactionRollbackError, TransferValidationError
from ..models import (
    AccountModel,
    AccountResponse,
    EntryResponse,
    TransferResponse,
    TransferTxParams,
    TransferTxResult,
)
from .repository import LedgerRepository


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store:
    """Runs ledger operations as atomic units against one engine.

    Each unit of work gets its own session, and therefore its own pooled
    connection, for the lifetime of the transaction. Nothing is shared
    between concurrent units.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def exec_tx(self, fn: Callable[[LedgerRepository], T]) -> T:
        """Call ``fn`` with a repository bound to a fresh transaction.

        Commits when ``fn`` returns and hands back its return value. When
        ``fn`` raises, the transaction is rolled back and the original
        exception re-raised; if the rollback fails too, both errors are
        reported together as :class:`TransactionRollbackError`. Commit
        failures propagate unchanged.
        """
        with Session(self.engine) as session:
            repository = LedgerRepository(session)
            try:
                result = fn(repository)
            except BaseException as tx_error:
                try:
                    session.rollback()
                except Exception as rollback_error:
                    logger.error(
                        "tx.rollback_failed",
                        extra={"tx_error": repr(tx_error), "rollback_error": repr(rollback_error)},
                    )
                    raise TransactionRollbackError(tx_error, rollback_error) from tx_error
                logger.warning("tx.rolled_back", extra={"tx_error": repr(tx_error)})
                raise
            session.commit()
            logger.debug("tx.committed")
            return result

    def transfer_tx(self, params: TransferTxParams) -> TransferTxResult:
        """Move ``params.amount`` from one account to another.

        Creates the transfer record and one entry per account, then updates
        both balances, all in a single transaction. Balance sufficiency is
        not checked here.
        """
        if params.amount <= 0:
            raise TransferValidationError("Transfer amount must be positive")
        if params.from_account_id == params.to_account_id:
            raise TransferValidationError("Cannot transfer to the same account")

        def _transfer(repository: LedgerRepository) -> TransferTxResult:
            transfer = repository.create_transfer(
                from_account_id=params.from_account_id,
                to_account_id=params.to_account_id,
                amount=params.amount,
            )
            from_entry = repository.create_entry(
                account_id=params.from_account_id,
                amount=-params.amount,
            )
            to_entry = repository.create_entry(
                account_id=params.to_account_id,
                amount=params.amount,
            )

            # Lower id is always locked first so opposite-direction transfers
            # between the same pair cannot wait on each other in a cycle.
            if params.from_account_id < params.to_account_id:
                from_account, to_account = add_money(
                    repository,
                    params.from_account_id,
                    -params.amount,
                    params.to_account_id,
                    params.amount,
                )
            else:
                to_account, from_account = add_money(
                    repository,
                    params.to_account_id,
                    params.amount,
                    params.from_account_id,
                    -params.amount,
                )

            return TransferTxResult(
                transfer=TransferResponse.model_validate(transfer),
                from_account=AccountResponse.model_validate(from_account),
                to_account=AccountResponse.model_validate(to_account),
                from_entry=EntryResponse.model_validate(from_entry),
                to_entry=EntryResponse.model_validate(to_entry),
            )

        result = self.exec_tx(_transfer)
        logger.info(
            "transfer.completed",
            extra={
                "transfer_id": result.transfer.id,
                "from_account_id": params.from_account_id,
                "to_account_id": params.to_account_id,
                "amount": params.amount,
            },
        )
        return result


def add_money(
    repository: LedgerRepository,
    account_id1: int,
    amount1: int,
    account_id2: int,
    amount2: int,
) -> Tuple[AccountModel, AccountModel]:
    """Apply two balance changes in the order given and return both rows."""
    account1 = repository.add_account_balance(account_id1, amount1)
    account2 = repository.add_account_balance(account_id2, amount2)
    return account1, account2

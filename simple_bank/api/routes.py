from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_ledger_service, get_store
from ..models import (
    AccountCreate,
    AccountResponse,
    EntryListResponse,
    TransferRequest,
    TransferResponse,
    TransferTxParams,
    TransferTxResult,
)
from ..services import LedgerService, Store


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.create_account(payload)

@router.get("", response_model=list[AccountResponse])
def list_accounts(
    limit: int | None = None,
    offset: int = 0,
    service: LedgerService = Depends(get_ledger_service),
) -> list[AccountResponse]:
    return service.list_accounts(limit=limit, offset=offset)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.get_account(account_id)

@router.get("/{account_id}/entries", response_model=EntryListResponse)
def list_entries(
    account_id: int,
    limit: int | None = None,
    offset: int = 0,
    service: LedgerService = Depends(get_ledger_service),
) -> EntryListResponse:
    return service.list_entries(account_id, limit=limit, offset=offset)

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post(
    "", response_model=TransferTxResult, status_code=status.HTTP_201_CREATED
)
def create_transfer(
    payload: TransferRequest,
    service: LedgerService = Depends(get_ledger_service),
    store: Store = Depends(get_store),
) -> TransferTxResult:
    service.validate_transfer(payload)
    return store.transfer_tx(TransferTxParams(**payload.model_dump()))

@transfer_router.get("/{transfer_id}", response_model=TransferResponse)
def get_transfer(
    transfer_id: int,
    service: LedgerService = Depends(get_ledger_service),
) -> TransferResponse:
    return service.get_transfer(transfer_id)

__all__ = ["router", "transfer_router"]

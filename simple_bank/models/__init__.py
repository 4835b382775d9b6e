from .db import Account as AccountModel
from .db import Entry as EntryModel
from .db import Transfer as TransferModel
from .schemas import (
    AccountCreate,
    AccountResponse,
    EntryListResponse,
    EntryResponse,
    TransferRequest,
    TransferResponse,
    TransferTxParams,
    TransferTxResult,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "EntryListResponse",
    "EntryResponse",
    "TransferRequest",
    "TransferResponse",
    "TransferTxParams",
    "TransferTxResult",
    "AccountModel",
    "EntryModel",
    "TransferModel",
]

from .ledger import LedgerService
from .repository import LedgerRepository
from .store import Store, add_money

__all__ = ["LedgerRepository", "LedgerService", "Store", "add_money"]

import pytest
from sqlmodel import Session

from ..core.errors import AccountNotFoundError
from ..services import LedgerRepository


@pytest.fixture
def repository(engine):
    with Session(engine) as session:
        yield LedgerRepository(session)


def test_create_and_get_account(repository: LedgerRepository) -> None:
    account = repository.create_account(owner="alice", balance=100, currency="EUR")

    assert account.id is not None
    assert account.created_at is not None
    fetched = repository.get_account(account.id)
    assert (fetched.owner, fetched.balance, fetched.currency) == ("alice", 100, "EUR")


def test_get_missing_account_returns_none(repository: LedgerRepository) -> None:
    assert repository.get_account(42) is None


def test_list_accounts_paginates_in_id_order(repository: LedgerRepository) -> None:
    ids = [
        repository.create_account(owner=f"owner{i}", balance=0, currency="USD").id
        for i in range(5)
    ]

    assert [a.id for a in repository.list_accounts(limit=2)] == ids[:2]
    assert [a.id for a in repository.list_accounts(limit=2, offset=2)] == ids[2:4]
    assert [a.id for a in repository.list_accounts(limit=10, offset=4)] == ids[4:]


def test_add_account_balance_applies_signed_delta(repository: LedgerRepository) -> None:
    account = repository.create_account(owner="bob", balance=50, currency="USD")

    assert repository.add_account_balance(account.id, 25).balance == 75
    assert repository.add_account_balance(account.id, -100).balance == -25
    assert repository.get_account(account.id).balance == -25


def test_add_account_balance_on_missing_account_raises(
    repository: LedgerRepository,
) -> None:
    with pytest.raises(AccountNotFoundError):
        repository.add_account_balance(999, 10)


def test_entries_are_listed_per_account(repository: LedgerRepository) -> None:
    first = repository.create_account(owner="carol", balance=0, currency="USD")
    second = repository.create_account(owner="dave", balance=0, currency="USD")
    entry = repository.create_entry(account_id=first.id, amount=-5)
    repository.create_entry(account_id=first.id, amount=8)
    repository.create_entry(account_id=second.id, amount=3)

    assert repository.get_entry(entry.id).amount == -5
    assert [e.amount for e in repository.list_entries(first.id)] == [-5, 8]
    assert [e.amount for e in repository.list_entries(first.id, limit=1, offset=1)] == [8]
    assert [e.amount for e in repository.list_entries(second.id)] == [3]


def test_transfers_are_listed_by_either_side(repository: LedgerRepository) -> None:
    a = repository.create_account(owner="erin", balance=0, currency="USD")
    b = repository.create_account(owner="frank", balance=0, currency="USD")
    c = repository.create_account(owner="gina", balance=0, currency="USD")
    ab = repository.create_transfer(from_account_id=a.id, to_account_id=b.id, amount=1)
    ca = repository.create_transfer(from_account_id=c.id, to_account_id=a.id, amount=2)
    repository.create_transfer(from_account_id=b.id, to_account_id=c.id, amount=3)

    assert repository.get_transfer(ab.id).amount == 1
    assert repository.get_transfer(12345) is None
    listed = repository.list_transfers(from_account_id=a.id, to_account_id=a.id)
    assert [t.id for t in listed] == [ab.id, ca.id]

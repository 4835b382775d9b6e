from collections.abc import Callable
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, func, select

from ..core import db
from ..core.db import create_engine_for_url, get_session
from ..core.dependencies import get_store
from ..core.randomdata import RandomData
from ..main import app
from ..models import AccountResponse
from ..services import LedgerRepository, Store


@pytest.fixture
def engine(tmp_path):
    test_db = tmp_path / "test.db"
    engine = create_engine_for_url(f"sqlite:///{test_db}", lock_timeout=30)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> Store:
    return Store(engine)


@pytest.fixture
def rng() -> RandomData:
    return RandomData(seed=1234)


@pytest.fixture
def create_account(engine, rng) -> Callable[..., AccountResponse]:
    def _create(balance: Optional[int] = None, currency: str = "USD") -> AccountResponse:
        with Session(engine) as session:
            account = LedgerRepository(session).create_account(
                owner=rng.random_owner(),
                balance=rng.random_money() if balance is None else balance,
                currency=currency,
            )
            response = AccountResponse.model_validate(account)
            session.commit()
        return response

    return _create


@pytest.fixture
def fetch_balance(engine) -> Callable[[int], int]:
    def _fetch(account_id: int) -> int:
        with Session(engine) as session:
            return LedgerRepository(session).get_account(account_id).balance

    return _fetch


@pytest.fixture
def count_rows(engine) -> Callable[[type], int]:
    def _count(model: type) -> int:
        with Session(engine) as session:
            return session.exec(select(func.count()).select_from(model)).one()

    return _count


@pytest.fixture
def client(engine) -> TestClient:
    original_engine = db.get_engine()
    db.set_engine(engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    app.dependency_overrides[get_store] = lambda: Store(engine)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    db.set_engine(original_engine)

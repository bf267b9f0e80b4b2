"""
Pytest configuration and fixtures for the ledger engine tests.

This module provides:
- In-memory SQLite database fixtures (foreign keys and SAVEPOINTs enabled)
- A unit of work and service fixtures over the test session
- Factory helpers for portfolio accounts, assets and transactions
- A deterministic stub price provider
- A FastAPI test client bound to the test database
"""

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest
from sqlalchemy import create_engine, func, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from ledgerfolio.api.deps import get_price_provider
from ledgerfolio.config.settings import Settings, set_settings, reset_settings
from ledgerfolio.domain.models import Asset, PortfolioAccount
from ledgerfolio.main import app
from ledgerfolio.providers import StubPriceProvider
from ledgerfolio.repositories.sqlalchemy.database import (
    Base,
    configure_sqlite,
    get_db,
    reset_database,
)
# Import ORM models to register them with Base before creating tables
from ledgerfolio.repositories.sqlalchemy import orm_models  # noqa: F401
from ledgerfolio.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from ledgerfolio.services import (
    AssetCreate,
    BalanceService,
    CapitalInput,
    PortfolioService,
    PriceService,
    TransactionService,
)

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def test_settings():
    """Point global settings at a throwaway database and the stub provider."""
    reset_database()
    settings = Settings(database_url="sqlite://", price_provider="stub")
    set_settings(settings)
    yield settings
    reset_database()
    reset_settings()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = configure_sqlite(
        create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=test_engine,
    )


@pytest.fixture(scope="function")
def test_session(session_factory) -> Session:
    """Create test database session."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def count_rows(session: Session, orm_model) -> int:
    """Count rows of a table as committed in the database."""
    return session.query(func.count()).select_from(orm_model).scalar()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def uow(test_session) -> SqlAlchemyUnitOfWork:
    """Provide a unit of work over the test session."""
    return SqlAlchemyUnitOfWork(test_session)


@pytest.fixture
def portfolio_service(uow) -> PortfolioService:
    return PortfolioService(uow)


@pytest.fixture
def transaction_service(uow) -> TransactionService:
    return TransactionService(uow)


@pytest.fixture
def balance_service(uow) -> BalanceService:
    return BalanceService(uow)


@pytest.fixture
def stub_provider() -> StubPriceProvider:
    """Stub provider whose latest date is 2024-06-30."""
    return StubPriceProvider(latest=date(2024, 6, 30))


@pytest.fixture
def price_service(uow, stub_provider) -> PriceService:
    return PriceService(uow, provider=stub_provider)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def make_account(portfolio_service) -> Callable[..., PortfolioAccount]:
    """Factory for portfolio accounts."""

    def _make(name: str = "Brokerage", user_id: str = USER_ID) -> PortfolioAccount:
        account = portfolio_service.create_portfolio_account(user_id, name)
        assert isinstance(account, PortfolioAccount), account
        return account

    return _make


@pytest.fixture
def make_asset(portfolio_service) -> Callable[..., Asset]:
    """Factory for assets. Defaults to a 2-decimal currency named after the ticker."""

    def _make(
        ticker: str = "USD",
        precision: int = 2,
        user_id: str = USER_ID,
        **kwargs,
    ) -> Asset:
        kwargs.setdefault("name", f"{ticker} asset")
        kwargs.setdefault("is_currency", True)
        kwargs.setdefault("price_precision", 4)
        asset = portfolio_service.create_asset(
            user_id, AssetCreate(ticker=ticker, precision=precision, **kwargs)
        )
        assert isinstance(asset, Asset), asset
        return asset

    return _make


@pytest.fixture
def contribute(transaction_service) -> Callable[..., object]:
    """Factory for capital contributions."""

    def _contribute(
        account: PortfolioAccount,
        asset: Asset,
        amount: str,
        fee: str = "0",
        on: date = date(2024, 1, 15),
        user_id: str = USER_ID,
    ):
        return transaction_service.create_capital(
            user_id,
            CapitalInput(
                title="Deposit",
                date=on,
                portfolio_account_id=account.id,
                asset_id=asset.id,
                amount=Decimal(amount),
                fee=Decimal(fee),
            ),
        )

    return _contribute


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def client(session_factory, stub_provider) -> TestClient:
    """Provide FastAPI test client with test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_provider] = lambda: stub_provider
    with TestClient(app, headers={"X-User-Id": USER_ID}) as c:
        yield c
    app.dependency_overrides.clear()

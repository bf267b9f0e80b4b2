"""Dependency injection for FastAPI."""

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ledgerfolio.core.exceptions import ValidationError
from ledgerfolio.providers.price_provider import PriceProvider
from ledgerfolio.repositories.sqlalchemy.database import get_db
from ledgerfolio.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from ledgerfolio.services import (
    BalanceService,
    PortfolioService,
    PriceService,
    TransactionService,
)


def get_current_user(x_user_id: str = Header(..., description="Authenticated user ID")) -> str:
    """Identity set by the upstream authenticator; no authentication happens here."""
    user_id = x_user_id.strip()
    if not user_id:
        raise ValidationError("X-User-Id header is empty", field="X-User-Id")
    return user_id


def get_uow(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide a unit of work over the request's session."""
    return SqlAlchemyUnitOfWork(db)


def get_price_provider(request: Request) -> PriceProvider:
    """Provide the price provider built once at startup."""
    return request.app.state.price_provider


def get_portfolio_service(uow: SqlAlchemyUnitOfWork = Depends(get_uow)) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(uow)


def get_transaction_service(uow: SqlAlchemyUnitOfWork = Depends(get_uow)) -> TransactionService:
    """Provide TransactionService instance."""
    return TransactionService(uow)


def get_balance_service(uow: SqlAlchemyUnitOfWork = Depends(get_uow)) -> BalanceService:
    """Provide BalanceService instance."""
    return BalanceService(uow)


def get_price_service(
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
    provider: PriceProvider = Depends(get_price_provider),
) -> PriceService:
    """Provide PriceService instance."""
    return PriceService(uow, provider=provider)

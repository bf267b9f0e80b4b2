"""Balance and audit trail API endpoints."""

from fastapi import APIRouter, Depends

from ledgerfolio.api.deps import (
    get_balance_service,
    get_current_user,
    get_portfolio_service,
    get_transaction_service,
)
from ledgerfolio.api.schemas import AuditTrailLineResponse, BalanceListResponse, BalanceResponse
from ledgerfolio.services import BalanceService, PortfolioService, TransactionService

router = APIRouter(prefix="/balances", tags=["balances"])


@router.get("/", response_model=BalanceListResponse)
def list_balances(
    user_id: str = Depends(get_current_user),
    service: BalanceService = Depends(get_balance_service),
):
    """List every cached (account, asset) balance of the user."""
    balances = service.list_balances(user_id)
    return BalanceListResponse(
        balances=[BalanceResponse.model_validate(b) for b in balances],
        count=len(balances),
    )


@router.post("/rebuild", response_model=BalanceListResponse)
def rebuild_balances(
    user_id: str = Depends(get_current_user),
    service: BalanceService = Depends(get_balance_service),
):
    """Recompute every balance from the asset ledgers."""
    balances = service.rebuild_balances(user_id)
    return BalanceListResponse(
        balances=[BalanceResponse.model_validate(b) for b in balances],
        count=len(balances),
    )


@router.get("/{account_id}/{asset_id}", response_model=BalanceResponse)
def get_balance(
    account_id: str,
    asset_id: str,
    user_id: str = Depends(get_current_user),
    portfolio: PortfolioService = Depends(get_portfolio_service),
    service: BalanceService = Depends(get_balance_service),
):
    """Balance of one asset in one account; zero the first time a pair is read."""
    portfolio.get_portfolio_account(user_id, account_id)
    portfolio.get_asset(user_id, asset_id)
    return BalanceResponse(
        portfolio_account_id=account_id,
        asset_id=asset_id,
        balance=service.get_balance(account_id, asset_id),
    )


@router.get("/{account_id}/{asset_id}/audit", response_model=list[AuditTrailLineResponse])
def get_audit_trail(
    account_id: str,
    asset_id: str,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Every entry behind a balance with the running total, oldest first."""
    return [AuditTrailLineResponse.from_line(line) for line in service.audit_trail(user_id, account_id, asset_id)]

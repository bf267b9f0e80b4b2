"""Transaction API endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ledgerfolio.api.deps import get_current_user, get_transaction_service
from ledgerfolio.api.schemas import (
    CapitalRequest,
    IncomeRequest,
    TradeRequest,
    TransactionListResponse,
    TransactionResponse,
    TransferRequest,
)
from ledgerfolio.domain.models import TransactionKind
from ledgerfolio.services import (
    CapitalInput,
    IncomeInput,
    TradeInput,
    TransactionService,
    TransferInput,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


# =============================================================================
# Reads
# =============================================================================


@router.get("/", response_model=TransactionListResponse)
def list_transactions(
    kind: Optional[TransactionKind] = Query(None, description="Filter by transaction kind"),
    account_id: Optional[str] = Query(None, description="Only transactions touching this account"),
    asset_id: Optional[str] = Query(None, description="Only transactions touching this asset"),
    start_date: Optional[date] = Query(None, description="Start date (inclusive)"),
    end_date: Optional[date] = Query(None, description="End date (inclusive)"),
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """List transactions, newest first."""
    details = service.list_transactions(
        user_id,
        kind=kind,
        account_id=account_id,
        asset_id=asset_id,
        start_date=start_date,
        end_date=end_date,
    )
    return TransactionListResponse(
        transactions=[TransactionResponse.from_detail(d) for d in details],
        count=len(details),
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Get a transaction with its entries."""
    return TransactionResponse.from_detail(service.get_transaction(user_id, transaction_id))


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Delete a transaction of any kind with all its entries."""
    service.delete_transaction(user_id, transaction_id)


# =============================================================================
# Composers
# =============================================================================


@router.post("/capital", response_model=TransactionResponse, status_code=201)
def create_capital(
    request: CapitalRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Record a contribution or drawing."""
    detail = service.create_capital(user_id, CapitalInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.put("/capital/{transaction_id}", response_model=TransactionResponse)
def update_capital(
    transaction_id: str,
    request: CapitalRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    detail = service.update_capital(user_id, transaction_id, CapitalInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.post("/income", response_model=TransactionResponse, status_code=201)
def create_income(
    request: IncomeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Record an income receipt."""
    detail = service.create_income(user_id, IncomeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.put("/income/{transaction_id}", response_model=TransactionResponse)
def update_income(
    transaction_id: str,
    request: IncomeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    detail = service.update_income(user_id, transaction_id, IncomeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.post("/expense", response_model=TransactionResponse, status_code=201)
def create_expense(
    request: IncomeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Record an expense; the amount is given as a positive number."""
    detail = service.create_expense(user_id, IncomeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.put("/expense/{transaction_id}", response_model=TransactionResponse)
def update_expense(
    transaction_id: str,
    request: IncomeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    detail = service.update_expense(user_id, transaction_id, IncomeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.post("/transfer", response_model=TransactionResponse, status_code=201)
def create_transfer(
    request: TransferRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Move an asset between two of the user's accounts."""
    detail = service.create_transfer(user_id, TransferInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.put("/transfer/{transaction_id}", response_model=TransactionResponse)
def update_transfer(
    transaction_id: str,
    request: TransferRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    detail = service.update_transfer(user_id, transaction_id, TransferInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.post("/trade", response_model=TransactionResponse, status_code=201)
def create_trade(
    request: TradeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    """Buy or sell a base asset for a quote asset."""
    detail = service.create_trade(user_id, TradeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)


@router.put("/trade/{transaction_id}", response_model=TransactionResponse)
def update_trade(
    transaction_id: str,
    request: TradeRequest,
    user_id: str = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
):
    detail = service.update_trade(user_id, transaction_id, TradeInput(**request.model_dump()))
    return TransactionResponse.from_detail(detail)

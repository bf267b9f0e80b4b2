"""Portfolio account API endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ledgerfolio.api.deps import get_current_user, get_portfolio_service
from ledgerfolio.api.schemas import (
    DeletedResponse,
    PortfolioAccountCreate,
    PortfolioAccountOrder,
    PortfolioAccountResponse,
    PortfolioAccountUpdate,
    field_error_body,
)
from ledgerfolio.domain.models import FieldError
from ledgerfolio.services import PortfolioService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/", response_model=PortfolioAccountResponse, status_code=201)
def create_account(
    request: PortfolioAccountCreate,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Create a portfolio account; duplicate names return 400 with the field."""
    result = service.create_portfolio_account(user_id, request.name)
    if isinstance(result, FieldError):
        return JSONResponse(status_code=400, content=field_error_body(result))
    return PortfolioAccountResponse.model_validate(result)


@router.get("/", response_model=list[PortfolioAccountResponse])
def list_accounts(
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """List the user's accounts in display order."""
    return [PortfolioAccountResponse.model_validate(a) for a in service.list_portfolio_accounts(user_id)]


@router.put("/order", response_model=list[PortfolioAccountResponse])
def reorder_accounts(
    request: PortfolioAccountOrder,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Set the display order of the user's accounts."""
    accounts = service.reorder_portfolio_accounts(user_id, request.account_ids)
    return [PortfolioAccountResponse.model_validate(a) for a in accounts]


@router.get("/{account_id}", response_model=PortfolioAccountResponse)
def get_account(
    account_id: str,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Get a single account."""
    return PortfolioAccountResponse.model_validate(service.get_portfolio_account(user_id, account_id))


@router.patch("/{account_id}", response_model=PortfolioAccountResponse)
def update_account(
    account_id: str,
    request: PortfolioAccountUpdate,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Rename or reorder an account."""
    result = service.update_portfolio_account(user_id, account_id, name=request.name, order=request.order)
    if isinstance(result, FieldError):
        return JSONResponse(status_code=400, content=field_error_body(result))
    return PortfolioAccountResponse.model_validate(result)


@router.delete("/{account_id}", response_model=DeletedResponse)
def delete_account(
    account_id: str,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Delete an account with its ledgers and balances."""
    removed = service.delete_portfolio_account(user_id, account_id)
    return DeletedResponse(removed_transaction_ids=removed)

"""Asset and accounting currency API endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ledgerfolio.api.deps import get_current_user, get_portfolio_service
from ledgerfolio.api.schemas import (
    AccountingCurrencyRequest,
    AccountingCurrencyResponse,
    AssetCreateRequest,
    AssetResponse,
    AssetUpdateRequest,
    DeletedResponse,
    field_error_body,
)
from ledgerfolio.domain.models import FieldError
from ledgerfolio.services import AssetCreate, AssetUpdate, PortfolioService

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("/accounting-currency", response_model=AccountingCurrencyResponse)
def get_accounting_currency(
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return AccountingCurrencyResponse.model_validate(service.get_accounting_currency(user_id))


@router.put("/accounting-currency", response_model=AccountingCurrencyResponse)
def set_accounting_currency(
    request: AccountingCurrencyRequest,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Select (or clear) the asset the portfolio is valued in."""
    return AccountingCurrencyResponse.model_validate(
        service.set_accounting_currency(user_id, request.asset_id)
    )


@router.post("/", response_model=AssetResponse, status_code=201)
def create_asset(
    request: AssetCreateRequest,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Create an asset; duplicate ticker, name or symbol return 400 with the field."""
    result = service.create_asset(user_id, AssetCreate(**request.model_dump()))
    if isinstance(result, FieldError):
        return JSONResponse(status_code=400, content=field_error_body(result))
    return AssetResponse.model_validate(result)


@router.get("/", response_model=list[AssetResponse])
def list_assets(
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return [AssetResponse.model_validate(a) for a in service.list_assets(user_id)]


@router.get("/{asset_id}", response_model=AssetResponse)
def get_asset(
    asset_id: str,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return AssetResponse.model_validate(service.get_asset(user_id, asset_id))


@router.patch("/{asset_id}", response_model=AssetResponse)
def update_asset(
    asset_id: str,
    request: AssetUpdateRequest,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Partially update an asset."""
    result = service.update_asset(user_id, asset_id, AssetUpdate(**request.model_dump()))
    if isinstance(result, FieldError):
        return JSONResponse(status_code=400, content=field_error_body(result))
    return AssetResponse.model_validate(result)


@router.delete("/{asset_id}", response_model=DeletedResponse)
def delete_asset(
    asset_id: str,
    user_id: str = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Delete an asset with its ledgers, balances and prices."""
    removed = service.delete_asset(user_id, asset_id)
    return DeletedResponse(removed_transaction_ids=removed)

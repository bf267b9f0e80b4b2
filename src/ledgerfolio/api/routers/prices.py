"""Asset price API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ledgerfolio.api.deps import get_current_user, get_price_service
from ledgerfolio.api.schemas import GeneratePricesRequest, PriceRequest, PriceResponse
from ledgerfolio.services import PriceService

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get("/", response_model=list[PriceResponse])
def list_prices(
    asset_id: Optional[str] = Query(None),
    quote_asset_id: Optional[str] = Query(None),
    user_id: str = Depends(get_current_user),
    service: PriceService = Depends(get_price_service),
):
    """List prices, newest first."""
    return [PriceResponse.model_validate(p) for p in service.list_prices(user_id, asset_id, quote_asset_id)]


@router.put("/", response_model=PriceResponse)
def upsert_price(
    request: PriceRequest,
    user_id: str = Depends(get_current_user),
    service: PriceService = Depends(get_price_service),
):
    """Set the price for a pair on a date, replacing any existing one."""
    price = service.upsert_price(
        user_id, request.asset_id, request.quote_asset_id, request.date, request.price
    )
    return PriceResponse.model_validate(price)


@router.get("/supported-tickers", response_model=dict[str, str])
def supported_tickers(
    user_id: str = Depends(get_current_user),
    service: PriceService = Depends(get_price_service),
):
    """External tickers the price provider can fill in."""
    return service.supported_tickers()


@router.post("/generate", response_model=list[PriceResponse])
def generate_prices(
    request: GeneratePricesRequest,
    user_id: str = Depends(get_current_user),
    service: PriceService = Depends(get_price_service),
):
    """Fill a date range with prices from the external provider."""
    prices = service.generate_prices(
        user_id,
        request.asset_id,
        request.quote_asset_id,
        request.from_date,
        request.to_date,
        frequency=request.frequency,
        override_existing=request.override_existing,
    )
    return [PriceResponse.model_validate(p) for p in prices]


@router.delete("/{price_id}", status_code=204)
def delete_price(
    price_id: str,
    user_id: str = Depends(get_current_user),
    service: PriceService = Depends(get_price_service),
):
    service.delete_price(user_id, price_id)

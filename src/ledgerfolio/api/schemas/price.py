"""Pydantic schemas for price endpoints."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from ledgerfolio.domain.models import PriceFrequency


class PriceRequest(BaseModel):
    """Request schema for setting a price."""

    asset_id: str
    quote_asset_id: str
    date: date
    price: Decimal = Field(..., gt=0)


class GeneratePricesRequest(BaseModel):
    """Request schema for filling a date range from the external provider."""

    asset_id: str
    quote_asset_id: str
    from_date: date
    to_date: date
    frequency: PriceFrequency = PriceFrequency.ALL
    override_existing: bool = False


class PriceResponse(BaseModel):
    """Response schema for a single price."""

    model_config = {"from_attributes": True}

    id: str
    asset_id: str
    quote_asset_id: str
    date: date
    price: Decimal
    is_auto_generated: bool

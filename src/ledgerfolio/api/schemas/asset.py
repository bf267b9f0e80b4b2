"""Pydantic schemas for asset endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AssetCreateRequest(BaseModel):
    """Request schema for creating an asset."""

    ticker: str = Field(..., min_length=1, max_length=10)
    name: str = Field(..., min_length=1, max_length=50)
    symbol: Optional[str] = Field(default=None, max_length=10)
    precision: int = Field(default=0, ge=0, le=20, description="Decimal places allowed in amounts")
    price_precision: int = Field(default=0, ge=0, le=20, description="Decimal places allowed in prices")
    is_currency: bool = False
    external_ticker: Optional[str] = Field(default=None, max_length=20)


class AssetUpdateRequest(BaseModel):
    """Request schema for updating an asset (partial update)."""

    ticker: Optional[str] = Field(default=None, min_length=1, max_length=10)
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    symbol: Optional[str] = Field(default=None, max_length=10)
    precision: Optional[int] = Field(default=None, ge=0, le=20)
    price_precision: Optional[int] = Field(default=None, ge=0, le=20)
    is_currency: Optional[bool] = None
    external_ticker: Optional[str] = Field(default=None, max_length=20)


class AssetResponse(BaseModel):
    """Response schema for a single asset."""

    model_config = {"from_attributes": True}

    id: str
    ticker: str
    name: str
    symbol: Optional[str] = None
    precision: int
    price_precision: int
    is_currency: bool
    external_ticker: Optional[str] = None
    created_at: Optional[datetime] = None


class AccountingCurrencyRequest(BaseModel):
    asset_id: Optional[str] = None


class AccountingCurrencyResponse(BaseModel):
    model_config = {"from_attributes": True}

    asset_id: Optional[str] = None

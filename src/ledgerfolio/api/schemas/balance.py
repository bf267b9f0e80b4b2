"""Pydantic schemas for balance endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class BalanceResponse(BaseModel):
    """Response schema for one cached (account, asset) balance."""

    model_config = {"from_attributes": True}

    portfolio_account_id: str
    asset_id: str
    balance: Decimal
    updated_at: Optional[datetime] = None


class BalanceListResponse(BaseModel):
    balances: list[BalanceResponse]
    count: int

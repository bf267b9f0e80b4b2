"""Pydantic schemas for portfolio account endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PortfolioAccountCreate(BaseModel):
    """Request schema for creating a portfolio account."""

    name: str = Field(..., min_length=1, max_length=50, description="Unique account name")


class PortfolioAccountUpdate(BaseModel):
    """Request schema for renaming or reordering an account (partial update)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    order: Optional[int] = Field(default=None, ge=0)


class PortfolioAccountOrder(BaseModel):
    """Request schema for reordering accounts."""

    account_ids: list[str] = Field(..., description="Account IDs in display order")


class PortfolioAccountResponse(BaseModel):
    """Response schema for a single portfolio account."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    order: int
    created_at: Optional[datetime] = None


class DeletedResponse(BaseModel):
    """Response schema for deletions that also removed transactions."""

    removed_transaction_ids: list[str]

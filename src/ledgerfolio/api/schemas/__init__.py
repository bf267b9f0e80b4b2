"""API request/response schemas."""

from ledgerfolio.api.schemas.common import ErrorResponse, field_error_body
from ledgerfolio.api.schemas.account import (
    PortfolioAccountCreate,
    PortfolioAccountUpdate,
    PortfolioAccountOrder,
    PortfolioAccountResponse,
    DeletedResponse,
)
from ledgerfolio.api.schemas.asset import (
    AssetCreateRequest,
    AssetUpdateRequest,
    AssetResponse,
    AccountingCurrencyRequest,
    AccountingCurrencyResponse,
)
from ledgerfolio.api.schemas.transaction import (
    CapitalRequest,
    IncomeRequest,
    TransferRequest,
    TradeRequest,
    EntryResponse,
    TransactionResponse,
    TransactionListResponse,
    AuditTrailLineResponse,
)
from ledgerfolio.api.schemas.balance import BalanceResponse, BalanceListResponse
from ledgerfolio.api.schemas.price import PriceRequest, GeneratePricesRequest, PriceResponse

__all__ = [
    "ErrorResponse",
    "field_error_body",
    "PortfolioAccountCreate",
    "PortfolioAccountUpdate",
    "PortfolioAccountOrder",
    "PortfolioAccountResponse",
    "DeletedResponse",
    "AssetCreateRequest",
    "AssetUpdateRequest",
    "AssetResponse",
    "AccountingCurrencyRequest",
    "AccountingCurrencyResponse",
    "CapitalRequest",
    "IncomeRequest",
    "TransferRequest",
    "TradeRequest",
    "EntryResponse",
    "TransactionResponse",
    "TransactionListResponse",
    "AuditTrailLineResponse",
    "BalanceResponse",
    "BalanceListResponse",
    "PriceRequest",
    "GeneratePricesRequest",
    "PriceResponse",
]

"""API routers package."""

from ledgerfolio.api.routers.accounts import router as accounts_router
from ledgerfolio.api.routers.assets import router as assets_router
from ledgerfolio.api.routers.transactions import router as transactions_router
from ledgerfolio.api.routers.balances import router as balances_router
from ledgerfolio.api.routers.prices import router as prices_router

__all__ = [
    "accounts_router",
    "assets_router",
    "transactions_router",
    "balances_router",
    "prices_router",
]

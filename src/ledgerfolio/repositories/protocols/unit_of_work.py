"""Unit of work protocol."""

from typing import Protocol

from ledgerfolio.repositories.protocols.portfolio_account_repo import PortfolioAccountRepository
from ledgerfolio.repositories.protocols.asset_repo import AssetRepository
from ledgerfolio.repositories.protocols.ledger_repo import LedgerRepository, EntryRepository
from ledgerfolio.repositories.protocols.transaction_repo import TransactionRepository
from ledgerfolio.repositories.protocols.balance_repo import BalanceRepository
from ledgerfolio.repositories.protocols.price_repo import PriceRepository


class UnitOfWork(Protocol):
    """
    One atomic commit spanning every repository.

    ``with uow:`` commits when the block exits normally and rolls back
    everything written inside it when the block raises.
    """

    accounts: PortfolioAccountRepository
    assets: AssetRepository
    ledgers: LedgerRepository
    entries: EntryRepository
    transactions: TransactionRepository
    balances: BalanceRepository
    prices: PriceRepository

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

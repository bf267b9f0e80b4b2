"""Ledgerfolio - double-entry ledger engine for a personal portfolio tracker."""

__version__ = "0.1.0"

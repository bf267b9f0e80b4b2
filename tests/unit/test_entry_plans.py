"""
Unit tests for entry plans (sign tables).

Tests cover:
- Every composer's plan sums to zero
- Signs for contributions, drawings, income, transfers and trades
- Fee lines and fee-inclusive transfers
- Unbalanced plans are rejected
"""

from datetime import date
from decimal import Decimal

import pytest

from ledgerfolio.core.exceptions import UnbalancedEntriesError
from ledgerfolio.domain.models import LedgerType, TransactionKind
from ledgerfolio.services.entry_plans import (
    CapitalInput,
    IncomeInput,
    PlanLine,
    TradeInput,
    TransferInput,
    build_plan,
    check_balanced,
    transfer_net_amount,
)

D = Decimal
DAY = date(2024, 1, 15)


def amounts(lines: list[PlanLine]) -> dict[str, Decimal]:
    return {line.role: line.amount for line in lines}


def total(lines: list[PlanLine]) -> Decimal:
    return sum((line.amount for line in lines), D("0"))


# =============================================================================
# CAPITAL
# =============================================================================


class TestCapitalPlan:
    """Tests for contribution and drawing plans."""

    def test_contribution_without_fee(self):
        """
        GIVEN a contribution of 100.00 with no fee
        WHEN I build the plan
        THEN asset is +100.00 and capital is -100.00
        """
        kind, lines = build_plan(CapitalInput("Deposit", DAY, "acc", "usd", D("100.00")))

        assert kind == TransactionKind.CAPITAL
        assert amounts(lines) == {"asset": D("100.00"), "capital": D("-100.00")}
        assert [l.ledger_type for l in lines] == [LedgerType.ASSET, LedgerType.CAPITAL]

    def test_drawing_flips_signs(self):
        """
        GIVEN a drawing of 40
        WHEN I build the plan
        THEN asset is -40 and capital is +40
        """
        _, lines = build_plan(
            CapitalInput("Withdraw", DAY, "acc", "usd", D("40"), capital_type="drawing")
        )

        assert amounts(lines) == {"asset": D("-40"), "capital": D("40")}

    def test_fee_adds_asset_and_income_lines(self):
        """
        GIVEN a contribution with a 1.50 fee
        WHEN I build the plan
        THEN a fee asset line of -1.50 and fee income line of +1.50 are added
        """
        _, lines = build_plan(CapitalInput("Deposit", DAY, "acc", "usd", D("100"), fee=D("1.50")))

        by_role = {l.role: l for l in lines}
        assert by_role["fee_asset"].amount == D("-1.50")
        assert by_role["fee_asset"].ledger_type == LedgerType.ASSET
        assert by_role["fee_income"].amount == D("1.50")
        assert by_role["fee_income"].ledger_type == LedgerType.INCOME
        assert total(lines) == 0


# =============================================================================
# INCOME
# =============================================================================


class TestIncomePlan:
    """Tests for income and expense plans."""

    def test_income(self):
        kind, lines = build_plan(IncomeInput("Dividend", DAY, "acc", "usd", D("12.34")))

        assert kind == TransactionKind.INCOME
        assert amounts(lines) == {"asset": D("12.34"), "income": D("-12.34")}

    def test_negative_amount_books_an_expense(self):
        """
        GIVEN an income input with a negated amount
        WHEN I build the plan
        THEN asset decreases and income increases
        """
        _, lines = build_plan(IncomeInput("Fees", DAY, "acc", "usd", D("-5")))

        assert amounts(lines) == {"asset": D("-5"), "income": D("5")}


# =============================================================================
# TRANSFER
# =============================================================================


class TestTransferPlan:
    """Tests for transfer plans."""

    def test_fee_inclusive_transfer(self):
        """
        GIVEN a 50.00 transfer from A to B with a 1.00 fee included
        WHEN I build the plan
        THEN source is -50/+50, target +49/-49 and fee -1/+1 on A
        """
        data = TransferInput("Move", DAY, "A", "B", "usd", D("50.00"), fee=D("1.00"), fee_inclusive=True)

        kind, lines = build_plan(data)

        assert kind == TransactionKind.TRANSFER
        assert amounts(lines) == {
            "source_asset": D("-50.00"),
            "source_capital": D("50.00"),
            "target_asset": D("49.00"),
            "target_capital": D("-49.00"),
            "fee_asset": D("-1.00"),
            "fee_income": D("1.00"),
        }
        fee_accounts = {l.portfolio_account_id for l in lines if l.role.startswith("fee")}
        assert fee_accounts == {"A"}
        assert total(lines) == 0

    def test_fee_exclusive_transfer_delivers_full_amount(self):
        data = TransferInput("Move", DAY, "A", "B", "usd", D("50.00"), fee=D("1.00"))

        assert transfer_net_amount(data) == D("50.00")
        _, lines = build_plan(data)
        assert amounts(lines)["target_asset"] == D("50.00")
        assert total(lines) == 0

    def test_transfer_without_fee_has_four_lines(self):
        _, lines = build_plan(TransferInput("Move", DAY, "A", "B", "usd", D("10")))

        assert len(lines) == 4


# =============================================================================
# TRADE
# =============================================================================


class TestTradePlan:
    """Tests for trade plans."""

    def test_buy(self):
        """
        GIVEN 1 BTC bought for 20000 USD
        WHEN I build the plan
        THEN base is +1/-1 and quote is -20000/+20000
        """
        data = TradeInput("Buy BTC", DAY, "acc", "btc", "usd", D("1"), D("20000"))

        kind, lines = build_plan(data)

        assert kind == TransactionKind.TRADE
        assert amounts(lines) == {
            "base_asset": D("1"),
            "base_income": D("-1"),
            "quote_asset": D("-20000"),
            "quote_income": D("20000"),
        }

    def test_sell_flips_every_sign(self):
        data = TradeInput("Sell BTC", DAY, "acc", "btc", "usd", D("0.5"), D("11000"), trade_type="sell")

        _, lines = build_plan(data)

        assert amounts(lines) == {
            "base_asset": D("-0.5"),
            "base_income": D("0.5"),
            "quote_asset": D("11000"),
            "quote_income": D("-11000"),
        }

    @pytest.mark.parametrize("fee_asset,expected_asset", [("base", "btc"), ("quote", "usd")])
    def test_fee_booked_in_chosen_asset(self, fee_asset, expected_asset):
        data = TradeInput(
            "Buy BTC", DAY, "acc", "btc", "usd", D("1"), D("20000"),
            fee=D("0.001"), fee_asset=fee_asset,
        )

        _, lines = build_plan(data)

        fee_lines = [l for l in lines if l.role.startswith("fee")]
        assert {l.asset_id for l in fee_lines} == {expected_asset}
        assert total(lines) == 0


# =============================================================================
# BALANCE CHECK
# =============================================================================


class TestCheckBalanced:
    """Tests for the zero-sum guard."""

    def test_balanced_plan_passes(self):
        _, lines = build_plan(CapitalInput("Deposit", DAY, "acc", "usd", D("1")))

        check_balanced(TransactionKind.CAPITAL, lines)

    def test_unbalanced_plan_raises(self):
        """
        GIVEN a plan whose amounts do not cancel out
        WHEN I check it
        THEN UnbalancedEntriesError is raised with the offending sum
        """
        lines = [
            PlanLine("asset", "acc", "usd", LedgerType.ASSET, D("100")),
            PlanLine("capital", "acc", "usd", LedgerType.CAPITAL, D("-99.99")),
        ]

        with pytest.raises(UnbalancedEntriesError) as exc_info:
            check_balanced(TransactionKind.CAPITAL, lines)

        assert "0.01" in exc_info.value.message

    def test_large_values_sum_exactly(self):
        """
        GIVEN amounts with 80 integer digits and 20 decimal places
        WHEN I check the plan
        THEN no rounding breaks the zero sum
        """
        big = D("9" * 79 + "." + "1" * 20)
        _, lines = build_plan(CapitalInput("Deposit", DAY, "acc", "usd", big, fee=D("0." + "0" * 19 + "1")))

        check_balanced(TransactionKind.CAPITAL, lines)

    def test_unknown_input_type_rejected(self):
        with pytest.raises(TypeError):
            build_plan(object())

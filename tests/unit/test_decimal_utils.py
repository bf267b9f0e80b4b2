"""
Unit tests for exact decimal helpers.
"""

from decimal import Decimal

import pytest

from ledgerfolio.core.decimal_utils import (
    check_precision,
    decimal_places,
    exact_sum,
    format_decimal,
    to_decimal,
)
from ledgerfolio.core.exceptions import PrecisionError, ValidationError


class TestToDecimal:
    """Tests for to_decimal."""

    def test_parses_strings(self):
        assert to_decimal(" 1.235 ") == Decimal("1.235")

    def test_accepts_ints_and_decimals(self):
        assert to_decimal(7) == Decimal("7")
        assert to_decimal(Decimal("0.1")) == Decimal("0.1")

    @pytest.mark.parametrize("value", [0.1, True])
    def test_rejects_floats_and_bools(self, value):
        with pytest.raises(ValidationError):
            to_decimal(value)

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            to_decimal(value)


class TestCheckPrecision:
    """Tests for precision enforcement."""

    def test_rejects_too_many_places(self):
        """
        GIVEN an asset with precision 2
        WHEN 1.235 is checked
        THEN it is rejected, never rounded
        """
        with pytest.raises(PrecisionError) as exc_info:
            check_precision(Decimal("1.235"), 2)

        assert exc_info.value.code == "PRECISION_ERROR"
        assert exc_info.value.field == "amount"

    def test_trailing_zeros_do_not_count(self):
        assert check_precision(Decimal("1.2300"), 2) == Decimal("1.23")

    def test_quantizes_to_canonical_places(self):
        assert format_decimal(check_precision(Decimal("100"), 2)) == "100.00"

    def test_zero_precision_accepts_integers_only(self):
        assert check_precision(Decimal("5"), 0) == Decimal("5")
        with pytest.raises(PrecisionError):
            check_precision(Decimal("5.5"), 0)

    def test_rejects_values_too_large_to_store(self):
        with pytest.raises(ValidationError):
            check_precision(Decimal("1" + "0" * 80), 0)


class TestHelpers:
    def test_decimal_places(self):
        assert decimal_places(Decimal("0")) == 0
        assert decimal_places(Decimal("1E+3")) == 0
        assert decimal_places(Decimal("0.125")) == 3

    def test_exact_sum_keeps_every_digit(self):
        values = [Decimal("1" * 60 + ".1"), Decimal("-" + "1" * 60), Decimal("0.00000000000000000001")]

        assert exact_sum(values) == Decimal("0.10000000000000000001")

    def test_format_decimal_avoids_exponents(self):
        assert format_decimal(Decimal("1E-7")) == "0.0000001"

"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(9.99).amount == Decimal("9.99")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * True

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_rounded_quantizes_to_cents(self):
        assert Money.of("10.004").rounded == Decimal("10.00")
        assert Money.of("10.006").rounded == Decimal("10.01")
        assert Money.of("3").rounded == Decimal("3.00")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN", "sNaN"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal(raw))

    def test_of_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            Money.of("Infinity")

    def test_huge_amount_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            Money.of("1E+30")

    def test_large_amount_still_rounds(self):
        assert Money.of("99999999999999.999").rounded == Decimal("100000000000000.00")

    def test_zero(self):
        assert Money.zero() == Money.of("0.00")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"

"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_rejects_infinity(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("Infinity")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_can_go_negative(self):
        result = Money.of("5") - Money.of("10")
        assert result == Money.of("-5")
        assert result.is_negative

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_total_of_empty_is_zero(self):
        assert Money.total([]) == Money.zero()

    def test_total_sums_values(self):
        assert Money.total([Money.of("1.10"), Money.of("2.20")]) == Money.of("3.30")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("1390")) == "1,390.00"
        assert str(Money.of("-9.5")) == "-9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10.00")
        assert Money.of("10") <= Money.of("10")

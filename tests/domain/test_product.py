"""Unit tests for the Product aggregate."""

import pytest

from pos.domain.exceptions import InvariantViolation, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductCreate:

    def test_trims_code_and_name(self):
        p = Product.create("1", "  MT-001 ", " Water ", Money.of("10"), Money.of("8"), 3)
        assert p.code == "MT-001"
        assert p.name == "Water"

    @pytest.mark.parametrize("code", ["", "   "])
    def test_code_required(self, code):
        with pytest.raises(ValidationError, match="code is required"):
            Product.create("1", code, "Water", Money.of("10"), Money.of("8"))

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("1", "MT-001", " ", Money.of("10"), Money.of("8"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="price cannot be negative"):
            Product.create("1", "MT-001", "Water", Money.of("-1"), Money.of("8"))

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError, match="cost price cannot be negative"):
            Product.create("1", "MT-001", "Water", Money.of("1"), Money.of("-8"))

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            Product.create("1", "MT-001", "Water", Money.of("1"), Money.of("1"), -1)


class TestProductStock:

    def test_add_stock_returns_new_product(self):
        p = make_product(stock=5)
        restocked = p.with_stock_added(3)
        assert restocked.stock == 8
        assert p.stock == 5

    @pytest.mark.parametrize("qty", [0, -2])
    def test_add_stock_requires_positive_quantity(self, qty):
        with pytest.raises(ValidationError, match="positive integer"):
            make_product().with_stock_added(qty)

    def test_deduct_to_zero(self):
        assert make_product(stock=5).with_stock_deducted(5).stock == 0

    def test_underflow_is_an_invariant_violation(self):
        with pytest.raises(InvariantViolation, match="Stock underflow"):
            make_product(stock=2).with_stock_deducted(3)

    def test_matches_code_ignores_case(self):
        assert make_product(code="MT-001").matches_code("mt-001")
        assert not make_product(code="MT-001").matches_code("MT-002")

    def test_unit_profit(self):
        assert make_product(price="130", cost_price="110").unit_profit == Money.of("20")

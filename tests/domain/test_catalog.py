"""Unit tests for the Catalog aggregate."""

import pytest

from pos.domain.exceptions import (
    DuplicateCodeError,
    EntityNotFoundError,
    InvariantViolation,
    ValidationError,
)
from pos.domain.model.catalog import Catalog
from pos.domain.model.value_objects import Money
from tests.fakes import make_product


def _catalog() -> Catalog:
    return Catalog.of([
        make_product("1", "MT-001", "Mineral Water", stock=5),
        make_product("2", "CK-002", "Cola", price="15", cost_price="9", stock=60),
    ])


class TestCatalogAdd:

    def test_assigns_next_numeric_id(self):
        catalog, product = _catalog().add("RC-003", "Rice", Money.of("5"), Money.of("3"), 200)
        assert product.id == "3"
        assert len(catalog) == 3

    def test_first_product_gets_id_1(self):
        _, product = Catalog().add("RC-003", "Rice", Money.of("5"), Money.of("3"))
        assert product.id == "1"

    def test_original_catalog_untouched(self):
        original = _catalog()
        original.add("RC-003", "Rice", Money.of("5"), Money.of("3"))
        assert len(original) == 2

    def test_duplicate_code_rejected_case_insensitively(self):
        with pytest.raises(DuplicateCodeError) as exc_info:
            _catalog().add("mt-001", "Other", Money.of("1"), Money.of("1"))
        assert exc_info.value.field == "code"
        assert isinstance(exc_info.value, ValidationError)


class TestCatalogEdit:

    def test_edit_keeps_unspecified_fields(self):
        catalog, edited = _catalog().edit("1", price=Money.of("140"))
        assert edited.price == Money.of("140")
        assert edited.code == "MT-001"
        assert catalog.get("1").price == Money.of("140")

    def test_own_code_is_not_a_collision(self):
        _, edited = _catalog().edit("1", code="mt-001")
        assert edited.code == "mt-001"

    def test_collision_with_other_product_rejected(self):
        with pytest.raises(DuplicateCodeError):
            _catalog().edit("1", code="CK-002")

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            _catalog().edit("99", name="Nope")


class TestCatalogRemoveAndStock:

    def test_remove(self):
        catalog, removed = _catalog().remove("1")
        assert removed.code == "MT-001"
        assert catalog.get("1") is None

    def test_remove_unknown(self):
        with pytest.raises(EntityNotFoundError):
            _catalog().remove("99")

    def test_add_stock(self):
        catalog, product = _catalog().add_stock("1", 10)
        assert product.stock == 15
        assert catalog.stock_of("1") == 15

    def test_deduct_skips_missing_products(self):
        catalog = _catalog().deduct([("1", 2), ("gone", 4)])
        assert catalog.stock_of("1") == 3
        assert catalog.stock_of("2") == 60

    def test_deduct_keeps_order(self):
        catalog = _catalog().deduct([("2", 1), ("1", 1)])
        assert [p.id for p in catalog] == ["1", "2"]

    def test_deduct_underflow_raises(self):
        with pytest.raises(InvariantViolation):
            _catalog().deduct([("1", 6)])


class TestCatalogQueries:

    def test_find_by_code_case_insensitive(self):
        assert _catalog().find_by_code("ck-002").id == "2"

    def test_find_by_code_blank(self):
        assert _catalog().find_by_code("") is None

    def test_search_by_name_or_code(self):
        assert [p.id for p in _catalog().search("water")] == ["1"]
        assert [p.id for p in _catalog().search("ck")] == ["2"]

    def test_search_empty_term_returns_all(self):
        assert len(_catalog().search("")) == 2

    def test_stock_of_missing_is_zero(self):
        assert _catalog().stock_of("99") == 0

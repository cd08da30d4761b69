"""Tests for product filter composition."""

import pytest

from catalog.core.errors import ValidationError
from catalog.services.filters import ProductFilter
from catalog.services.products import list_products


def names(session, **kwargs):
    return [p.name for p in list_products(session, ProductFilter(**kwargs))]


class TestFilterComposition:
    def test_no_filters_returns_all_products(self, session, catalog_data):
        assert names(session) == ["T-Shirt", "Hoodie", "Headphones"]

    def test_search_is_case_insensitive_substring(self, session, catalog_data):
        assert names(session, search="SHIRT") == ["T-Shirt"]
        assert names(session, search="h") == ["T-Shirt", "Hoodie", "Headphones"]

    def test_search_treats_wildcards_literally(self, session, catalog_data):
        assert names(session, search="%") == []

    def test_search_whitespace_is_significant(self, session, catalog_data):
        assert names(session, search=" shirt") == []
        assert names(session, search="-shirt") == ["T-Shirt"]

    def test_price_range_is_inclusive(self, session, catalog_data):
        assert names(session, price_from=20, price_to=50) == ["Hoodie"]
        assert names(session, price_from=39.99, price_to=39.99) == ["Hoodie"]

    def test_category_filter(self, session, catalog_data):
        assert names(session, category_id=catalog_data["electronics"]) == ["Headphones"]

    def test_attribute_names_require_every_name(self, session, catalog_data):
        assert names(session, attribute_names=frozenset({"Size"})) == ["T-Shirt", "Hoodie"]
        assert names(session, attribute_names=frozenset({"Size", "Color"})) == ["T-Shirt"]
        assert names(session, attribute_names=frozenset({"Size", "Sale"})) == []

    def test_all_filters_combined_with_and(self, session, catalog_data):
        matching = dict(
            search="shirt",
            price_from=10,
            price_to=20,
            category_id=catalog_data["clothing"],
            attribute_names=frozenset({"Color"}),
        )
        assert names(session, **matching) == ["T-Shirt"]

        for key, value in [
            ("search", "hood"),
            ("price_from", 25),
            ("price_to", 15),
            ("category_id", catalog_data["electronics"]),
            ("attribute_names", frozenset({"Sale"})),
        ]:
            assert names(session, **{**matching, key: value}) == []

    def test_sort_by_price_descending(self, session, catalog_data):
        assert names(session, sort="price", order="desc") == ["Headphones", "Hoodie", "T-Shirt"]

    def test_sort_by_name_ascending(self, session, catalog_data):
        assert names(session, sort="name") == ["Headphones", "Hoodie", "T-Shirt"]


class TestFromQuery:
    def test_blank_values_are_absent(self):
        filters = ProductFilter.from_query(
            search="", sort="", order="", price_from="", price_to=" ", category_id="", attribute_names=""
        )
        assert filters == ProductFilter()

    def test_parses_numbers_and_names(self):
        filters = ProductFilter.from_query(
            price_from="20", price_to="50.5", category_id="3", attribute_names="Size, Color,,"
        )
        assert filters.price_from == 20.0
        assert filters.price_to == 50.5
        assert filters.category_id == 3
        assert filters.attribute_names == frozenset({"Size", "Color"})

    def test_search_term_is_kept_as_sent(self):
        assert ProductFilter.from_query(search=" shirt").search == " shirt"
        assert ProductFilter.from_query(search="   ").search is None

    def test_order_defaults_to_ascending(self):
        assert ProductFilter.from_query(sort="price").order == "asc"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"price_from": "cheap"},
            {"category_id": "1.5"},
            {"sort": "description"},
            {"sort": "name", "order": "sideways"},
            {"price_from": "nan"},
            {"price_to": "inf"},
            {"price_from": "-Infinity"},
            {"category_id": "99999999999999999999"},
            {"category_id": "0"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValidationError):
            ProductFilter.from_query(**kwargs)

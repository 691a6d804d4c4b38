"""
Unit tests for the customer query pipeline.

Tests cover:
- Query parsing and defaults
- Search filtering
- Stable sorting with null handling
- Page slicing and metadata
"""
from datetime import datetime, timezone

import pytest

from app.crm.modules.customers.models import Customer, CustomSize, Order, OrderItem
from app.crm.modules.customers.service import (
    CustomerQuery,
    filter_customers,
    paginate,
    parse_customer_query,
    query_customers,
    sort_customers,
)
from app.crm.store import CustomerStore
from app.crm.utils import iso_timestamp


def _customer(cid, name, email="x@example.com", revenue=None, last_day=None):
    orders = []
    if revenue is not None:
        item = OrderItem(f"{cid}-i", "Custom Silk Shirt", "Shirts", revenue, CustomSize(40, 32, 38))
        orders.append(Order(f"{cid}-o", datetime(2024, 2, last_day or 1, tzinfo=timezone.utc), [item]))
    return Customer(cid, name, email, "active", datetime(2023, 1, 1, tzinfo=timezone.utc), orders)


class TestParseCustomerQuery:
    """Tests for parse_customer_query()"""

    def test_defaults(self):
        q = parse_customer_query({})
        assert q == CustomerQuery(search="", sort_by=None, order="asc", page=1, limit=10)

    def test_reads_all_params(self):
        q = parse_customer_query({"page": "3", "limit": "25", "sortBy": "revenue", "order": "desc", "search": "ann"})
        assert q == CustomerQuery(search="ann", sort_by="revenue", order="desc", page=3, limit=25)

    def test_search_is_passed_through_untrimmed(self):
        assert parse_customer_query({"search": " smith"}).search == " smith"

    def test_unknown_sort_and_order_fall_back(self):
        q = parse_customer_query({"sortBy": "__class__", "order": "sideways"})
        assert q.sort_by is None
        assert q.order == "asc"

    def test_order_is_case_insensitive(self):
        assert parse_customer_query({"order": "DESC"}).order == "desc"

    def test_empty_pagination_uses_defaults(self):
        q = parse_customer_query({"page": "", "limit": ""})
        assert (q.page, q.limit) == (1, 10)

    @pytest.mark.parametrize("args", [{"page": "0"}, {"limit": "0"}, {"page": "-3"}, {"limit": "ten"}])
    def test_invalid_pagination_raises(self, args):
        with pytest.raises(ValueError, match="positive integers"):
            parse_customer_query(args)


class TestFilterCustomers:
    """Tests for filter_customers()"""

    def test_matches_name_or_email(self):
        people = [
            _customer("a", "John Smith", "john@example.com"),
            _customer("b", "Ann Lee", "asmith@x.com"),
            _customer("c", "Bob Jones", "bob@example.com"),
        ]
        assert [c.id for c in filter_customers(people, "smith")] == ["a", "b"]
        assert [c.id for c in filter_customers(people, "SmItH")] == ["a", "b"]

    def test_empty_search_matches_all(self):
        people = [_customer("a", "A"), _customer("b", "B")]
        assert filter_customers(people, "") == people
        assert filter_customers(people, None) == people


class TestSortCustomers:
    """Tests for sort_customers()"""

    def test_no_sort_field_keeps_order(self):
        people = [_customer("b", "B"), _customer("a", "A")]
        assert [c.id for c in sort_customers(people, None)] == ["b", "a"]
        assert [c.id for c in sort_customers(people, "bogus", "desc")] == ["b", "a"]

    def test_ties_keep_relative_order_both_directions(self):
        people = [
            _customer("a", "A", revenue=300),
            _customer("b", "B", revenue=500),
            _customer("c", "C", revenue=300),
            _customer("d", "D", revenue=500),
        ]
        assert [c.id for c in sort_customers(people, "revenue", "asc")] == ["a", "c", "b", "d"]
        assert [c.id for c in sort_customers(people, "revenue", "desc")] == ["b", "d", "a", "c"]

    def test_nulls_last_ascending_first_descending(self):
        people = [
            _customer("none1", "N1"),
            _customer("late", "L", revenue=200, last_day=20),
            _customer("none2", "N2"),
            _customer("early", "E", revenue=200, last_day=2),
        ]
        asc = [c.id for c in sort_customers(people, "lastOrderDate", "asc")]
        desc = [c.id for c in sort_customers(people, "lastOrderDate", "desc")]
        assert asc == ["early", "late", "none1", "none2"]
        assert desc == ["none1", "none2", "late", "early"]

    def test_strings_compare_case_insensitively(self):
        people = [_customer("1", "zed"), _customer("2", "Adam"), _customer("3", "beth")]
        assert [c.name for c in sort_customers(people, "name")] == ["Adam", "beth", "zed"]

    def test_order_count_sort(self):
        people = [_customer("a", "A", revenue=10), _customer("b", "B")]
        assert [c.id for c in sort_customers(people, "orderCount", "asc")] == ["b", "a"]

    def test_does_not_mutate_input(self):
        people = [_customer("b", "B"), _customer("a", "A")]
        sort_customers(people, "name")
        assert [c.id for c in people] == ["b", "a"]


class TestPaginate:
    """Tests for paginate() and query_customers() metadata"""

    def test_slices_window(self):
        people = [_customer(str(i), f"P{i}") for i in range(7)]
        assert [c.id for c in paginate(people, 1, 3)] == ["0", "1", "2"]
        assert [c.id for c in paginate(people, 3, 3)] == ["6"]
        assert paginate(people, 4, 3) == []

    def test_metadata(self):
        people = [_customer(str(i), f"P{i}") for i in range(7)]
        page = query_customers(people, CustomerQuery(page=2, limit=3))
        assert page.total_count == 7
        assert page.total_pages == 3
        assert page.has_next_page is True
        assert page.has_prev_page is True

        last = query_customers(people, CustomerQuery(page=3, limit=3))
        assert last.has_next_page is False

    def test_rejects_non_positive_values(self):
        with pytest.raises(ValueError):
            query_customers([], CustomerQuery(page=0))
        with pytest.raises(ValueError):
            query_customers([], CustomerQuery(limit=0))

    def test_empty_collection(self):
        page = query_customers([], CustomerQuery())
        assert page.customers == []
        assert page.total_pages == 0
        assert page.has_next_page is False
        assert page.has_prev_page is False


class TestCustomerStore:
    def test_lookup_and_len(self):
        store = CustomerStore([_customer("a", "A"), _customer("b", "B")])
        assert len(store) == 2
        assert store.get("b").name == "B"
        assert store.get("zzz") is None
        assert "a" in store

    def test_derived_fields_go_stale_after_mutation(self):
        c = _customer("a", "A", revenue=400, last_day=3)
        c.orders.clear()
        assert c.revenue == 400
        assert c.order_count == 1


def test_iso_timestamp_format():
    dt = datetime(2024, 5, 1, 13, 45, 10, 123456, tzinfo=timezone.utc)
    assert iso_timestamp(dt) == "2024-05-01T13:45:10.123Z"
    assert iso_timestamp(None) is None

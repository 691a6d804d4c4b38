"""
CUSTOMER QUERY PIPELINE
=======================

List requests run three steps over the in-memory snapshot, in this order:

Step      | Input                   | Behavior
----------|-------------------------|-------------------------------------------
filter    | search                  | case-insensitive substring on name OR email
sort      | sortBy, order           | stable; unknown sortBy leaves order as-is
paginate  | page, limit             | slice [(page-1)*limit, page*limit)

The page is then serialized without `orders`; only the aggregate fields
(revenue, orderCount, lastOrderDate) describe order history on the list.

INVARIANTS:
- Null sort values go last when ascending and first when descending
- A page past the end is an empty list, never an error
- Nothing here mutates the store
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from app.crm.constants import DEFAULT_LIMIT, DEFAULT_PAGE, PAGINATION_ERROR
from app.crm.modules.customers.models import Customer, Order
from app.crm.store import CustomerStore
from app.crm.utils import iso_timestamp

SORT_ORDERS = ("asc", "desc")

# API field name -> accessor. Only these keys are sortable.
SORTABLE_FIELDS: dict[str, Callable[[Customer], Any]] = {
    "id": lambda c: c.id,
    "name": lambda c: c.name,
    "email": lambda c: c.email,
    "status": lambda c: c.status,
    "createdAt": lambda c: c.created_at,
    "revenue": lambda c: c.revenue,
    "orderCount": lambda c: c.order_count,
    "lastOrderDate": lambda c: c.last_order_date,
}


@dataclass(frozen=True)
class CustomerQuery:
    search: str = ""
    sort_by: str | None = None
    order: str = "asc"
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass(frozen=True)
class CustomerPage:
    customers: list[Customer]
    current_page: int
    total_pages: int
    total_count: int
    limit: int

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1


def _parse_positive_int(raw: str | None, default: int) -> int:
    raw = (raw or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(PAGINATION_ERROR) from None
    if value < 1:
        raise ValueError(PAGINATION_ERROR)
    return value


def parse_customer_query(args: Mapping[str, str]) -> CustomerQuery:
    """
    Build a query from request args.

    Raises ValueError when page or limit is not a positive integer. Every other
    parameter falls back to its default instead of being rejected.
    """
    page = _parse_positive_int(args.get("page"), DEFAULT_PAGE)
    limit = _parse_positive_int(args.get("limit"), DEFAULT_LIMIT)

    sort_by = (args.get("sortBy") or "").strip()
    order = (args.get("order") or "").strip().lower()
    return CustomerQuery(
        search=args.get("search") or "",
        sort_by=sort_by if sort_by in SORTABLE_FIELDS else None,
        order=order if order in SORT_ORDERS else "asc",
        page=page,
        limit=limit,
    )


def filter_customers(customers: Iterable[Customer], search: str | None) -> list[Customer]:
    if not search:
        return list(customers)
    needle = search.lower()
    return [c for c in customers if needle in c.name.lower() or needle in c.email.lower()]


def sort_customers(customers: Sequence[Customer], sort_by: str | None, order: str = "asc") -> list[Customer]:
    accessor = SORTABLE_FIELDS.get(sort_by or "")
    if accessor is None:
        return list(customers)

    def _key(c: Customer) -> tuple[int, Any]:
        value = accessor(c)
        if value is None:
            # Ranks above every present value; reverse=True moves it to the front.
            return (1, 0)
        if isinstance(value, str):
            value = value.lower()
        return (0, value)

    # sorted() stays stable with reverse=True, so ties keep their input order.
    return sorted(customers, key=_key, reverse=(order == "desc"))


def paginate(items: Sequence[Customer], page: int, limit: int) -> list[Customer]:
    start = (page - 1) * limit
    return list(items[start:start + limit])


def query_customers(customers: Sequence[Customer], query: CustomerQuery) -> CustomerPage:
    if query.page < 1 or query.limit < 1:
        raise ValueError(PAGINATION_ERROR)
    filtered = filter_customers(customers, query.search)
    ordered = sort_customers(filtered, query.sort_by, query.order)
    total_count = len(ordered)
    return CustomerPage(
        customers=paginate(ordered, query.page, query.limit),
        current_page=query.page,
        total_pages=math.ceil(total_count / query.limit),
        total_count=total_count,
        limit=query.limit,
    )


def get_customer_by_id(store: CustomerStore, customer_id: str) -> Customer | None:
    return store.get(customer_id)


# ---------------------------------------------------------------------------
# Serialization (JSON field names are camelCase)
# ---------------------------------------------------------------------------

def customer_summary(c: Customer) -> dict[str, Any]:
    """List representation: aggregate fields only, never `orders`."""
    return {
        "id": c.id,
        "name": c.name,
        "email": c.email,
        "status": c.status,
        "createdAt": iso_timestamp(c.created_at),
        "revenue": c.revenue,
        "orderCount": c.order_count,
        "lastOrderDate": iso_timestamp(c.last_order_date),
    }


def order_detail(o: Order) -> dict[str, Any]:
    return {
        "orderId": o.order_id,
        "orderDate": iso_timestamp(o.order_date),
        "items": [
            {
                "orderItemId": item.order_item_id,
                "itemName": item.item_name,
                "category": item.category,
                "price": item.price,
                "customSize": {
                    "chest": item.custom_size.chest,
                    "waist": item.custom_size.waist,
                    "hips": item.custom_size.hips,
                },
            }
            for item in o.items
        ],
        "totalAmount": o.total_amount,
    }


def customer_page_payload(result: CustomerPage) -> dict[str, Any]:
    return {
        "customers": [customer_summary(c) for c in result.customers],
        "pagination": {
            "currentPage": result.current_page,
            "totalPages": result.total_pages,
            "totalCount": result.total_count,
            "limit": result.limit,
            "hasNextPage": result.has_next_page,
            "hasPrevPage": result.has_prev_page,
        },
    }


def customer_orders_payload(c: Customer) -> dict[str, Any]:
    return {
        "customerId": c.id,
        "customerName": c.name,
        "orders": [order_detail(o) for o in c.orders],
    }

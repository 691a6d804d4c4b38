from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from app.crm.modules.customers.service import (
    customer_orders_payload,
    customer_page_payload,
    get_customer_by_id,
    parse_customer_query,
    query_customers,
)
from app.crm.store import customer_store

bp = Blueprint("customers", __name__)
logger = logging.getLogger(__name__)


@bp.get("/customers")
def customers_list():
    """Paginated, sortable, searchable customer list (orders stripped)."""
    try:
        query = parse_customer_query(request.args)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    result = query_customers(customer_store().customers, query)
    logger.debug(
        "customers_list search=%r sort_by=%s order=%s page=%s limit=%s total=%s",
        query.search, query.sort_by, query.order, query.page, query.limit, result.total_count,
    )
    return jsonify(customer_page_payload(result))


@bp.get("/customers/<customer_id>/orders")
def customer_orders(customer_id: str):
    """Full order history (items + custom sizes) for one customer."""
    c = get_customer_by_id(customer_store(), customer_id)
    if not c:
        return jsonify({"error": "Customer not found"}), 404
    return jsonify(customer_orders_payload(c))

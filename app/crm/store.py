from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from flask import Flask

from app.crm.modules.customers.models import Customer


class CustomerStore:
    """
    Read-only snapshot of every customer, built once at startup.

    Keeps the original ordering for list queries plus an id lookup table for
    order detail.
    """

    def __init__(self, customers: Iterable[Customer]):
        self._customers: tuple[Customer, ...] = tuple(customers)
        self._by_id: Mapping[str, Customer] = MappingProxyType({c.id: c for c in self._customers})

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self._customers

    def get(self, customer_id: str) -> Customer | None:
        return self._by_id.get(customer_id)

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, customer_id: object) -> bool:
        return customer_id in self._by_id


def init_store(app: Flask, store: CustomerStore | None = None) -> CustomerStore:
    if store is None:
        from app.crm.modules.customers.mock_data import generate_customers

        seed = app.config.get("MOCK_SEED")
        store = CustomerStore(generate_customers(app.config["CUSTOMER_COUNT"], seed=seed))
        app.logger.info("Generated %s mock customers (seed=%s)", len(store), seed)
    app.extensions["customer_store"] = store
    return store


def customer_store(app: Flask | None = None) -> CustomerStore:
    """
    Store handle for the current app. Use inside request handlers.
    """
    if app is None:
        from flask import current_app

        app = current_app
    return app.extensions["customer_store"]

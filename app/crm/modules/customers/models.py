from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class CustomSize:
    chest: int
    waist: int
    hips: int


@dataclass
class OrderItem:
    order_item_id: str
    item_name: str
    category: str
    price: int
    custom_size: CustomSize


@dataclass
class Order:
    order_id: str
    order_date: datetime
    items: list[OrderItem] = field(default_factory=list)

    # Computed once from items; not recomputed if items change later.
    total_amount: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_amount = sum(item.price for item in self.items)


@dataclass
class Customer:
    """
    Customer record with its embedded order history.

    revenue, order_count and last_order_date are derived from `orders` at
    construction time only. Mutating `orders` afterwards leaves them stale.
    """

    id: str
    name: str
    email: str
    status: str
    created_at: datetime
    orders: list[Order] = field(default_factory=list)

    revenue: int = field(init=False)
    order_count: int = field(init=False)
    last_order_date: datetime | None = field(init=False)

    def __post_init__(self) -> None:
        self.revenue = sum(o.total_amount for o in self.orders)
        self.order_count = len(self.orders)
        self.last_order_date = max((o.order_date for o in self.orders), default=None)

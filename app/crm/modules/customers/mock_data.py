"""
Synthetic customer data.

Produces tailoring customers with 0-8 orders, each order carrying 1-4 bespoke
items with their own measurements. Pass a seed for reproducible output.
"""

from __future__ import annotations

import calendar
import random
import uuid
from datetime import datetime, timedelta

from app.crm.constants import CUSTOMER_STATUSES, ITEM_NAMES_BY_CATEGORY, ORDER_ITEM_CATEGORIES
from app.crm.modules.customers.models import Customer, CustomSize, Order, OrderItem
from app.crm.utils import utcnow

FIRST_NAMES = (
    "James", "Mary", "Robert", "Patricia", "John", "Jennifer", "Michael", "Linda",
    "David", "Elizabeth", "William", "Barbara", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Charles", "Karen", "Daniel", "Nancy", "Matthew", "Lisa",
    "Anthony", "Betty", "Mark", "Margaret", "Steven", "Sandra", "Paul", "Ashley",
    "Andrew", "Emily", "Joshua", "Donna", "Kenneth", "Michelle", "Kevin", "Carol",
)

LAST_NAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker",
    "Young", "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
)

EMAIL_DOMAINS = ("gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "icloud.com", "proton.me")

# Calendar-month offsets from "now"
CUSTOMER_CREATED_WINDOW = (36, 1)
ORDER_DATE_WINDOW = (24, 0)

MAX_ORDERS_PER_CUSTOMER = 8
MAX_ITEMS_PER_ORDER = 4
PRICE_RANGE = (200, 800)
CHEST_RANGE = (32, 48)
WAIST_RANGE = (28, 42)
HIPS_RANGE = (34, 46)


def generate_customers(count: int = 100, seed: int | None = None, now: datetime | None = None) -> list[Customer]:
    if count < 0:
        raise ValueError("count must be >= 0")
    rng = random.Random(seed)
    now = now or utcnow()
    # Millisecond resolution, matching the serialized timestamps.
    now = now.replace(microsecond=(now.microsecond // 1000) * 1000)
    return [_gen_customer(rng, now) for _ in range(count)]


def _gen_uuid(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def months_before(now: datetime, months: int) -> datetime:
    """Same day-of-month `months` calendar months earlier, clamped to month end."""
    total = now.year * 12 + (now.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def _gen_datetime(rng: random.Random, now: datetime, window_months: tuple[int, int]) -> datetime:
    oldest, newest = window_months
    start = months_before(now, oldest)
    end = months_before(now, newest)
    span_ms = int((end - start).total_seconds() * 1000)
    return start + timedelta(milliseconds=rng.randint(0, span_ms))


def _gen_custom_size(rng: random.Random) -> CustomSize:
    return CustomSize(
        chest=rng.randint(*CHEST_RANGE),
        waist=rng.randint(*WAIST_RANGE),
        hips=rng.randint(*HIPS_RANGE),
    )


def _gen_order_item(rng: random.Random) -> OrderItem:
    category = rng.choice(ORDER_ITEM_CATEGORIES)
    return OrderItem(
        order_item_id=_gen_uuid(rng),
        item_name=rng.choice(ITEM_NAMES_BY_CATEGORY[category]),
        category=category,
        price=rng.randint(*PRICE_RANGE),
        custom_size=_gen_custom_size(rng),
    )


def _gen_order(rng: random.Random, now: datetime) -> Order:
    items = [_gen_order_item(rng) for _ in range(rng.randint(1, MAX_ITEMS_PER_ORDER))]
    return Order(
        order_id=_gen_uuid(rng),
        order_date=_gen_datetime(rng, now, ORDER_DATE_WINDOW),
        items=items,
    )


def _gen_email(rng: random.Random, first: str, last: str) -> str:
    style = rng.randint(0, 3)
    if style == 0:
        local = f"{first}.{last}"
    elif style == 1:
        local = f"{first[0]}{last}"
    elif style == 2:
        local = f"{first}_{last}{rng.randint(1, 99)}"
    else:
        local = f"{last}.{first}{rng.randint(1, 9)}"
    return f"{local}@{rng.choice(EMAIL_DOMAINS)}".lower()


def _gen_customer(rng: random.Random, now: datetime) -> Customer:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    customer_id = _gen_uuid(rng)
    email = _gen_email(rng, first, last)
    status = rng.choice(CUSTOMER_STATUSES)
    created_at = _gen_datetime(rng, now, CUSTOMER_CREATED_WINDOW)
    orders = [_gen_order(rng, now) for _ in range(rng.randint(0, MAX_ORDERS_PER_CUSTOMER))]
    return Customer(
        id=customer_id,
        name=f"{first} {last}",
        email=email,
        status=status,
        created_at=created_at,
        orders=orders,
    )

"""
Central constants for the customer dashboard.
"""
from __future__ import annotations

CUSTOMER_STATUSES = ("active", "churned", "prospect")

ORDER_ITEM_CATEGORIES = ("Jackets", "Trousers", "Dresses", "Shirts", "Blazers", "Coats")

# Category to catalogue item names
ITEM_NAMES_BY_CATEGORY = {
    "Jackets": ("Bespoke Wool Jacket", "Custom Leather Jacket", "Tailored Dinner Jacket"),
    "Trousers": ("Bespoke Wool Trousers", "Custom Linen Trousers", "Tailored Dress Pants"),
    "Dresses": ("Custom Evening Dress", "Bespoke Cocktail Dress", "Tailored Day Dress"),
    "Shirts": ("Bespoke Cotton Shirt", "Custom Silk Shirt", "Tailored Dress Shirt"),
    "Blazers": ("Bespoke Linen Blazer", "Custom Wool Blazer", "Tailored Sport Coat"),
    "Coats": ("Bespoke Overcoat", "Custom Trench Coat", "Tailored Winter Coat"),
}

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
PAGINATION_ERROR = "Page and limit must be positive integers"

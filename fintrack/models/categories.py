"""
Transaction Category Taxonomy

A fixed two-level mapping of category -> ordered sub-categories.

DESIGN DECISION: The taxonomy is a lookup table, not free text. Forms
auto-select the first sub-category when the category changes, so order
matters. The table is checked once at import time.
"""

from types import MappingProxyType


DEFAULT_CATEGORY = "Other"

CATEGORIES = MappingProxyType({
    "Income": ("Salary", "Freelance", "Benefits", "Investment Returns", "Business Income", "Other Income"),
    "Housing": ("Rent", "Mortgage", "Utilities", "Internet", "Council Tax", "Insurance", "Maintenance"),
    "Food": ("Groceries", "Restaurants", "Takeaway", "Coffee", "Alcohol"),
    "Transport": ("Fuel", "Public Transport", "Car Insurance", "Parking", "Uber/Taxi", "Car Maintenance"),
    "Subscriptions": ("Streaming", "Software", "Gym", "Magazines", "Cloud Storage", "Gaming"),
    "Health": ("GP/Doctor", "Dentist", "Pharmacy", "Mental Health", "Optician"),
    "Shopping": ("Clothing", "Electronics", "Home & Garden", "Books", "Gifts"),
    "Entertainment": ("Cinema", "Events", "Holidays", "Hobbies", "Sports"),
    "Finance": ("Savings Transfer", "Investment", "Pension Contribution", "Loan Payment", "Credit Card Payment", "Interest"),
    "Business": ("Office Supplies", "Travel", "Software", "Marketing", "Professional Services", "Equipment", "Client Entertainment"),
    "Other": ("Cash Withdrawal", "Bank Charge", "Unknown"),
})


def _check_taxonomy() -> None:
    for name, subs in CATEGORIES.items():
        if not subs:
            raise ValueError(f"Category {name!r} has no sub-categories")
        if len(set(subs)) != len(subs):
            raise ValueError(f"Category {name!r} has duplicate sub-categories")
    if DEFAULT_CATEGORY not in CATEGORIES:
        raise ValueError(f"Default category {DEFAULT_CATEGORY!r} missing from taxonomy")


_check_taxonomy()


def category_names() -> list[str]:
    return list(CATEGORIES)


def subcategories_for(category: str) -> tuple[str, ...]:
    """Sub-categories of ``category``; empty for an unknown category."""
    return CATEGORIES.get(category, ())


def default_subcategory(category: str) -> str:
    """First sub-category of ``category``, or "" when it has none."""
    subs = subcategories_for(category)
    return subs[0] if subs else ""


def is_valid_pair(category: str, sub_category: str) -> bool:
    return sub_category in subcategories_for(category)

"""Keyword-based expense categorization.

Maps a free-text expense description to one of a fixed set of spending
categories. Matching is a plain case-insensitive substring test against
per-category keyword lists, so every decision can be explained by pointing
at the keyword that fired.

Two entry points are provided:
- categorize_expense: final assignment, always returns exactly one category.
- suggest_categories: up to three ranked candidates for partial input,
  intended for autocomplete while the user is still typing.
"""

from typing import List, Tuple

from models.category import CategoryStyle
from logger import get_logger

logger = get_logger(__name__)

FALLBACK_CATEGORY = "Other"

# Declaration order. Used for listing and as the tie-break in suggestions.
# Keywords may repeat; every occurrence counts toward a suggestion score.
CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "Food & Dining",
        (
            "restaurant", "coffee", "lunch", "dinner", "breakfast", "cafe",
            "starbucks", "mcdonalds", "kfc", "pizza", "burger", "food", "eat",
            "meal", "snack", "restaurant", "diner", "bistro", "bakery", "donut",
            "sandwich", "sushi", "chinese", "italian", "mexican", "thai",
            "indian", "fast food", "takeout",
        ),
    ),
    (
        "Groceries",
        (
            "grocery", "groceries", "supermarket", "walmart", "target",
            "costco", "whole foods", "safeway", "kroger", "publix",
            "trader joes", "market", "vegetables", "fruits", "meat", "dairy",
            "bread", "milk", "eggs", "shopping", "food shopping",
            "weekly shopping",
        ),
    ),
    (
        "Transportation",
        (
            "gas", "gasoline", "fuel", "car", "uber", "lyft", "taxi", "train",
            "bus", "subway", "metro", "parking", "toll", "vehicle",
            "transport", "travel", "commute", "flight", "airline", "airport",
            "rental car", "auto", "motorcycle", "bike repair",
        ),
    ),
    (
        "Entertainment",
        (
            "movie", "cinema", "theater", "concert", "show", "game", "bowling",
            "amusement", "park", "zoo", "museum", "netflix", "spotify",
            "music", "entertainment", "fun", "leisure", "hobby", "sports",
            "gym membership", "streaming", "subscription", "gaming", "books",
            "magazine",
        ),
    ),
    (
        "Shopping",
        (
            "amazon", "clothes", "clothing", "shoes", "shirt", "pants",
            "dress", "store", "mall", "shopping", "purchase", "buy", "bought",
            "retail", "electronics", "phone", "computer", "laptop",
            "accessories", "jewelry", "cosmetics", "makeup", "perfume",
            "home goods", "furniture",
        ),
    ),
    (
        "Utilities",
        (
            "electric", "electricity", "gas bill", "water", "internet",
            "phone bill", "cable", "utility", "utilities", "bill", "power",
            "heating", "cooling", "trash", "garbage", "recycling", "sewer",
            "landline", "mobile bill",
        ),
    ),
    (
        "Healthcare",
        (
            "doctor", "hospital", "pharmacy", "medicine", "prescription",
            "medical", "health", "dental", "dentist", "clinic", "checkup",
            "surgery", "therapy", "insurance", "copay", "medication", "drugs",
            "treatment", "appointment", "urgent care", "emergency room",
            "specialist",
        ),
    ),
    (
        "Other",
        ("miscellaneous", "misc", "other", "various", "random", "unknown"),
    ),
)

# Scan order for categorize_expense: more specific categories first.
# "pharmacy shopping" must land in Healthcare, not Shopping or Groceries.
CATEGORY_PRIORITY: Tuple[str, ...] = (
    "Healthcare",
    "Transportation",
    "Groceries",
    "Food & Dining",
    "Utilities",
    "Entertainment",
    "Shopping",
    "Other",
)

_KEYWORDS_BY_CATEGORY = dict(CATEGORY_KEYWORDS)
_PRIORITIZED_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
    (category, _KEYWORDS_BY_CATEGORY[category]) for category in CATEGORY_PRIORITY
)

CATEGORY_STYLES = {
    "Food & Dining": CategoryStyle("fas fa-utensils", "bg-blue-100", "text-blue-600"),
    "Groceries": CategoryStyle("fas fa-shopping-cart", "bg-green-100", "text-green-600"),
    "Transportation": CategoryStyle("fas fa-car", "bg-red-100", "text-red-600"),
    "Entertainment": CategoryStyle("fas fa-film", "bg-purple-100", "text-purple-600"),
    "Shopping": CategoryStyle("fas fa-shopping-bag", "bg-pink-100", "text-pink-600"),
    "Utilities": CategoryStyle("fas fa-bolt", "bg-yellow-100", "text-yellow-600"),
    "Healthcare": CategoryStyle("fas fa-heartbeat", "bg-indigo-100", "text-indigo-600"),
    "Other": CategoryStyle("fas fa-tag", "bg-gray-100", "text-gray-600"),
}
DEFAULT_STYLE = CategoryStyle("fas fa-receipt", "bg-gray-100", "text-gray-600")


def _normalize(description) -> str:
    if not isinstance(description, str):
        return ""
    return description.lower().strip()


def categorize_expense(description) -> str:
    """Assign a category to an expense description.

    Categories are scanned in CATEGORY_PRIORITY order and, within a
    category, keywords in their listed order. The first keyword found as a
    substring of the lowercased description decides the category.

    Args:
        description: Free-text description. Non-string input is accepted
                     and treated as empty.

    Returns:
        A member of the category set. FALLBACK_CATEGORY when the
        description is empty or nothing matches.
    """
    normalized = _normalize(description)
    if not normalized:
        return FALLBACK_CATEGORY

    for category, keywords in _PRIORITIZED_KEYWORDS:
        for keyword in keywords:
            if keyword in normalized:
                logger.debug(f"Matched keyword '{keyword}' -> {category}")
                return category

    return FALLBACK_CATEGORY


def suggest_categories(description, limit: int = 3) -> List[str]:
    """Suggest likely categories for partial input.

    Each category scores the total length of its keywords found in the
    input, so longer (more specific) matches weigh more. Categories without
    any match are left out.

    Args:
        description: Partial description as typed so far.
        limit: Maximum number of suggestions.

    Returns:
        Category names, highest score first. Equal scores keep declaration
        order. Input shorter than two characters returns every category.
    """
    if not isinstance(description, str) or len(description) < 2:
        return get_all_categories()

    normalized = _normalize(description)
    scored = []
    for category, keywords in CATEGORY_KEYWORDS:
        score = sum(len(keyword) for keyword in keywords if keyword in normalized)
        if score > 0:
            scored.append((category, score))

    # sorted() is stable, so ties stay in declaration order
    scored = sorted(scored, key=lambda item: item[1], reverse=True)
    return [category for category, _ in scored[:limit]]


def get_all_categories() -> List[str]:
    """Get all category names in declaration order."""
    return [category for category, _ in CATEGORY_KEYWORDS]


def is_valid_category(category) -> bool:
    """Check whether a name is one of the known categories (case-sensitive)."""
    return isinstance(category, str) and category in _KEYWORDS_BY_CATEGORY


def get_category_style(category) -> CategoryStyle:
    """Get display metadata for a category, or DEFAULT_STYLE if unknown."""
    if not isinstance(category, str):
        return DEFAULT_STYLE
    return CATEGORY_STYLES.get(category, DEFAULT_STYLE)


def get_category_icon(category) -> str:
    return get_category_style(category).icon


def get_category_color(category) -> str:
    return get_category_style(category).color

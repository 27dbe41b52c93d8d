"""Voice transcript parsing.

Turns a recognized utterance such as "Spent 25 dollars on coffee this
morning" into a candidate expense. Handles phrasings like:
- "Spent 25 dollars on coffee"
- "I paid $30 for gas"
- "Bought lunch for 15 bucks"
- "Coffee was 4.50"

English only, and "$" is the only currency symbol understood.
"""

import re
from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional

from models.expense import ParsedExpense
from logger import get_logger

logger = get_logger(__name__)

MAX_AMOUNT = Decimal("10000")
MAX_DESCRIPTION_LENGTH = 200
FALLBACK_DESCRIPTION = "Expense"

_NUMBER = r"(\d+(?:\.\d{2})?)"

# Tried in order against the lowercased text; first positive amount wins.
_AMOUNT_PATTERNS = (
    re.compile(r"(?:spent|paid|cost|was|for)\s*\$?" + _NUMBER + r"\s*(?:dollars?|bucks?|$)"),
    re.compile(r"\$" + _NUMBER),
    re.compile(_NUMBER + r"\s*(?:dollars?|bucks?)"),
    re.compile(r"(?:spent|paid|cost|was)\s*" + _NUMBER),
)

# Applied in order to the original-case text.
_DESCRIPTION_NOISE = (
    re.compile(r"\b(?:spent|paid|cost|was|for|i|bought|purchase|purchased)\b\s*", re.I),
    re.compile(r"\$?\d+(?:\.\d{2})?(?:\s*(?:dollars?|bucks?)\b)?", re.I),
    re.compile(r"\b(?:on|for)\b\s*", re.I),
    re.compile(r"\bthis\s+(?:morning|afternoon|evening|night)\b", re.I),
    re.compile(r"\b(?:today|yesterday|earlier)\b", re.I),
)
_LEADING_CONNECTOR = re.compile(r"^(?:on|for|at)\s+", re.I)
_AMOUNT_TOKEN = re.compile(r"^\$?\d+")
_STOPWORDS = frozenset(
    ["spent", "paid", "cost", "was", "for", "on", "i", "dollars", "dollar", "bucks", "buck"]
)

# (phrase, hour) checked in order after "yesterday"
_TIME_OF_DAY = (
    ("this morning", 9),
    ("this afternoon", 14),
    ("this evening", 19),
    ("tonight", 19),
)


def parse_voice_input(text, now: Optional[datetime] = None) -> Optional[ParsedExpense]:
    """Parse a voice transcript into a candidate expense.

    Args:
        text: Transcript as returned by speech recognition. Anything that is
              not a non-empty string yields None.
        now: Reference time for date inference. Defaults to datetime.now().

    Returns:
        ParsedExpense, or None when no positive amount could be found.
    """
    if not text or not isinstance(text, str):
        return None

    normalized = text.lower().strip()

    amount = _extract_amount(normalized)
    if amount is None:
        logger.debug(f"No amount found in transcript: {text!r}")
        return None

    description = _extract_description(text)
    date = _infer_date(normalized, now or datetime.now())

    return ParsedExpense(amount=amount, description=description, date=date)


def validate_parsed_expense(expense) -> bool:
    """Check whether a candidate is sane enough to confirm without editing.

    The amount must be a number in (0, 10000) and the description a string
    of 1 to 199 characters. Accepts a ParsedExpense, any object exposing
    amount/description attributes, or a mapping with those keys.

    Returns:
        True if well-formed, False otherwise (never raises).
    """
    if expense is None:
        return False

    if isinstance(expense, Mapping):
        amount = expense.get("amount")
        description = expense.get("description")
    else:
        amount = getattr(expense, "amount", None)
        description = getattr(expense, "description", None)

    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False

    amount = Decimal(amount)
    if not amount.is_finite() or not Decimal("0") < amount < MAX_AMOUNT:
        return False

    return isinstance(description, str) and 0 < len(description) < MAX_DESCRIPTION_LENGTH


def _extract_amount(normalized: str) -> Optional[Decimal]:
    for pattern in _AMOUNT_PATTERNS:
        match = pattern.search(normalized)
        if not match:
            continue
        try:
            amount = Decimal(match.group(1))
        except InvalidOperation:
            continue
        if amount.is_finite() and amount > 0:
            logger.debug(f"Amount {amount} matched by {pattern.pattern!r}")
            return amount
    return None


def _extract_description(text: str) -> str:
    description = text
    for pattern in _DESCRIPTION_NOISE:
        description = pattern.sub("", description)

    description = _LEADING_CONNECTOR.sub("", description.strip())
    description = re.sub(r"\s+", " ", description).strip()

    # Stripping ate everything; rebuild from the words that are left
    if len(description) < 2:
        words = [
            word
            for word in text.split()
            if not _AMOUNT_TOKEN.match(word) and word.lower() not in _STOPWORDS
        ]
        description = " ".join(words).strip()

    if len(description) < 2:
        description = FALLBACK_DESCRIPTION

    return description[0].upper() + description[1:]


def _infer_date(normalized: str, now: datetime) -> datetime:
    if "yesterday" in normalized:
        return now - timedelta(hours=24)

    for phrase, hour in _TIME_OF_DAY:
        if phrase in normalized:
            return now.replace(hour=hour, minute=0, second=0, microsecond=0)

    return now

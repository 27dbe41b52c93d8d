from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from categorization import categorize_expense


@dataclass(frozen=True)
class ParsedExpense:
    """Candidate expense extracted from a spoken utterance.

    Nothing here is confirmed: the user either accepts the candidate or
    corrects it by hand before it becomes an Expense.
    """

    amount: Decimal  # always positive
    description: str
    date: datetime


@dataclass(frozen=True)
class Expense:
    amount: Decimal
    description: str
    category: str
    date: datetime

    @classmethod
    def from_parsed(
        cls, parsed: ParsedExpense, category: Optional[str] = None
    ) -> "Expense":
        """Build a confirmed expense from a parser candidate.

        The description is auto-categorized unless a category is given.
        """
        return cls(
            amount=parsed.amount,
            description=parsed.description,
            category=category or categorize_expense(parsed.description),
            date=parsed.date,
        )

    def to_dict(self) -> dict:
        """Convert expense to the payload the API layer accepts."""
        return {
            "amount": str(self.amount),
            "description": self.description,
            "category": self.category,
            "date": self.date.isoformat(),
        }

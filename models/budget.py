"""Budget and report value objects."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

BUDGET_PERIODS = ("monthly", "yearly")


@dataclass(frozen=True)
class Budget:
    """A spending limit for one category.

    Attributes:
        category: Category the limit applies to.
        amount: Limit for the period.
        period: 'monthly' or 'yearly'.
    """

    category: str
    amount: Decimal
    period: str = "monthly"


@dataclass(frozen=True)
class BudgetProgress:
    budget: Budget
    spent: Decimal
    remaining: Decimal
    percentage: Decimal  # capped at 100
    is_over_budget: bool

    @property
    def over_by(self) -> Decimal:
        """Amount spent beyond the limit, zero when within budget."""
        return max(Decimal("0"), self.spent - self.budget.amount)


@dataclass(frozen=True)
class ExpenseStats:
    """Month-to-date spending summary."""

    monthly_total: Decimal
    daily_average: Decimal
    category_breakdown: List[Tuple[str, Decimal]] = field(default_factory=list)

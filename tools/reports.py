"""Spending report tools."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from models.budget import BUDGET_PERIODS, Budget, BudgetProgress, ExpenseStats
from models.expense import Expense

CENT = Decimal("0.01")
_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)


def period_start(period: str, now: datetime) -> datetime:
    """Get the start of the budget period containing now.

    Args:
        period: 'monthly' or 'yearly'.
        now: Reference time.

    Returns:
        Midnight on the first day of the month (monthly) or year (yearly).

    Raises:
        ValueError: If period is not a known budget period.
    """
    if period == "monthly":
        return now + relativedelta(day=1) + _MIDNIGHT
    if period == "yearly":
        return now + relativedelta(month=1, day=1) + _MIDNIGHT
    raise ValueError(
        f"Unknown budget period: {period} (expected one of {', '.join(BUDGET_PERIODS)})"
    )


def _expenses_between(
    expenses: List[Expense], start: datetime, end: datetime
) -> List[Expense]:
    return [expense for expense in expenses if start <= expense.date <= end]


def expense_stats(
    expenses: List[Expense], now: Optional[datetime] = None
) -> ExpenseStats:
    """Summarize month-to-date spending.

    Args:
        expenses: Expenses to consider; anything dated before the start of
                  the current month is ignored. Later dates count, so an
                  expense logged for "tonight" is included this afternoon.
        now: Reference time. Defaults to datetime.now().

    Returns:
        ExpenseStats with the month total, the average per elapsed day and
        per-category totals, largest first.

    Example:
        ExpenseStats(
            monthly_total=Decimal("120.00"),
            daily_average=Decimal("8.00"),
            category_breakdown=[
                ("Food & Dining", Decimal("80.00")),
                ("Transportation", Decimal("40.00")),
            ],
        )
    """
    now = now or datetime.now()
    start = period_start("monthly", now)
    monthly_expenses = [expense for expense in expenses if expense.date >= start]

    monthly_total = Decimal("0")
    totals: Dict[str, Decimal] = {}
    for expense in monthly_expenses:
        monthly_total += expense.amount
        totals[expense.category] = totals.get(expense.category, Decimal("0")) + expense.amount

    daily_average = (monthly_total / now.day).quantize(CENT, rounding=ROUND_HALF_UP)
    category_breakdown = sorted(totals.items(), key=lambda item: item[1], reverse=True)

    return ExpenseStats(
        monthly_total=monthly_total,
        daily_average=daily_average,
        category_breakdown=category_breakdown,
    )


def budget_progress(
    budget: Budget, expenses: List[Expense], now: Optional[datetime] = None
) -> BudgetProgress:
    """Measure spending against a budget for its current period.

    Args:
        budget: Budget to check.
        expenses: Expenses of any category; only the budget's category
                  within the current period counts.
        now: Reference time. Defaults to datetime.now().

    Returns:
        BudgetProgress. percentage is capped at 100 even when over budget;
        use is_over_budget / over_by for the overspend.
    """
    now = now or datetime.now()
    start = period_start(budget.period, now)

    spent = sum(
        (
            expense.amount
            for expense in _expenses_between(expenses, start, now)
            if expense.category == budget.category
        ),
        Decimal("0"),
    )

    if budget.amount > 0:
        percentage = min(Decimal("100"), spent / budget.amount * 100)
    else:
        percentage = Decimal("0")

    return BudgetProgress(
        budget=budget,
        spent=spent,
        remaining=max(Decimal("0"), budget.amount - spent),
        percentage=percentage.quantize(CENT, rounding=ROUND_HALF_UP),
        is_over_budget=spent > budget.amount,
    )


def format_amount(amount) -> str:
    """Format an amount as US dollars, e.g. '$1,234.50' or '-$5.00'."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"

"""Shared pytest fixtures for all tests."""

import pytest
from datetime import datetime
from decimal import Decimal

from config import Config
from models.expense import Expense


@pytest.fixture
def now():
    """A fixed reference time (Saturday 2025-03-15 16:30:45.123456)."""
    return datetime(2025, 3, 15, 16, 30, 45, 123456)


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "spendnote",
        log_level="DEBUG",
        log_dir=tmp_path / "spendnote" / "logs",
    )


@pytest.fixture
def make_expense():
    """Factory for expenses with sensible defaults."""

    def _make(amount="10.00", category="Food & Dining", date=None, description="Lunch"):
        return Expense(
            amount=Decimal(amount),
            description=description,
            category=category,
            date=date or datetime(2025, 3, 10, 12, 0),
        )

    return _make

#!/usr/bin/env python3

from categorization import (
    categorize_expense,
    get_all_categories,
    get_category_style,
    suggest_categories,
)
from logger import get_logger

logger = get_logger()


def cmd_list(args):
    """List all categories with their display metadata."""
    categories = get_all_categories()

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        style = get_category_style(category)
        logger.info(f"Name: {category}")
        logger.info(f"Icon: {style.icon}")
        logger.info(f"Color: {style.color}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_classify(args):
    """Print the category assigned to a description."""
    description = " ".join(args.description)
    logger.info(categorize_expense(description))


def cmd_suggest(args):
    """Print ranked category suggestions for partial input."""
    description = " ".join(args.description)
    suggestions = suggest_categories(description)

    if not suggestions:
        logger.info("No suggestions.")
        return

    for rank, category in enumerate(suggestions, start=1):
        logger.info(f"{rank}. {category}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Inspect categories",
        description="List categories and categorize expense descriptions",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    # categories classify
    classify_parser = categories_subparsers.add_parser(
        "classify", help="Categorize an expense description"
    )
    classify_parser.add_argument(
        "description", nargs="+", help="Expense description, e.g. coffee at starbucks"
    )
    classify_parser.set_defaults(func=cmd_classify)

    # categories suggest
    suggest_parser = categories_subparsers.add_parser(
        "suggest", help="Suggest categories for partial input"
    )
    suggest_parser.add_argument("description", nargs="+", help="Partial description")
    suggest_parser.set_defaults(func=cmd_suggest)

#!/usr/bin/env python3

import sys
from ingestion import parse_voice_input, validate_parsed_expense
from models.expense import Expense
from categorization import get_category_icon
from tools.reports import format_amount
from logger import get_logger

logger = get_logger()


def cmd_parse(args):
    """Parse a voice transcript and show the expense it describes.

    Args:
        args: Parsed command-line arguments with the transcript words in text
    """
    text = " ".join(args.text)

    parsed = parse_voice_input(text)
    if parsed is None:
        logger.error(f"Could not find an amount in: {text!r}")
        logger.info("Try something like 'spent 25 dollars on coffee'.")
        sys.exit(1)

    expense = Expense.from_parsed(parsed, category=args.category)

    logger.info("\nParsed Expense")
    logger.info("=" * 80)
    logger.info(f"Amount: {format_amount(expense.amount)}")
    logger.info(f"Description: {expense.description}")
    logger.info(f"Category: {expense.category} ({get_category_icon(expense.category)})")
    logger.info(f"Date: {expense.date.strftime('%Y-%m-%d %H:%M')}")
    logger.info("-" * 80)

    if validate_parsed_expense(parsed):
        logger.info("✓ Ready to save")
    else:
        logger.warning("⚠ Needs manual correction before saving")


def setup_parser(subparsers):
    """Setup voice subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "voice",
        help="Parse voice transcripts",
        description="Turn spoken expense descriptions into expense records",
    )

    voice_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available voice commands",
        dest="subcommand",
        required=True,
    )

    # voice parse
    parse_parser = voice_subparsers.add_parser(
        "parse", help="Parse a transcript into an expense"
    )
    parse_parser.add_argument(
        "text",
        nargs="+",
        help="Transcript, e.g. spent 25 dollars on coffee this morning",
    )
    parse_parser.add_argument(
        "--category",
        help="Use this category instead of auto-categorizing",
    )
    parse_parser.set_defaults(func=cmd_parse)

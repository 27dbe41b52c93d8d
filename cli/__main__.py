#!/usr/bin/env python3
"""
Spendnote CLI - Command-line interface for voice expense entry and categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    voice        Parse voice transcripts into expenses
    categories   List categories and categorize descriptions

Examples:
    python -m cli voice parse "spent 25 dollars on coffee this morning"
    python -m cli voice parse paid 30 dollars for gas yesterday --category Transportation
    python -m cli categories list
    python -m cli categories classify doctor visit
    python -m cli categories suggest coffee shopping bill
"""

import sys
import argparse
from cli import voice, categories
from config import load_config
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Spendnote - Voice-driven expense tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    voice.setup_parser(subparsers)
    categories.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            args.func(args)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

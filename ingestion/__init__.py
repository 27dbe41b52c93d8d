"""Expense ingestion from voice transcripts."""

from ingestion.voice import parse_voice_input, validate_parsed_expense

__all__ = ["parse_voice_input", "validate_parsed_expense"]

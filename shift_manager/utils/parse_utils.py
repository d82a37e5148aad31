# utils/parse_utils.py
from datetime import date, datetime

from shift_manager.exceptions import InputValidationError


def parse_date(text: str) -> date:
    """'2025-08-01' -> date(2025, 8, 1)"""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InputValidationError(f"Not a date (YYYY-MM-DD): {text!r}") from exc


def parse_count(text: str) -> int:
    """
    Required headcount for one shift.
    '3' -> 3, ' 0 ' -> 0, '-1' / 'x' -> InputValidationError
    """
    tok = text.strip()
    if not tok.isdecimal():
        raise InputValidationError(f"Enter a whole number of 0 or more: {text!r}")
    return int(tok)


def parse_yes_no(text: str, default: bool = False) -> bool:
    tok = text.strip().lower()
    if not tok:
        return default
    return tok.startswith("y")

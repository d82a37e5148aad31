# utils/date_helper.py
from datetime import date, timedelta
from typing import List

from shift_manager.exceptions import InputValidationError


def iter_dates(start: date, end: date) -> List[date]:
    """
    start..end inclusive, one entry per day in chronological order.
    - start == end -> one day
    - end before start -> InputValidationError
    """
    if end < start:
        raise InputValidationError(f"End date {end} is before start date {start}")
    days = (end - start).days
    return [start + timedelta(days=i) for i in range(days + 1)]

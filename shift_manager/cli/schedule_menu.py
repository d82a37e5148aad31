# cli/schedule_menu.py
from __future__ import annotations
import copy
from datetime import date
from typing import List, Tuple

from shift_manager.config import DEFAULT_CAPS, ScheduleCaps
from shift_manager.exceptions import CancelAction, GoBackAction, InputValidationError
from shift_manager.logic.report import format_schedule_table, format_totals, format_unmet_demand
from shift_manager.logic.scheduler import generate_schedule
from shift_manager.models.employee import Employee
from shift_manager.models.requirements import RequirementTable, new_requirement_table, unmet_demand
from shift_manager.models.shift import ShiftSlot
from shift_manager.utils.date_helper import iter_dates
from shift_manager.utils.input_handler import get_input
from shift_manager.utils.parse_utils import parse_count, parse_date


def collect_date_range() -> Tuple[date, date]:
    """Ask until both dates parse and end >= start."""
    while True:
        try:
            start = parse_date(get_input("Start date (YYYY-MM-DD)"))
            end = parse_date(get_input("End date (YYYY-MM-DD)"))
            iter_dates(start, end)
            return start, end
        except InputValidationError as exc:
            print(exc)


def _ask_count(prompt: str) -> int:
    while True:
        try:
            return parse_count(get_input(prompt))
        except InputValidationError as exc:
            print(exc)


def collect_requirements(dates: List[date]) -> RequirementTable:
    table = new_requirement_table(dates)
    for d in dates:
        for slot in ShiftSlot:
            table[d][slot] = _ask_count(f"Staff needed on {d.isoformat()} ({slot.code})")
    return table


def run_schedule(roster: List[Employee], table: RequirementTable,
                 caps: ScheduleCaps = DEFAULT_CAPS) -> List[Employee]:
    """
    Schedules a copy of the roster so the session roster keeps its zero counts
    and the same employees can be scheduled again for another range.
    """
    working = copy.deepcopy(roster)
    dates = list(table)
    generate_schedule(working, table, caps)

    print()
    print(format_schedule_table(working, dates))
    print()
    print(format_totals(working, caps))
    print()
    print(format_unmet_demand(unmet_demand(table)))
    return working


def schedule_menu(roster: List[Employee]):
    if not roster:
        print("The roster is empty. Add employees first.")
        return
    try:
        start, end = collect_date_range()
        dates = iter_dates(start, end)
        table = collect_requirements(dates)
        run_schedule(roster, table)
    except GoBackAction:
        print("Back to the previous menu")
    except CancelAction:
        print("Back to the main menu")

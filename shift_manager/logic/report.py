# logic/report.py
from __future__ import annotations
from datetime import date
from typing import List, Sequence, Tuple

from shift_manager.config import DEFAULT_CAPS, ScheduleCaps
from shift_manager.models.employee import Employee
from shift_manager.models.shift import ShiftSlot


def format_schedule_table(roster: Sequence[Employee], dates: Sequence[date],
                          name_width: int = 15, cell_width: int = 11) -> str:
    """
    Name           2025-08-01 2025-08-02 ...
    Alfonso        BLD        OFF
    """
    lines = []
    header = "Name".ljust(name_width) + "".join(d.isoformat().ljust(cell_width) for d in dates)
    lines.append(header.rstrip())
    for e in roster:
        row = e.name.ljust(name_width) + "".join(
            e.shift_code_string(d).ljust(cell_width) for d in dates
        )
        lines.append(row.rstrip())
    return "\n".join(lines)


def format_unmet_demand(unmet: Sequence[Tuple[date, ShiftSlot, int]]) -> str:
    if not unmet:
        return "All requirements covered."
    lines = ["Unfilled positions:"]
    for d, slot, remaining in unmet:
        lines.append(f"  {d.isoformat()} {slot.code} ({slot.name.title()}): {remaining}")
    return "\n".join(lines)


def assignment_totals(roster: Sequence[Employee],
                      caps: ScheduleCaps = DEFAULT_CAPS) -> List[Tuple[str, int, str]]:
    """[(name, total_assigned, 'n/cap')] in roster order"""
    return [(e.name, e.total_assigned, f"{e.total_assigned}/{caps.for_employee(e)}") for e in roster]


def format_totals(roster: Sequence[Employee], caps: ScheduleCaps = DEFAULT_CAPS,
                  name_width: int = 15) -> str:
    lines = ["Shifts per employee:"]
    for name, _total, label in assignment_totals(roster, caps):
        lines.append(f"  {name.ljust(name_width)}{label}")
    return "\n".join(lines)

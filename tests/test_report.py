from __future__ import annotations

import datetime

from shift_manager.config import ScheduleCaps
from shift_manager.logic.report import (
    assignment_totals,
    format_schedule_table,
    format_totals,
    format_unmet_demand,
)
from shift_manager.models.shift import ShiftSlot

B, L, D = ShiftSlot.BREAKFAST, ShiftSlot.LUNCH, ShiftSlot.DINNER


def test_schedule_table_rows_follow_roster_order(make_roster, day):
    d2 = day + datetime.timedelta(days=1)
    lead, staff = make_roster(leads=1, others=1)
    for slot in ShiftSlot:
        lead.add_shift(day, slot)
    staff.add_shift(d2, D)
    staff.add_shift(d2, B)

    lines = format_schedule_table([lead, staff], [day, d2]).splitlines()

    assert lines[0].split() == ["Name", "2025-08-01", "2025-08-02"]
    assert lines[1].split() == ["Lead1", "BLD", "OFF"]
    assert lines[2].split() == ["Staff1", "OFF", "BD"]
    # columns line up under the dates
    assert lines[1].index("BLD") == lines[0].index("2025-08-01")
    assert lines[2].index("BD") == lines[0].index("2025-08-02")


def test_unmet_demand_text(day):
    assert format_unmet_demand([]) == "All requirements covered."
    text = format_unmet_demand([(day, L, 2)])
    assert "2025-08-01 L (Lunch): 2" in text


def test_totals_show_class_caps(make_roster, day):
    lead, staff = make_roster(leads=1, others=1)
    lead.add_shift(day, B)
    caps = ScheduleCaps(lead=15, other=12)

    assert assignment_totals([lead, staff], caps) == [
        ("Lead1", 1, "1/15"),
        ("Staff1", 0, "0/12"),
    ]
    assert "Staff1" in format_totals([lead, staff], caps)

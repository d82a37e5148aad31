# models/requirements.py
"""
RequirementTable = {date: {ShiftSlot: remaining headcount}}

Dates are kept in insertion (chronological) order. The scheduler decrements
the counts in place, so after a run the table holds what is still missing.
A count may end up negative after bundling; anything <= 0 counts as covered.
"""
from __future__ import annotations
import copy
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from shift_manager.models.shift import ShiftSlot

RequirementTable = Dict[date, Dict[ShiftSlot, int]]


def new_requirement_table(dates: Iterable[date],
                          counts: Optional[Mapping[ShiftSlot, int]] = None) -> RequirementTable:
    counts = counts or {}
    table: RequirementTable = {}
    for d in dates:
        table[d] = {slot: int(counts.get(slot, 0)) for slot in ShiftSlot}
    return table


def total_needed(table: RequirementTable, day: date) -> int:
    return sum(table[day].values())


def unmet_demand(table: RequirementTable) -> List[Tuple[date, ShiftSlot, int]]:
    out = []
    for d, per_slot in table.items():
        for slot in ShiftSlot:
            remaining = per_slot.get(slot, 0)
            if remaining > 0:
                out.append((d, slot, remaining))
    return out


def snapshot(table: RequirementTable) -> RequirementTable:
    return copy.deepcopy(table)

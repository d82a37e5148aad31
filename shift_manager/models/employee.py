# models/employee.py
from __future__ import annotations
from datetime import date
from typing import Dict, List, Set

from shift_manager.models.shift import OFF_LABEL, ShiftSlot


class Employee:
    def __init__(self, name: str, is_lead: bool = False):
        self.name = name
        self.is_lead = is_lead              # lead role (head waiter) vs. other staff
        self.total_assigned = 0             # only ever goes up
        self.assignments: Dict[date, Set[ShiftSlot]] = {}

    def __repr__(self):
        role = "lead" if self.is_lead else "other"
        return f"Employee({self.name!r}, {role}, total={self.total_assigned})"

    def add_shift(self, day: date, slot: ShiftSlot) -> None:
        self.assignments.setdefault(day, set()).add(slot)
        self.total_assigned += 1

    def has_shift(self, day: date, slot: ShiftSlot) -> bool:
        return slot in self.assignments.get(day, ())

    def shifts_on(self, day: date) -> List[ShiftSlot]:
        held = self.assignments.get(day) or set()
        return [s for s in ShiftSlot if s in held]

    def shift_code_string(self, day: date) -> str:
        """'BLD', 'BD', ... in slot order, or OFF when nothing is assigned."""
        slots = self.shifts_on(day)
        if not slots:
            return OFF_LABEL
        return "".join(s.code for s in slots)

    def to_dict(self) -> dict:
        # run state (assignments) is never written out
        return {"name": self.name, "is_lead": self.is_lead}

    @staticmethod
    def from_dict(data: dict) -> "Employee":
        return Employee(str(data["name"]).strip(), bool(data.get("is_lead", False)))

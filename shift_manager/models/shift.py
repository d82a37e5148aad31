# models/shift.py
from enum import Enum


class ShiftSlot(Enum):
    """Three daily slots. Member order is display order and bundle order."""
    BREAKFAST = "B"
    LUNCH = "L"
    DINNER = "D"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "ShiftSlot":
        key = (code or "").strip().upper()
        for slot in cls:
            if slot.value == key:
                return slot
        raise ValueError(f"Unknown shift code: {code!r}")


OFF_LABEL = "OFF"

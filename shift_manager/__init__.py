from shift_manager.models.employee import Employee
from shift_manager.models.shift import ShiftSlot
from shift_manager.logic.scheduler import generate_schedule

__all__ = ["Employee", "ShiftSlot", "generate_schedule"]

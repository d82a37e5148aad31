# logic/scheduler.py
from __future__ import annotations
from datetime import date
from typing import List, Optional, Sequence

from shift_manager.config import BUNDLE_THRESHOLD, DEFAULT_CAPS, ScheduleCaps
from shift_manager.models.employee import Employee
from shift_manager.models.requirements import RequirementTable, total_needed, unmet_demand
from shift_manager.models.shift import ShiftSlot
from shift_manager.utils.logger import logger


def pick_next_available(leads: Sequence[Employee], others: Sequence[Employee],
                        caps: ScheduleCaps = DEFAULT_CAPS) -> Optional[Employee]:
    """
    Least-loaded employee across both groups who is still under their class cap.
    A full day is granted on this check alone, so it can overshoot the cap by two.
    Ties go to the earliest entry of leads + others (min() keeps the first).
    """
    candidates = [
        e for e in list(leads) + list(others)
        if e.total_assigned < caps.for_employee(e)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda e: e.total_assigned)


def pick_with_least_shifts(employees: Sequence[Employee], max_shifts: int,
                           day: date, slot: ShiftSlot) -> Optional[Employee]:
    """Least-loaded employee under `max_shifts` who does not already hold `slot` on `day`."""
    candidates = [
        e for e in employees
        if e.total_assigned < max_shifts and not e.has_shift(day, slot)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda e: e.total_assigned)


def _bundle_day(day: date, requirements: RequirementTable, leads, others,
                caps: ScheduleCaps) -> int:
    per_slot = requirements[day]
    bundled = 0
    remaining = total_needed(requirements, day)
    while remaining >= BUNDLE_THRESHOLD:
        e = pick_next_available(leads, others, caps)
        if e is None:
            break
        for slot in ShiftSlot:
            e.add_shift(day, slot)
            # uniform decrement even when per-slot needs are uneven
            per_slot[slot] = per_slot.get(slot, 0) - 1
        logger.debug("%s: %s takes the full day", day, e.name)
        remaining -= len(ShiftSlot)
        bundled += 1
    return bundled


def _backfill_slot(day: date, slot: ShiftSlot, per_slot: dict, leads, others,
                   caps: ScheduleCaps) -> None:
    needed = per_slot.get(slot, 0)
    if needed <= 0:
        return

    # one lead first, at most once per slot
    head = pick_with_least_shifts(leads, caps.lead, day, slot)
    if head is not None:
        head.add_shift(day, slot)
        logger.debug("%s %s: lead %s", day, slot.code, head.name)
        needed -= 1

    while needed > 0:
        e = pick_next_available(leads, others, caps)
        if e is None:
            break
        e.add_shift(day, slot)
        logger.debug("%s %s: %s", day, slot.code, e.name)
        needed -= 1

    per_slot[slot] = needed


def generate_schedule(roster: List[Employee], requirements: RequirementTable,
                      caps: ScheduleCaps = DEFAULT_CAPS) -> None:
    """
    Greedy single pass over the requirement table (in its own date order).

    - Per date: while the day still needs >= 3 slots, give the least-loaded
      employee the whole day (B+L+D) and take one off every slot.
    - Then per slot (B, L, D): one least-loaded lead who lacks that slot,
      then least-loaded anyone until the need is met or nobody is left.
    - Caps: leads `caps.lead`, others `caps.other` lifetime shifts.
    - Unmet demand stays in `requirements`; nothing is raised.

    Both `roster` and `requirements` are mutated in place.
    """
    leads = [e for e in roster if e.is_lead]
    others = [e for e in roster if not e.is_lead]

    before = sum(e.total_assigned for e in roster)
    bundles = 0
    for day in requirements:
        bundles += _bundle_day(day, requirements, leads, others, caps)
        for slot in ShiftSlot:
            _backfill_slot(day, slot, requirements[day], leads, others, caps)

    unmet = unmet_demand(requirements)
    for d, slot, remaining in unmet:
        logger.debug("%s %s: %d position(s) left unfilled", d, slot.code, remaining)

    logger.info(
        "Scheduled %d day(s): %d shift(s) assigned (%d full-day), %d slot(s) unmet",
        len(requirements), sum(e.total_assigned for e in roster) - before,
        bundles, sum(r for _, _, r in unmet),
    )


__all__ = ["generate_schedule", "pick_next_available", "pick_with_least_shifts"]

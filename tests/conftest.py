from __future__ import annotations

import datetime
from typing import List

import pytest

from shift_manager.models.employee import Employee


@pytest.fixture
def day() -> datetime.date:
    return datetime.date(2025, 8, 1)


@pytest.fixture
def make_roster():
    """make_roster(leads=2, others=3) -> [Lead1, Lead2, Staff1, Staff2, Staff3]"""
    def _make(leads: int = 0, others: int = 0) -> List[Employee]:
        roster = [Employee(f"Lead{i + 1}", True) for i in range(leads)]
        roster += [Employee(f"Staff{i + 1}", False) for i in range(others)]
        return roster
    return _make

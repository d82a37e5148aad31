# data/roster.py
from __future__ import annotations
import json
from pathlib import Path
from typing import List, Tuple

from shift_manager.exceptions import RosterFileError
from shift_manager.models.employee import Employee

# (name, is_lead) -- fixed order; order is the scheduler's tie-break
DEFAULT_ROSTER: List[Tuple[str, bool]] = [
    ("Alfonso", True),
    ("Victor", True),
    ("Max", True),
    ("Kate", True),
    ("Nikita", False),
    ("Anna", False),
    ("Brooke", False),
    ("Amelia", False),
    ("Dogan", False),
    ("Mihajlo", False),
    ("Dusan", False),
    ("Janja", False),
    ("Mateja M", False),
    ("Lity", False),
    ("Cooper", False),
    ("Jameson", False),
    ("Laci", False),
    ("Isabella", False),
    ("Gianna", False),
    ("Gio", False),
    ("Addison", False),
    ("Cameron", False),
    ("Jane", False),
    ("Roman", False),
]


def default_roster() -> List[Employee]:
    return [Employee(name, is_lead) for name, is_lead in DEFAULT_ROSTER]


def load_roster(path) -> List[Employee]:
    """
    Roster file: JSON list of {"name": str, "is_lead": bool}.
    Missing is_lead -> False. File order is kept.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RosterFileError(f"Cannot read roster file {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RosterFileError(f"Roster file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise RosterFileError(f"Roster file {path} must contain a list of employees")

    employees = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or not str(item.get("name", "")).strip():
            raise RosterFileError(f"Roster entry #{i + 1} in {path} has no name")
        employees.append(Employee.from_dict(item))

    if not employees:
        raise RosterFileError(f"Roster file {path} has no employees")
    return employees

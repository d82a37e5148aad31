# config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Lifetime shift caps per worker class, fixed for one run
MAX_LEAD = _env_int("SHIFT_MANAGER_MAX_LEAD", 15)
MAX_OTHER = _env_int("SHIFT_MANAGER_MAX_OTHER", 12)

# Bundling kicks in while a day still needs at least this many slots
BUNDLE_THRESHOLD = 3


@dataclass(frozen=True)
class ScheduleCaps:
    lead: int = MAX_LEAD
    other: int = MAX_OTHER

    def for_employee(self, employee) -> int:
        return self.lead if employee.is_lead else self.other


DEFAULT_CAPS = ScheduleCaps()

# project root = .../shift_manager
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
ROSTER_FILE = DATA_DIR / "roster.json"

_log = os.environ.get("SHIFT_MANAGER_LOG", "").strip()
LOG_PATH = Path(_log) if _log else None

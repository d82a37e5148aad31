from __future__ import annotations

import json

from shift_manager import main as entry
from shift_manager.data.roster import DEFAULT_ROSTER


def test_bad_roster_file_exits_with_error(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text("[]", encoding="utf-8")
    assert entry.main(["--roster", str(path)]) == 2


def test_console_menu_quits(tmp_path, monkeypatch, capsys):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps([{"name": "Amy", "is_lead": True}]), encoding="utf-8")
    answers = iter(["3", "0"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    assert entry.main(["--roster", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Amy | lead" in out
    assert "Bye." in out


def test_resolve_roster_falls_back_to_builtin(tmp_path, monkeypatch):
    monkeypatch.setattr(entry, "ROSTER_FILE", tmp_path / "missing.json")
    roster = entry.resolve_roster(None)
    assert [e.name for e in roster] == [name for name, _ in DEFAULT_ROSTER]

# main.py
from __future__ import annotations
import argparse
import sys

from shift_manager.config import ROSTER_FILE
from shift_manager.data.roster import default_roster, load_roster
from shift_manager.exceptions import RosterFileError
from shift_manager.utils.logger import logger, set_verbose


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shift-manager",
        description="Assign employees to breakfast/lunch/dinner shifts over a date range.",
    )
    parser.add_argument("--roster", help=f"roster JSON file (default: {ROSTER_FILE} if present, else built-in roster)")
    parser.add_argument("--gui", action="store_true", help="open the desktop window instead of the console menu")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every assignment")
    return parser


def resolve_roster(path: str | None):
    if path:
        return load_roster(path)
    if ROSTER_FILE.exists():
        return load_roster(ROSTER_FILE)
    return default_roster()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    try:
        roster = resolve_roster(args.roster)
    except RosterFileError as exc:
        logger.error("%s", exc)
        return 2
    logger.info("Loaded %d employee(s)", len(roster))

    if args.gui:
        # PySide6 only needed for the window
        from shift_manager.gui.app import run_gui
        return run_gui(roster)

    from shift_manager.cli.menu import main_menu
    try:
        main_menu(roster)
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

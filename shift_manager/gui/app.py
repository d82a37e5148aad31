# gui/app.py
import sys

from PySide6.QtWidgets import QApplication

from shift_manager.gui.main_window import MainWindow


def run_gui(roster) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(roster)
    win.show()
    return app.exec()


def main() -> int:
    from shift_manager.main import resolve_roster
    return run_gui(resolve_roster(None))

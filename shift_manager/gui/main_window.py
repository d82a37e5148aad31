# gui/main_window.py
import copy

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QToolBar, QPushButton,
    QLabel, QTableWidget, QTableWidgetItem, QSpinBox, QDateEdit, QHeaderView,
    QAbstractItemView, QSplitter, QMessageBox,
)
from PySide6.QtCore import Qt, QDate
from PySide6.QtGui import QColor

from shift_manager.config import DEFAULT_CAPS
from shift_manager.exceptions import InputValidationError
from shift_manager.logic.scheduler import generate_schedule
from shift_manager.models.requirements import new_requirement_table, unmet_demand
from shift_manager.models.shift import OFF_LABEL, ShiftSlot
from shift_manager.utils.date_helper import iter_dates
from shift_manager.utils.logger import logger

OFF_COLOR = QColor("#9e9e9e")
FULL_DAY_COLOR = QColor("#e3f2fd")


class MainWindow(QMainWindow):
    def __init__(self, roster):
        super().__init__()
        self.setWindowTitle("Shift scheduler")
        self.resize(1280, 800)

        self.roster = roster        # untouched; every run schedules a copy
        self.dates = []
        self._build_ui()
        self.build_requirement_grid()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        self.addToolBar(tb)

        today = QDate.currentDate()
        tb.addWidget(QLabel("From "))
        self.start_edit = QDateEdit(today)
        self.start_edit.setCalendarPopup(True)
        self.start_edit.setDisplayFormat("yyyy-MM-dd")
        tb.addWidget(self.start_edit)

        tb.addWidget(QLabel("  To "))
        self.end_edit = QDateEdit(today.addDays(6))
        self.end_edit.setCalendarPopup(True)
        self.end_edit.setDisplayFormat("yyyy-MM-dd")
        tb.addWidget(self.end_edit)

        tb.addSeparator()

        btn_grid = QPushButton("Build grid")
        btn_grid.setToolTip("One row per day in the range")
        btn_grid.clicked.connect(self.build_requirement_grid)
        tb.addWidget(btn_grid)

        btn_run = QPushButton("Generate")
        btn_run.clicked.connect(self.run_schedule)
        tb.addWidget(btn_run)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        root.addWidget(splitter)

        # ----- left: staff needed per day/slot -----
        left_container = QWidget()
        left = QVBoxLayout(left_container)
        left.addWidget(QLabel("Staff needed"))
        self.req_table = QTableWidget(0, len(ShiftSlot))
        self.req_table.setHorizontalHeaderLabels([s.code for s in ShiftSlot])
        self.req_table.setSelectionMode(QAbstractItemView.NoSelection)
        left.addWidget(self.req_table)
        left_container.setMinimumWidth(260)

        # ----- right: result -----
        right_container = QWidget()
        right = QVBoxLayout(right_container)
        right.addWidget(QLabel("Schedule"))
        self.result_table = QTableWidget(0, 0)
        self.result_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.result_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        right.addWidget(self.result_table)

        splitter.addWidget(left_container)
        splitter.addWidget(right_container)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        self.status = self.statusBar()

    # ---------------- input grid ----------------
    def _selected_dates(self):
        start = self.start_edit.date().toPython()
        end = self.end_edit.date().toPython()
        return iter_dates(start, end)

    def build_requirement_grid(self):
        try:
            dates = self._selected_dates()
        except InputValidationError as exc:
            QMessageBox.warning(self, "Dates", str(exc))
            return

        self.dates = dates
        self.req_table.setRowCount(len(dates))
        self.req_table.setVerticalHeaderLabels([d.isoformat() for d in dates])
        for r in range(len(dates)):
            for c, _slot in enumerate(ShiftSlot):
                spin = QSpinBox()
                spin.setRange(0, 99)
                self.req_table.setCellWidget(r, c, spin)
        self.result_table.setRowCount(0)
        self.result_table.setColumnCount(0)
        self.status.showMessage(f"{len(dates)} day(s), {len(self.roster)} employee(s)")

    def _read_requirements(self):
        table = new_requirement_table(self.dates)
        for r, d in enumerate(self.dates):
            for c, slot in enumerate(ShiftSlot):
                table[d][slot] = self.req_table.cellWidget(r, c).value()
        return table

    # ---------------- run ----------------
    def run_schedule(self):
        if not self.dates:
            QMessageBox.information(self, "Schedule", "Build the grid first.")
            return
        if not self.roster:
            QMessageBox.information(self, "Schedule", "The roster is empty.")
            return

        table = self._read_requirements()
        working = copy.deepcopy(self.roster)
        generate_schedule(working, table, DEFAULT_CAPS)
        self._fill_result(working)

        unmet = unmet_demand(table)
        missing = sum(r for _, _, r in unmet)
        if missing:
            self.status.showMessage(f"{missing} position(s) could not be filled")
        else:
            self.status.showMessage("All requirements covered")
        logger.info("GUI run: %d day(s), %d unfilled", len(self.dates), missing)

    def _fill_result(self, employees):
        dates = self.dates
        self.result_table.clear()
        self.result_table.setRowCount(len(employees))
        self.result_table.setColumnCount(len(dates) + 1)
        self.result_table.setHorizontalHeaderLabels([d.isoformat() for d in dates] + ["Total"])
        self.result_table.setVerticalHeaderLabels([e.name for e in employees])

        for r, e in enumerate(employees):
            for c, d in enumerate(dates):
                code = e.shift_code_string(d)
                item = QTableWidgetItem(code)
                item.setTextAlignment(Qt.AlignCenter)
                if code == OFF_LABEL:
                    item.setForeground(OFF_COLOR)
                elif len(code) == len(ShiftSlot):
                    item.setBackground(FULL_DAY_COLOR)
                self.result_table.setItem(r, c, item)
            cap = DEFAULT_CAPS.for_employee(e)
            total = QTableWidgetItem(f"{e.total_assigned}/{cap}")
            total.setTextAlignment(Qt.AlignCenter)
            self.result_table.setItem(r, len(dates), total)

        header = self.result_table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeToContents)

# cli/menu.py
from typing import List

from shift_manager.cli.employee_menu import employee_menu, show_employees
from shift_manager.cli.schedule_menu import schedule_menu
from shift_manager.exceptions import CancelAction, GoBackAction
from shift_manager.models.employee import Employee
from shift_manager.utils.input_handler import get_input


def main_menu(roster: List[Employee]):
    while True:
        print("\n[Shift scheduler]")
        print("1. Employees")
        print("2. Generate schedule")
        print("3. Show roster")
        print("0. Quit")

        try:
            choice = get_input("Choice")
            if choice == "1":
                employee_menu(roster)
            elif choice == "2":
                schedule_menu(roster)
            elif choice == "3":
                show_employees(roster)
            elif choice == "0":
                print("Bye.")
                break
            else:
                print("Invalid choice.")
        except GoBackAction:
            print("Back to the previous menu")
        except CancelAction:
            print("Back to the main menu")

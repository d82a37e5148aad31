# cli/employee_menu.py
from typing import List

from shift_manager.models.employee import Employee
from shift_manager.utils.input_handler import get_input
from shift_manager.utils.parse_utils import parse_yes_no


def employee_menu(roster: List[Employee]):
    while True:
        print("\n[Employees]")
        print("1. List employees")
        print("2. Add employee")
        print("3. Toggle lead role")
        print("4. Remove employee")
        print("0. Back to main menu")

        choice = get_input("Choice")

        if choice == "1":
            show_employees(roster)
        elif choice == "2":
            add_employee(roster)
        elif choice == "3":
            toggle_lead(roster)
        elif choice == "4":
            delete_employee(roster)
        elif choice == "0":
            break
        else:
            print("Invalid choice.")


def show_employees(roster: List[Employee]):
    print("\n[Roster]")
    for i, emp in enumerate(roster, start=1):
        role = "lead" if emp.is_lead else "staff"
        print(f"{i:>2} | {emp.name} | {role}")
    leads = sum(1 for e in roster if e.is_lead)
    print(f"{len(roster)} employees ({leads} lead)")


def _find(roster: List[Employee], name: str):
    key = name.strip().lower()
    return next((e for e in roster if e.name.lower() == key), None)


def add_employee(roster: List[Employee]):
    name = get_input("Name")
    if _find(roster, name):
        print(f"{name} is already on the roster.")
        return
    is_lead = parse_yes_no(get_input("Lead role? (y/N)", allow_empty=True))
    roster.append(Employee(name, is_lead))
    print("Employee added (this session only).")


def toggle_lead(roster: List[Employee]):
    emp = _find(roster, get_input("Name"))
    if not emp:
        print("No employee with that name.")
        return
    emp.is_lead = not emp.is_lead
    print(f"{emp.name}: {'lead' if emp.is_lead else 'staff'}")


def delete_employee(roster: List[Employee]):
    emp = _find(roster, get_input("Name to remove"))
    if not emp:
        print("No employee with that name.")
        return
    roster.remove(emp)
    print(f"{emp.name} removed.")

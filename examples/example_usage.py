"""Example: distribute an incentive through the service layer (no Flask).

Run with APP_ENV=testing to use the default 1/2/5/10 rate menu.
"""

import importlib
from datetime import datetime

from payroll_incentives.config import get_settings_module
from payroll_incentives.container import build_container
from payroll_incentives.employees.model import Employee
from payroll_incentives.shifts.model import Shift


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    employee = Employee(employee_id="E-1", first_name="Ana", last_name="Tran")
    primary = employee.add_shift(Shift.from_duration(datetime(2025, 1, 6, 8, 0), 8, incentive=8))
    employee.add_shift(Shift.from_duration(datetime(2025, 1, 7, 8, 0), 1))

    result = container.distribution_service.distribute_for_employee(employee, primary.id, 5)
    print("errors:", result.errors)
    for shift in employee.shifts:
        print(shift.id, shift.start, "->", shift.all_incentives)


if __name__ == "__main__":
    main()

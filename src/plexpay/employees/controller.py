from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, login_required, parse_body
from ..container import Container
from .model import EmployeeData
from .schemas import EmployeeIn


def _to_data(body: EmployeeIn) -> EmployeeData:
    return EmployeeData(
        name=body.name,
        position=body.position,
        department=body.department,
        email=body.email,
        phone_number=body.phone_number,
        address=body.address,
        salary=body.salary,
        date_hired=body.date_hired,
        is_active=body.is_active,
    )


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service

    @app.route("/api/employees", endpoint="list_employees")
    @api_errors("Failed to fetch employees")
    @login_required
    def list_employees():
        active_only = request.args.get("active", "").lower() in {"1", "true", "yes"}
        return jsonify([e.as_dict() for e in employees.list_employees(active_only=active_only)])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_errors("Failed to create employee")
    @login_required
    def create_employee():
        employee = employees.create_employee(_to_data(parse_body(EmployeeIn)))
        return jsonify(employee.as_dict()), 201

    @app.route("/api/employees/<int:employee_id>", endpoint="get_employee")
    @api_errors("Failed to fetch employee")
    @login_required
    def get_employee(employee_id: int):
        return jsonify(employees.get_employee(employee_id).as_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @api_errors("Failed to update employee")
    @login_required
    def update_employee(employee_id: int):
        employee = employees.update_employee(employee_id, _to_data(parse_body(EmployeeIn)))
        return jsonify(employee.as_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors("Failed to delete employee")
    @login_required
    def delete_employee(employee_id: int):
        employees.delete_employee(employee_id)
        return "", 204

    @app.route("/api/employees/<int:employee_id>/payroll-records", endpoint="employee_payroll_records")
    @api_errors("Failed to fetch payroll records")
    @login_required
    def employee_payroll_records(employee_id: int):
        records = container.payroll_service.list_for_employee(employee_id)
        return jsonify([r.as_dict() for r in records])

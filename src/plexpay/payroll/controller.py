from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, current_user_id, login_required, parse_body, send_bytes
from ..container import Container
from ..reports.export import payslip_pdf
from .schemas import PayrollIn, ProcessPayrollIn
from .service import PayrollInput


def _to_input(body: PayrollIn) -> PayrollInput:
    return PayrollInput(
        employee_id=body.employee_id,
        user_id=body.user_id,
        pay_period_start=body.pay_period_start,
        pay_period_end=body.pay_period_end,
        gross_amount=body.gross_amount,
        deductions=body.deductions,
        net_amount=body.net_amount,
        processed_on=body.processed_on,
        notes=body.notes,
        status=body.status,
    )


def register(app: Flask, container: Container) -> None:
    payroll = container.payroll_service

    @app.route("/api/payroll-records", endpoint="list_payroll_records")
    @api_errors("Failed to fetch payroll records")
    @login_required
    def list_payroll_records():
        return jsonify([r.as_dict() for r in payroll.list_records()])

    @app.route("/api/payroll-records", methods=["POST"], endpoint="create_payroll_record")
    @api_errors("Failed to create payroll record")
    @login_required
    def create_payroll_record():
        record = payroll.create_record(_to_input(parse_body(PayrollIn)), current_user_id=current_user_id())
        return jsonify(record.as_dict()), 201

    @app.route("/api/payroll-records/process", methods=["POST"], endpoint="process_payroll")
    @api_errors("Failed to process payroll")
    @login_required
    def process_payroll():
        body = parse_body(ProcessPayrollIn)
        records = payroll.process_payroll(
            pay_period_start=body.pay_period_start,
            pay_period_end=body.pay_period_end,
            processed_on=body.processed_on,
            employee_ids=body.employee_ids,
            notes=body.notes,
            current_user_id=current_user_id(),
        )
        return jsonify([r.as_dict() for r in records]), 201

    @app.route("/api/payroll-records/<int:record_id>", endpoint="get_payroll_record")
    @api_errors("Failed to fetch payroll record")
    @login_required
    def get_payroll_record(record_id: int):
        return jsonify(payroll.get_record(record_id).as_dict())

    @app.route("/api/payroll-records/<int:record_id>", methods=["PUT"], endpoint="update_payroll_record")
    @api_errors("Failed to update payroll record")
    @login_required
    def update_payroll_record(record_id: int):
        record = payroll.update_record(
            record_id, _to_input(parse_body(PayrollIn)), current_user_id=current_user_id()
        )
        return jsonify(record.as_dict())

    @app.route("/api/payroll-records/<int:record_id>", methods=["DELETE"], endpoint="delete_payroll_record")
    @api_errors("Failed to delete payroll record")
    @login_required
    def delete_payroll_record(record_id: int):
        payroll.delete_record(record_id)
        return "", 204

    @app.route("/api/payroll-records/<int:record_id>/payslip", endpoint="payroll_payslip")
    @api_errors("Failed to generate payslip")
    @login_required
    def payroll_payslip(record_id: int):
        slip = payslip_pdf(payroll.get_payslip(record_id))
        return send_bytes(slip.content, filename=slip.filename, mimetype=slip.mimetype)

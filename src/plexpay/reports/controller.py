from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, login_required, query_date, query_int, send_bytes
from ..container import Container
from . import export


def _send(file: export.ExportFile):
    return send_bytes(file.content, filename=file.filename, mimetype=file.mimetype)


def register(app: Flask, container: Container) -> None:
    dashboard = container.dashboard_service
    reports = container.report_service

    def _financial():
        return reports.financial_report(start=query_date("startDate"), end=query_date("endDate"))

    def _expenses():
        return reports.expense_report(
            start=query_date("startDate"), end=query_date("endDate"), category_id=query_int("categoryId")
        )

    def _payroll():
        return reports.payroll_report(start=query_date("startDate"), end=query_date("endDate"))

    @app.route("/api/dashboard", endpoint="dashboard")
    @api_errors("Failed to fetch dashboard data")
    @login_required
    def get_dashboard():
        return jsonify(dashboard.build_dashboard().as_dict())

    @app.route("/api/reports/financial", endpoint="financial_report")
    @api_errors("Failed to generate financial report")
    @login_required
    def financial_report():
        return jsonify(_financial().as_dict())

    @app.route("/api/reports/expenses", endpoint="expense_report")
    @api_errors("Failed to generate expense report")
    @login_required
    def expense_report():
        return jsonify(_expenses().as_dict())

    @app.route("/api/reports/payroll", endpoint="payroll_report")
    @api_errors("Failed to generate payroll report")
    @login_required
    def payroll_report():
        return jsonify(_payroll().as_dict())

    @app.route("/api/reports/financial/export", endpoint="export_financial_report")
    @api_errors("Failed to export financial report")
    @login_required
    def export_financial_report():
        fmt = export.parse_format(request.args.get("format"))
        return _send(export.export_report(export.financial_table(_financial()), fmt, basename="financial-report"))

    @app.route("/api/reports/expenses/export", endpoint="export_expense_report")
    @api_errors("Failed to export expense report")
    @login_required
    def export_expense_report():
        fmt = export.parse_format(request.args.get("format"))
        return _send(export.export_report(export.expense_table(_expenses()), fmt, basename="expense-report"))

    @app.route("/api/reports/payroll/export", endpoint="export_payroll_report")
    @api_errors("Failed to export payroll report")
    @login_required
    def export_payroll_report():
        fmt = export.parse_format(request.args.get("format"))
        return _send(export.export_report(export.payroll_table(_payroll()), fmt, basename="payroll-report"))

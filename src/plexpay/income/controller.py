from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, current_user_id, login_required, parse_body, query_int
from ..container import Container
from ..core.constants import DEFAULT_PAGE_SIZE
from .schemas import IncomeIn
from .service import IncomeInput


def _to_input(body: IncomeIn) -> IncomeInput:
    return IncomeInput(
        source=body.source,
        amount=body.amount,
        occurred_on=body.date,
        description=body.description,
        user_id=body.user_id,
    )


def register(app: Flask, container: Container) -> None:
    income = container.income_service

    @app.route("/api/income-records", endpoint="list_income_records")
    @api_errors("Failed to fetch income records")
    @login_required
    def list_income_records():
        page = query_int("page")
        if page is None:
            return jsonify([r.as_dict() for r in income.list_records()])
        limit = query_int("limit")
        if limit is None:
            limit = DEFAULT_PAGE_SIZE
        return jsonify(income.list_page(page=page, limit=limit).as_dict())

    @app.route("/api/income-records", methods=["POST"], endpoint="create_income_record")
    @api_errors("Failed to create income record")
    @login_required
    def create_income_record():
        record = income.create_record(_to_input(parse_body(IncomeIn)), current_user_id=current_user_id())
        return jsonify(record.as_dict()), 201

    @app.route("/api/income-records/<int:record_id>", endpoint="get_income_record")
    @api_errors("Failed to fetch income record")
    @login_required
    def get_income_record(record_id: int):
        return jsonify(income.get_record(record_id).as_dict())

    @app.route("/api/income-records/<int:record_id>", methods=["PUT"], endpoint="update_income_record")
    @api_errors("Failed to update income record")
    @login_required
    def update_income_record(record_id: int):
        record = income.update_record(
            record_id, _to_input(parse_body(IncomeIn)), current_user_id=current_user_id()
        )
        return jsonify(record.as_dict())

    @app.route("/api/income-records/<int:record_id>", methods=["DELETE"], endpoint="delete_income_record")
    @api_errors("Failed to delete income record")
    @login_required
    def delete_income_record(record_id: int):
        income.delete_record(record_id)
        return "", 204

from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, current_user_id, login_required, parse_body
from ..container import Container
from .schemas import CategoryIn, ExpenseIn
from .service import ExpenseInput


def _to_input(body: ExpenseIn) -> ExpenseInput:
    return ExpenseInput(
        description=body.description,
        amount=body.amount,
        occurred_on=body.date,
        category_id=body.category_id,
        user_id=body.user_id,
        notes=body.notes,
        receipt=body.receipt,
    )


def register(app: Flask, container: Container) -> None:
    categories = container.category_service
    expenses = container.expense_service

    @app.route("/api/expense-categories", endpoint="list_expense_categories")
    @api_errors("Failed to fetch expense categories")
    @login_required
    def list_categories():
        return jsonify([c.as_dict() for c in categories.list_categories()])

    @app.route("/api/expense-categories", methods=["POST"], endpoint="create_expense_category")
    @api_errors("Failed to create expense category")
    @login_required
    def create_category():
        body = parse_body(CategoryIn)
        category = categories.create_category(name=body.name, description=body.description)
        return jsonify(category.as_dict()), 201

    @app.route("/api/expense-categories/<int:category_id>", endpoint="get_expense_category")
    @api_errors("Failed to fetch expense category")
    @login_required
    def get_category(category_id: int):
        return jsonify(categories.get_category(category_id).as_dict())

    @app.route("/api/expense-categories/<int:category_id>", methods=["PUT"], endpoint="update_expense_category")
    @api_errors("Failed to update expense category")
    @login_required
    def update_category(category_id: int):
        body = parse_body(CategoryIn)
        category = categories.update_category(category_id, name=body.name, description=body.description)
        return jsonify(category.as_dict())

    @app.route("/api/expense-categories/<int:category_id>", methods=["DELETE"], endpoint="delete_expense_category")
    @api_errors("Failed to delete expense category")
    @login_required
    def delete_category(category_id: int):
        categories.delete_category(category_id)
        return "", 204

    @app.route("/api/expenses", endpoint="list_expenses")
    @api_errors("Failed to fetch expenses")
    @login_required
    def list_expenses():
        return jsonify([e.as_dict() for e in expenses.list_expenses()])

    @app.route("/api/expenses", methods=["POST"], endpoint="create_expense")
    @api_errors("Failed to create expense")
    @login_required
    def create_expense():
        body = parse_body(ExpenseIn)
        expense = expenses.create_expense(_to_input(body), current_user_id=current_user_id())
        return jsonify(expense.as_dict()), 201

    @app.route("/api/expenses/<int:expense_id>", endpoint="get_expense")
    @api_errors("Failed to fetch expense")
    @login_required
    def get_expense(expense_id: int):
        return jsonify(expenses.get_expense(expense_id).as_dict())

    @app.route("/api/expenses/<int:expense_id>", methods=["PUT"], endpoint="update_expense")
    @api_errors("Failed to update expense")
    @login_required
    def update_expense(expense_id: int):
        body = parse_body(ExpenseIn)
        expense = expenses.update_expense(expense_id, _to_input(body), current_user_id=current_user_id())
        return jsonify(expense.as_dict())

    @app.route("/api/expenses/<int:expense_id>", methods=["DELETE"], endpoint="delete_expense")
    @api_errors("Failed to delete expense")
    @login_required
    def delete_expense(expense_id: int):
        expenses.delete_expense(expense_id)
        return "", 204

from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import admin_required, api_errors, current_user_id, login_required, parse_body
from ..container import Container
from ..core.exceptions import AuthenticationError
from .schemas import LoginRequest, UserCreate, UserUpdate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    @api_errors("Login failed")
    def login():
        body = parse_body(LoginRequest)
        user = container.auth_service.authenticate(body.username, body.password)

        session.clear()
        session["user_id"] = user.id
        session["role"] = user.role.value
        session["name"] = user.name
        return jsonify(user.as_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return "", 204

    @app.route("/api/auth/me", endpoint="auth_me")
    @api_errors("Failed to fetch current user")
    @login_required
    def me():
        user = container.users_repo.get_by_id(current_user_id())
        if not user:
            session.clear()
            raise AuthenticationError("Authentication required")
        return jsonify(user.as_dict())

    @app.route("/api/users", endpoint="list_users")
    @api_errors("Failed to fetch users")
    @admin_required
    def list_users():
        return jsonify([u.as_dict() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @api_errors("Failed to create user")
    @admin_required
    def create_user():
        body = parse_body(UserCreate)
        user = container.user_service.create_user(
            username=body.username,
            password=body.password,
            name=body.name,
            email=body.email,
            role=body.role,
        )
        return jsonify(user.as_dict()), 201

    @app.route("/api/users/<int:user_id>", endpoint="get_user")
    @api_errors("Failed to fetch user")
    @admin_required
    def get_user(user_id: int):
        return jsonify(container.user_service.get_user(user_id).as_dict())

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    @api_errors("Failed to update user")
    @admin_required
    def update_user(user_id: int):
        body = parse_body(UserUpdate)
        user = container.user_service.update_user(
            user_id,
            username=body.username,
            name=body.name,
            email=body.email,
            role=body.role,
            password=body.password,
        )
        return jsonify(user.as_dict())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @api_errors("Failed to delete user")
    @admin_required
    def delete_user(user_id: int):
        container.user_service.delete_user(current_user_id=current_user_id(), user_id=user_id)
        return "", 204

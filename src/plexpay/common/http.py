"""Helpers shared by the JSON controllers.

``api_errors`` maps domain exceptions to HTTP status codes so views only
describe the happy path; ``login_required`` / ``admin_required`` check
the session populated at login and raise, so they go below ``api_errors``.
"""
from __future__ import annotations

import io
from functools import wraps
from typing import Any, Optional, TypeVar

from flask import jsonify, request, send_file, session
from pydantic import ValidationError as SchemaError

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..logging_utils import get_logger
from .datetime_utils import parse_optional_date
from .schemas import RequestSchema

LOGGER = get_logger(__name__)

S = TypeVar("S", bound=RequestSchema)


def error_response(payload: Any, status: int):
    return jsonify({"error": payload}), status


def schema_errors(e: SchemaError) -> list[dict]:
    return [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in e.errors()]


def api_errors(failure_message: str):
    """Translate exceptions raised inside a view into JSON error responses."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except SchemaError as e:
                return error_response(schema_errors(e), 400)
            except ValidationError as e:
                return error_response(str(e), 400)
            except NotFoundError as e:
                return error_response(str(e), 404)
            except AuthenticationError as e:
                return error_response(str(e), 401)
            except AuthorizationError as e:
                return error_response(str(e), 403)
            except Exception:
                LOGGER.exception("%s %s failed", request.method, request.path)
                return error_response(failure_message, 500)

        return wrapper

    return decorator


def parse_body(schema: type[S]) -> S:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    return schema.model_validate(payload)


def query_date(name: str):
    try:
        return parse_optional_date(request.args.get(name))
    except ValueError:
        raise ValidationError(f"{name} must be a date (YYYY-MM-DD)")


def query_int(name: str) -> Optional[int]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def current_user_id() -> Optional[int]:
    user_id = session.get("user_id")
    return int(user_id) if user_id is not None else None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Authentication required")
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Authentication required")
        if session.get("role") != Role.ADMIN.value:
            raise AuthorizationError("Admin access required")
        return view(*args, **kwargs)

    return wrapper


def send_bytes(content: bytes, *, filename: str, mimetype: str):
    return send_file(io.BytesIO(content), mimetype=mimetype, as_attachment=True, download_name=filename)

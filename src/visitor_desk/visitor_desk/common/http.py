from __future__ import annotations

import logging
from enum import Enum
from functools import wraps
from typing import Optional, Type, TypeVar

from flask import jsonify, request

from ..core.constants import DATE_FORMAT
from ..core.exceptions import AuthenticationError, AuthorizationError, ConflictError, ValidationError
from .datetime_utils import parse_iso_date, today_key

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def json_errors(failure_message: str):
    """Route boundary: domain errors map to status codes, anything else is a 500.

    `failure_message` is the fixed text sent for unexpected errors.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"message": str(e), "errors": e.errors}), 400
            except AuthenticationError as e:
                return jsonify({"message": str(e)}), 401
            except AuthorizationError as e:
                return jsonify({"message": str(e)}), 403
            except ConflictError as e:
                return jsonify({"message": str(e)}), 409
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return jsonify({"message": failure_message}), 500

        return wrapper

    return decorator


def query_date(name: str = "date") -> str:
    """YYYY-MM-DD from the query string, today (UTC) when absent."""
    value = (request.args.get(name) or "").strip()
    if not value:
        return today_key()
    try:
        day = parse_iso_date(value)
    except ValueError:
        raise ValidationError("Invalid date", [{"field": name, "message": "expected YYYY-MM-DD"}])
    # stored keys are zero-padded, so 2024-1-1 has to become 2024-01-01
    return day.strftime(DATE_FORMAT)


def query_enum(name: str, enum_cls: Type[E]) -> Optional[E]:
    value = (request.args.get(name) or "").strip()
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {name}", [{"field": name, "message": f"expected one of: {allowed}"}])


def json_body() -> dict:
    return request.get_json(silent=True) or {}

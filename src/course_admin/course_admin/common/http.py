from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, NotFoundError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int, *, error: Optional[str] = None):
    body: dict[str, Any] = {"success": False, "message": message}
    if error:
        body["error"] = error
    return jsonify(body), status


def api_view(failure_message: str):
    """Map domain exceptions raised by a view to JSON error responses."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except ValidationError as e:
                return error_response(str(e), 400)
            except AuthenticationError as e:
                return error_response(str(e), 401)
            except NotFoundError as e:
                return error_response(str(e), 404)
            except UpstreamError as e:
                logger.error("%s %s: %s", request.method, request.path, e)
                return error_response(failure_message, 500, error=str(e))
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return error_response(failure_message, 500)

        return wrapper

    return decorator

from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..core.enums import Role
from ..users.service import AuthService


def role_required(auth: AuthService, role: Role):
    """Only let the current user through when they hold ``role``.

    The user is exposed to the view as ``g.user``. Errors raised by the guard
    go through the app's domain error handlers (401 or 403).
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.user = auth.require_role(role)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def form_data() -> dict:
    """Request payload as a dict, from JSON or a classic form post."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def ok(payload=None, status: int = 200):
    return jsonify(payload if payload is not None else {"ok": True}), status

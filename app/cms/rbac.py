"""
Request-scoped role handling.

How a role is determined is up to the host application: it passes a
`role_resolver` callable to create_app(). The resolved role is stored on
`g.role` for the duration of the request and handed explicitly to the editor.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import abort, current_app, g

from app.cms.editor import ADMIN_ROLE

RoleResolver = Callable[[], str]


def default_role_resolver() -> str:
    return current_app.config.get("DEFAULT_ROLE") or ""


def is_admin(role: str | None) -> bool:
    return role == ADMIN_ROLE


def load_current_role() -> None:
    resolver: RoleResolver = current_app.extensions.get("role_resolver") or default_role_resolver
    try:
        role = resolver()
    except Exception as e:
        current_app.logger.error("Role resolver failed (request_id=%s): %s", getattr(g, "request_id", None), e)
        raise
    g.role = (role or "").strip()


def current_role() -> str:
    return getattr(g, "role", None) or ""


def require_role(*roles: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    403 unless the current role is admin or one of `roles`. With no roles
    given, any non-empty role is accepted.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapped(*args: Any, **kwargs: Any):
            role = current_role()
            allowed = is_admin(role) or (role in roles if roles else bool(role))
            if not allowed:
                g.missing_role = ", ".join(roles) or "any"
                abort(403)
            return fn(*args, **kwargs)

        return wrapped

    return decorator

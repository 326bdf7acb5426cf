from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, render_template, url_for

from ..core.constants import LOGIN_ENDPOINT
from .model import ANONYMOUS, SessionContext


def current_session() -> SessionContext:
    """Snapshot taken by the navigation guard for this request."""
    return g.get("session_ctx", ANONYMOUS)


def login_required(view):
    """Pass the request's SessionContext to the view as its first argument."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_session()
        if not ctx.is_authenticated:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for(LOGIN_ENDPOINT))
        return view(ctx, *args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_session()
        if not ctx.is_authenticated:
            return redirect(url_for(LOGIN_ENDPOINT))

        if not ctx.is_admin:
            return render_template("403.html"), 403

        return view(ctx, *args, **kwargs)

    return wrapper

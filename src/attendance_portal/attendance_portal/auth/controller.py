from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_ENDPOINT, LOGIN_ENDPOINT, MSG_SESSION_EXPIRED
from ..core.exceptions import (
    AuthenticationError,
    BackendUnavailableError,
    DomainError,
    INLINE_ERRORS,
    SessionExpiredError,
    ValidationError,
)
from .decorators import current_session, login_required
from .guard import resolve_route

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def guard_navigation():
        # Recomputed on every navigation; nothing about the route is persisted.
        ctx = container.session_guard().load()
        g.session_ctx = ctx

        target = resolve_route(ctx, request.endpoint)
        if target is None:
            return None
        if target == LOGIN_ENDPOINT and request.endpoint not in (None, DEFAULT_ENDPOINT, "logout"):
            flash("Please sign in to continue.", "warning")
        return redirect(url_for(target))

    @app.context_processor
    def inject_session():
        return {"current_user": current_session()}

    @app.errorhandler(SessionExpiredError)
    def session_expired(e):
        logger.info("Backend rejected the session credential; signing out")
        container.session_guard().logout()
        flash(MSG_SESSION_EXPIRED, "warning")
        return redirect(url_for(LOGIN_ENDPOINT))

    @app.errorhandler(BackendUnavailableError)
    def backend_unavailable(e):
        return render_template("error.html", message=str(e)), 503

    @app.errorhandler(404)
    def not_found(e):
        if current_session().is_authenticated:
            return redirect(url_for(DEFAULT_ENDPOINT))
        return redirect(url_for(LOGIN_ENDPOINT))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                ctx = container.auth_service.login(container.session_guard(), email=email, password=password)
                flash(f"Welcome, {ctx.full_name or 'back'}!", "success")
                return redirect(url_for(DEFAULT_ENDPOINT))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except BackendUnavailableError:
                flash("Failed to login. Please check your connection.", "danger")
            except DomainError as e:
                logger.error("Login failed: %s", e)
                flash(str(e), "danger")

        return render_template("login.html", email=email)

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(
            container.session_guard(),
            current_session(),
            notify_backend=bool(app.config.get("NOTIFY_BACKEND_ON_LOGOUT", False)),
        )
        flash("You have been signed out.", "info")
        return redirect(url_for(LOGIN_ENDPOINT))

    @app.route("/me", endpoint="me")
    @login_required
    def me(ctx):
        profile = {}
        try:
            profile = container.auth_service.me(ctx)
        except INLINE_ERRORS as e:
            flash(str(e), "danger")
        return render_template("profile.html", profile=profile, active_page="me")

from __future__ import annotations

from flask import Flask, render_template

from ..auth.decorators import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="dashboard")
    @login_required
    def dashboard(ctx):
        stats = container.dashboard_service.build(ctx, today=container.today())
        return render_template("dashboard.html", stats=stats, active_page="dashboard")

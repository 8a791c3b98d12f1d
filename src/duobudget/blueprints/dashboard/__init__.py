"""Dashboard blueprint package."""

from __future__ import annotations

from flask import Blueprint, Flask

from ...services.dashboard import DashboardService

bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


def init_app(app: Flask, service: DashboardService) -> None:
    """Attach the dashboard service the routes resolve at request time."""

    state = app.extensions.setdefault("dashboard", {})
    state["service"] = service


from . import routes  # noqa: E402,F401 - ensure routes register

__all__ = ["bp", "init_app"]

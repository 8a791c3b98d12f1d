"""Flask CLI commands for DuoBudget."""

from __future__ import annotations

import json

import click
from flask import current_app

from .blueprints.dashboard.serializers import overview_json


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("duobudget-dashboard")
    @click.option("--user-id", required=True, help="Member whose household to report on")
    @click.option("--month", type=click.IntRange(1, 12), default=None)
    @click.option("--year", type=int, default=None)
    def duobudget_dashboard(user_id: str, month: int | None, year: int | None) -> None:
        """Print the dashboard overview as JSON."""

        from .services.dashboard import HouseholdMembershipError

        service = current_app.extensions["dashboard"]["service"]
        try:
            overview = service.overview(user_id, month=month, year=year)
        except HouseholdMembershipError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(json.dumps(overview_json(overview), indent=2, ensure_ascii=False))

"""DuoBudget application factory."""

from __future__ import annotations

from flask import Flask

from .config import BaseConfig, DevConfig, TestConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def create_app(config_name: str | None = None, *, config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config or _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["DUOBUDGET_CONFIG"] = config_obj

    # Imported lazily so importing model classes alone does not build an engine.
    from . import cli
    from .blueprints import dashboard
    from .infra.database import bootstrap_database
    from .logging_config import setup_logging
    from .services.dashboard import build_dashboard_service

    setup_logging(config_obj)
    engine, session_factory = bootstrap_database(config_obj)
    app.extensions["duobudget.engine"] = engine
    app.extensions["duobudget.session_factory"] = session_factory

    dashboard.init_app(
        app, build_dashboard_service(session_factory, currency=config_obj.CURRENCY_SYMBOL)
    )
    app.register_blueprint(dashboard.bp)
    cli.init_app(app)
    return app


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]

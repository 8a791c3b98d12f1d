"""Dashboard JSON routes.

The upstream auth layer identifies the caller through the ``X-User-Id`` header.
"""

from __future__ import annotations

from typing import Optional

from flask import current_app, jsonify, request
from werkzeug.exceptions import BadRequest, Conflict, HTTPException, NotFound, Unauthorized

from ...services.dashboard import (
    DashboardService,
    HouseholdMembershipError,
    NothingToSettleError,
    SettlementAlreadyRecordedError,
)
from ...services.periods import InvalidPeriodError
from . import bp
from .serializers import (
    history_json,
    overview_json,
    savings_json,
    settlement_json,
    settlement_record_json,
)

USER_HEADER = "X-User-Id"


def _service() -> DashboardService:
    state = current_app.extensions.get("dashboard", {})
    service = state.get("service")
    if service is None:  # pragma: no cover - wiring error
        raise RuntimeError("Dashboard service not initialized")
    return service


def _user_id() -> str:
    user_id = (request.headers.get(USER_HEADER) or "").strip()
    if not user_id:
        raise Unauthorized(f"Missing {USER_HEADER} header")
    return user_id


def _int_arg(name: str) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise BadRequest(f"{name} must be an integer") from exc


def _period_args() -> dict[str, Optional[int]]:
    return {"month": _int_arg("month"), "year": _int_arg("year")}


@bp.errorhandler(HouseholdMembershipError)
def _no_household(exc: HouseholdMembershipError):
    return _error_response(NotFound(str(exc)))


@bp.errorhandler(SettlementAlreadyRecordedError)
def _already_settled(exc: SettlementAlreadyRecordedError):
    return _error_response(Conflict(str(exc)))


@bp.errorhandler(NothingToSettleError)
def _nothing_to_settle(exc: NothingToSettleError):
    return _error_response(BadRequest(str(exc)))


@bp.errorhandler(InvalidPeriodError)
def _invalid_period(exc: InvalidPeriodError):
    return _error_response(BadRequest(str(exc)))


@bp.errorhandler(HTTPException)
def _error_response(exc: HTTPException):
    return jsonify({"error": exc.name, "message": exc.description}), exc.code


@bp.get("/")
def overview():
    """Full household picture for the requested month (default: current)."""

    result = _service().overview(_user_id(), **_period_args())
    return jsonify(overview_json(result))


@bp.get("/savings")
def savings():
    result = _service().savings(_user_id(), **_period_args())
    return jsonify(savings_json(result))


@bp.get("/settlement")
def settlement():
    result = _service().settlement(_user_id(), **_period_args())
    return jsonify(settlement_json(result))


@bp.post("/settlement/paid")
def mark_settlement_paid():
    record = _service().mark_settlement_paid(_user_id(), **_period_args())
    return jsonify(settlement_record_json(record)), 201


@bp.get("/savings/history")
def savings_history():
    months = _int_arg("months")
    if months is None:
        months = current_app.config.get("HISTORY_MONTHS", 6)
    items = _service().savings_history(_user_id(), months=months, **_period_args())
    return jsonify(history_json(items))

"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from finplan.core.comparator import DepositScenario, compare_rates
from finplan.core.financing import (
    ConsorcioInputs,
    FinancingInputs,
    SimulationInputError,
    simulate_consorcio,
    simulate_financing,
)
from finplan.core.ping import get_ping_response
from finplan.core.projection import build_projection
from finplan.core.sensitivity import exhausting_patrimony_grid, preserving_patrimony_grid
from finplan.domain.ledger import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    category_totals,
    filter_by_period,
    filter_by_range,
    summarize_ledger,
    waterfall_series,
)
from finplan.models import FinancialInputs
from finplan.schemas.ledger import CategoryListResponse, LedgerReportRequest, LedgerReportResponse
from finplan.schemas.sensitivity import (
    ComparatorRequest,
    ComparatorResponse,
    SensitivityRequest,
    SensitivityResponse,
)

api_bp = Blueprint("api", __name__)
logger = logging.getLogger(__name__)


def _json_payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _model_response(model: BaseModel, status: HTTPStatus = HTTPStatus.OK) -> Response:
    """Serialise through pydantic so that inf/nan come out as null."""
    return current_app.response_class(
        model.model_dump_json(by_alias=True),
        status=status,
        mimetype="application/json",
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected %s payload: %d error(s)", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.errorhandler(SimulationInputError)
def _handle_simulation_error(exc: SimulationInputError):
    current_app.logger.warning("rejected %s simulation: %s", request.path, exc)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = get_ping_response(current_app.config["SERVICE_NAME"])
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Patrimony trajectory plus headline figures for one set of assumptions."""
    inputs = FinancialInputs.model_validate(_json_payload())
    report = build_projection(inputs)
    return _model_response(report)


@api_bp.post("/sensitivity")
def sensitivity() -> Any:
    """Preserving and exhausting withdrawal grids over contributions x retirement ages."""
    payload = SensitivityRequest.model_validate(_json_payload())
    axes = dict(
        base_contribution=payload.base_contribution,
        contribution_deltas=payload.contribution_deltas,
        retirement_ages=payload.retirement_ages,
    )
    response = SensitivityResponse(
        preserving=preserving_patrimony_grid(payload.inputs, **axes),
        exhausting=exhausting_patrimony_grid(payload.inputs, **axes),
    )
    logger.debug(
        "sensitivity grids %dx%d",
        len(response.preserving.row_parameters),
        len(response.preserving.column_parameters),
    )
    return _model_response(response)


@api_bp.post("/comparator")
def comparator() -> Any:
    """Final amount of a deposit plan under each candidate monthly rate."""
    payload = ComparatorRequest.model_validate(_json_payload())
    scenario = DepositScenario(
        initial_deposit=payload.initial_deposit,
        monthly_deposit=payload.monthly_deposit,
        months=payload.months,
    )
    return _model_response(ComparatorResponse(rows=compare_rates(scenario, payload.scenarios)))


@api_bp.post("/financing")
def financing() -> Any:
    inputs = FinancingInputs.model_validate(_json_payload())
    return _model_response(simulate_financing(inputs))


@api_bp.post("/consorcio")
def consorcio() -> Any:
    inputs = ConsorcioInputs.model_validate(_json_payload())
    return _model_response(simulate_consorcio(inputs))


@api_bp.post("/ledger/report")
def ledger_report() -> Any:
    """Income/expense summary, per-category totals and waterfall bars for a period."""
    payload = LedgerReportRequest.model_validate(_json_payload())

    transactions = payload.transactions
    if payload.month is not None:
        transactions = filter_by_period(transactions, payload.month, payload.year)
    else:
        transactions = filter_by_range(transactions, payload.start, payload.end)

    totals = category_totals(transactions, payload.mode)
    series = waterfall_series(totals, payload.mode)
    response = LedgerReportResponse(
        summary=summarize_ledger(transactions),
        categories=totals,
        waterfall=series.points,
        total_label=series.total_label,
        final_value=series.final_value,
    )
    return _model_response(response)


@api_bp.get("/ledger/categories")
def ledger_categories() -> Any:
    """Default income and expense categories, each list in display order."""
    response = CategoryListResponse(income=INCOME_CATEGORIES, expense=EXPENSE_CATEGORIES)
    return jsonify(response.model_dump(by_alias=True))

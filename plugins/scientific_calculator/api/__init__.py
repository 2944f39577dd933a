"""API routes for the Scientific Calculator plugin."""

from __future__ import annotations

import math
from typing import Any, Literal

from flask import Blueprint, Response, current_app, request

from common.errors import ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    DEFAULT_HISTORY_SIZE,
    MAX_EXPR_LENGTH,
    AngleMode,
    CalculationHistory,
    CalculatorMemory,
    ExpressionError,
    UnrecognizedCharacter,
    UnknownFunction,
    apply_sign_toggle,
    chain,
    describe_token,
    evaluate_expression,
    format_result,
    list_functions,
    substitute_constants,
    to_postfix,
    tokenize,
)

logger = get_logger()

AngleModeName = Literal["degree", "radian"]


class EvaluatePayload(SchemaModel):
    expression: str
    angle_mode: AngleModeName | None = None
    strict: bool | None = None
    substitute_constants: bool = True
    record: bool = True


class ChainPayload(SchemaModel):
    previous: float
    expression: str
    angle_mode: AngleModeName | None = None
    strict: bool | None = None
    record: bool = True


class TokenizePayload(SchemaModel):
    expression: str
    strict: bool | None = None


class ToggleSignPayload(SchemaModel):
    expression: str


class MemoryPayload(SchemaModel):
    action: Literal["add", "subtract"]
    value: float


api_bp = Blueprint("scientific_calculator_api", __name__, url_prefix="/api/scientific_calculator")


def _settings() -> dict[str, Any]:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("scientific_calculator", {}) or {}


def _strict(requested: bool | None) -> bool:
    if requested is not None:
        return requested
    return bool(_settings().get("strict", True))


def _angle_mode(requested: str | None) -> str:
    return AngleMode.parse(requested or _settings().get("default_angle_mode", "degree")).value


def _max_length() -> int:
    try:
        return int(_settings().get("max_expression_length", MAX_EXPR_LENGTH))
    except (TypeError, ValueError):
        return MAX_EXPR_LENGTH


def _history() -> CalculationHistory:
    history = current_app.extensions.get("scientific_calculator_history")
    if history is None:
        try:
            limit = int(_settings().get("history_size", DEFAULT_HISTORY_SIZE))
        except (TypeError, ValueError):
            limit = DEFAULT_HISTORY_SIZE
        history = CalculationHistory(max(limit, 1))
        current_app.extensions["scientific_calculator_history"] = history
    return history


def _memory() -> CalculatorMemory:
    memory = current_app.extensions.get("scientific_calculator_memory")
    if memory is None:
        memory = CalculatorMemory()
        current_app.extensions["scientific_calculator_memory"] = memory
    return memory


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="sci_calc.invalid_request",
            details={"errors": getattr(exc, "details", None) or []},
        )
    )


def _expression_failure(exc: ExpressionError) -> Response:
    details: dict[str, Any] = {}
    if isinstance(exc, UnrecognizedCharacter):
        details = {"character": exc.character, "position": exc.position}
    elif isinstance(exc, UnknownFunction):
        details = {"name": exc.name}
    logger.info("expression rejected: %s (%s)", exc.code, exc)
    return fail(ValidationAppError(message=str(exc), code=f"sci_calc.{exc.code}", details=details))


@api_bp.post("/evaluate")
def evaluate() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(EvaluatePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    expression = payload.expression
    if payload.substitute_constants:
        expression = substitute_constants(expression)
    try:
        result = evaluate_expression(
            expression,
            angle_mode=_angle_mode(payload.angle_mode),
            strict=_strict(payload.strict),
            max_length=_max_length(),
        )
    except ExpressionError as exc:
        return _expression_failure(exc)
    if payload.record:
        _history().record(payload.expression, result["display"], result["angle_mode"])
    return ok(result)


@api_bp.post("/chain")
def chain_calculation() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ChainPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        angle_mode = _angle_mode(payload.angle_mode)
        value = chain(
            payload.previous,
            " " + payload.expression,
            angle_mode,
            strict=_strict(payload.strict),
            max_length=_max_length(),
        )
    except ExpressionError as exc:
        return _expression_failure(exc)
    expression = f"{format_result(payload.previous)} {payload.expression}"
    display = format_result(value)
    if payload.record:
        _history().record(expression, display, angle_mode)
    return ok(
        {
            "expression": expression,
            "result": value if math.isfinite(value) else None,
            "display": display,
            "angle_mode": angle_mode,
        }
    )


@api_bp.post("/tokenize")
def tokenize_expression() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(TokenizePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    strict = _strict(payload.strict)
    try:
        tokens = tokenize(payload.expression, strict=strict)
        postfix = to_postfix(tokens, strict=strict)
    except ExpressionError as exc:
        return _expression_failure(exc)
    return ok(
        {
            "tokens": [describe_token(token) for token in tokens],
            "postfix": [describe_token(token) for token in postfix],
        }
    )


@api_bp.post("/toggle_sign")
def toggle_sign() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ToggleSignPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    return ok({"expression": apply_sign_toggle(payload.expression)})


@api_bp.get("/functions")
def functions() -> Response:
    return ok({"functions": list_functions()})


@api_bp.get("/history")
def history() -> Response:
    store = _history()
    return ok({"limit": store.limit, "entries": [entry.to_dict() for entry in store.entries()]})


@api_bp.delete("/history")
def clear_history() -> Response:
    _history().clear()
    return ok({"entries": []})


def _memory_state(memory: CalculatorMemory) -> dict[str, object]:
    value = memory.recall()
    return {
        "value": value if math.isfinite(value) else None,
        "display": format_result(value),
        "active": value != 0,
    }


@api_bp.get("/memory")
def recall_memory() -> Response:
    return ok(_memory_state(_memory()))


@api_bp.post("/memory")
def update_memory() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(MemoryPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    memory = _memory()
    if payload.action == "add":
        memory.add(payload.value)
    else:
        memory.subtract(payload.value)
    return ok(_memory_state(memory))


@api_bp.delete("/memory")
def clear_memory() -> Response:
    memory = _memory()
    memory.clear()
    return ok(_memory_state(memory))


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "evaluate",
    "chain_calculation",
    "tokenize_expression",
    "toggle_sign",
    "functions",
    "history",
    "clear_history",
    "recall_memory",
    "update_memory",
    "clear_memory",
]

"""Validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


TModel = TypeVar("TModel", bound=SchemaModel)


def _json_safe(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # pydantic puts the raw exception under "ctx", which jsonify cannot encode.
    cleaned = []
    for error in errors:
        item = {key: value for key, value in error.items() if key not in {"ctx", "url"}}
        item["loc"] = [str(part) for part in item.get("loc", ())]
        cleaned.append(item)
    return cleaned


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    if payload is not None and not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid request payload", details=_json_safe(exc.errors())) from exc


__all__ = [
    "ValidationError",
    "SchemaModel",
    "parse_model",
]

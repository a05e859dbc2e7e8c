"""
Payload validation.

Runs a named schema over raw request data and either returns the parsed model
or raises a single BAD_REQUEST AppError listing every rule that failed, in
field order, joined with ", ".
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from .errors import AppError
from .schemas.auth import LoginRequest, SignupRequest
from .schemas.notes import NoteCreate, NoteUpdate

SCHEMAS: Dict[str, Type[BaseModel]] = {
    "signup": SignupRequest,
    "login": LoginRequest,
    "note-create": NoteCreate,
    "note-update": NoteUpdate,
}


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def describe_error(error: Dict[str, Any]) -> str:
    """Turn one pydantic error into a client-facing sentence."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else ""
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if not field:
        if kind == "model_type":
            return "Request body must be a JSON object."
        return error["msg"]

    label = _label(field)
    if kind == "missing":
        return f"{label} is required."
    if kind == "extra_forbidden":
        return f'"{field}" is not allowed.'
    if kind == "string_type":
        return f"{label} must be a string."
    if kind == "string_too_short":
        if error.get("input") == "":
            return f"{label} cannot be empty."
        min_length = ctx.get("min_length")
        unit = "character" if min_length == 1 else "characters"
        return f"{label} must be at least {min_length} {unit} long."
    if kind == "string_too_long":
        return f"{label} cannot exceed {ctx.get('max_length')} characters."
    return f"{label}: {error['msg']}"


def collect_messages(exc: ValidationError) -> List[str]:
    return [describe_error(err) for err in exc.errors()]


def validate(schema: str, data: Any) -> BaseModel:
    """Validate ``data`` against the named schema.

    ``None`` is treated as an empty payload so a missing body reports the
    missing fields instead of a type error.
    """
    try:
        model = SCHEMAS[schema]
    except KeyError:
        raise ValueError(f"Unknown validation schema: {schema}") from None

    try:
        return model.model_validate({} if data is None else data)
    except ValidationError as exc:
        raise AppError.bad_request(", ".join(collect_messages(exc))) from exc

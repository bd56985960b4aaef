from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from mailshrimp_api.schemas.resources import ResourceSchema


@dataclass(frozen=True)
class Valid:
    """Accepted payload; values are keyed by model attribute name."""
    values: Dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    """Rejected payload."""
    reason: str
    details: Optional[List[Dict[str, Any]]] = field(default=None)


ValidationResult = Union[Valid, Invalid]


def _summarize(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


# PUBLIC_INTERFACE
def validate(payload: Any, schema: ResourceSchema, *, partial: bool = False) -> ValidationResult:
    """
    Check an inbound payload against a resource kind's writable schema.

    A payload is invalid when it carries no recognized writable field. On
    creation the required fields must be present as well; partial updates only
    need one recognized field. Unrecognized keys (including accountId and
    status) are dropped and never reach the repository.
    """
    if not isinstance(payload, dict):
        return Invalid(reason="Payload must be a JSON object")

    fields = schema.recognized(payload)
    if not fields:
        return Invalid(reason=f"Payload has no recognized {schema.kind} field")

    if not partial:
        missing = [schema.alias_of(name) for name in schema.required_on_create if name not in fields]
        if missing:
            return Invalid(reason=f"Missing required field(s): {', '.join(missing)}")

    model = schema.update_model if partial else schema.create_model
    try:
        parsed = model.model_validate(fields)
    except ValidationError as exc:
        return Invalid(reason=f"Invalid {schema.kind} payload", details=_summarize(exc))

    values = parsed.model_dump(exclude_unset=True)
    nulls = [schema.alias_of(name) for name in schema.required_on_create if name in values and values[name] is None]
    if nulls:
        return Invalid(reason=f"Field(s) cannot be null: {', '.join(nulls)}")
    return Valid(values=values)

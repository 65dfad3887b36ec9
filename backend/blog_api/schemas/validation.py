from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog_api.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _simplify(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    # pydantic's ctx may hold exception objects; keep only JSON-safe parts.
    out: list[dict[str, str]] = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = str(err.get("msg") or "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append({"field": loc, "message": msg, "type": str(err.get("type") or "value_error")})
    return out


def parse_input(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """
    Validate raw input against ``model``; every failing field is reported at once.

    Raises ValidationError with ``details={"errors": [...]}`` and the first
    failure's message as the headline.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        errors = _simplify(exc.errors())
        first = errors[0] if errors else {"field": "", "message": "Invalid input"}
        headline = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
        raise ValidationError(headline, details={"errors": errors})

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    """Request payload base: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


def parse_payload(model: Type[M], data: Any, *, message: str = "Invalid request data") -> M:
    """Validate a JSON body against `model`.

    Pydantic failures become a ValidationError with one entry per field.
    """
    if not isinstance(data, dict):
        raise ValidationError(message, [{"field": None, "message": "Request body must be a JSON object"}])
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(p) for p in err["loc"]) or None,
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise ValidationError(message, errors) from e

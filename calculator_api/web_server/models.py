"""Request models for the calculator endpoints."""

import re
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import QueryParams

from calculator_api.errors import OPERANDS_REQUIRED_MESSAGE
from calculator_api.exceptions import ValidationError

# Longest leading decimal number: "3abc" -> "3", "1.5.2" -> "1.5", "1_000" -> "1"
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

OPERAND_NAMES = ("a", "b")


class Operands(BaseModel):
    """The ``a`` and ``b`` query parameters.

    Each raw string is read up to the end of its leading number; anything
    after it is ignored. Strings without a leading number are rejected, as
    are values that overflow to infinity.
    """

    model_config = ConfigDict(allow_inf_nan=False, frozen=True)

    a: float
    b: float

    @field_validator("a", "b", mode="before")
    @classmethod
    def leading_number(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        match = _NUMBER_PREFIX.match(value)
        if match is None:
            raise ValueError(f"no number at the start of {value!r}")
        return float(match.group(0))


def first_values(query_params: QueryParams) -> Dict[str, str]:
    """First value of each operand present in the query string."""
    return {
        name: query_params.getlist(name)[0]
        for name in OPERAND_NAMES
        if name in query_params
    }


def parse_operands(raw: Mapping[str, Any]) -> Operands:
    """Validate raw operand values.

    Raises:
        ValidationError: If an operand is missing or has no leading number
    """
    try:
        return Operands.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise ValidationError(
            OPERANDS_REQUIRED_MESSAGE,
            details={
                "fields": sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}),
                "errors": [err["type"] for err in e.errors()],
            },
        ) from e

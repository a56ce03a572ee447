"""Query-string operand validation run before every operation route."""
from collections.abc import Callable, Mapping
import math
import re
from typing import Optional

from fastapi import Request

from calculator_microservice.common.errors import InvalidOperandError
from calculator_microservice.common.models import Operands
from calculator_microservice.common.operations import Operation

# ASCII decimal literal, so no underscores, non-ASCII digits, nan or inf
NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Parse a query-string value as a finite float.

    :param raw: Raw query value, or None when the parameter is absent

    :return: Parsed number, or None if absent, malformed, NaN or infinite
    :rtype: Optional[float]
    """
    if raw is None or not NUMBER_RE.fullmatch(raw):
        return None
    value = float(raw)
    # Literals such as 1e999 overflow to infinity
    if not math.isfinite(value):
        return None
    return value


def parse_operands(query: Mapping[str, str], require_num2: bool) -> Operands:
    """
    Extract ``num1`` and ``num2`` from the query parameters.

    ``num2`` is only checked when ``require_num2`` is set; otherwise it is
    ignored even if supplied.

    :param Mapping query: Request query parameters
    :param bool require_num2: Whether the operation consumes a second operand

    :return: Validated operands
    :rtype: Operands
    :raises InvalidOperandError: If a required operand is missing or invalid
    """
    num1 = parse_number(query.get("num1"))
    if num1 is None:
        raise InvalidOperandError("num1 must be a valid number", "Invalid num1 parameter provided")

    if not require_num2:
        return Operands(num1=num1)

    num2 = parse_number(query.get("num2"))
    if num2 is None:
        raise InvalidOperandError("num2 must be a valid number", "Invalid num2 parameter provided")

    return Operands(num1=num1, num2=num2)


def operands_dependency(operation: Operation) -> Callable[[Request], Operands]:
    """Build the FastAPI dependency validating operands for ``operation``."""

    def validate_numbers(request: Request) -> Operands:
        return parse_operands(request.query_params, require_num2=operation.arity == 2)

    return validate_numbers

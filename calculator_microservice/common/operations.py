"""Arithmetic operations exposed by the service."""
from collections.abc import Callable
import math
import operator
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from calculator_microservice.common.errors import DomainError
from calculator_microservice.common.models import Operands


def divide(num1: float, num2: float) -> float:
    if num2 == 0:
        raise DomainError("Cannot divide by zero", "Division by zero attempted")
    return num1 / num2


def square_root(num1: float) -> float:
    if num1 < 0:
        raise DomainError(
            "Cannot calculate square root of negative numbers", "Square root of negative number attempted"
        )
    return math.sqrt(num1)


def modulo(num1: float, num2: float) -> float:
    """Floating-point remainder whose sign follows the dividend."""
    if num2 == 0:
        raise DomainError("Cannot modulo by zero", "Modulo by zero attempted")
    return math.fmod(num1, num2)


def power(num1: float, num2: float) -> float:
    if num1 == 0 and num2 < 0:
        # Unbounded, math.pow would report it as a domain error
        raise DomainError("Result is out of range")
    return math.pow(num1, num2)


class Operation(BaseModel):
    """
    A single arithmetic operation served on ``/<name>``.

    ``func`` receives ``num1`` for unary operations and ``(num1, num2)``
    otherwise. It may raise DomainError for operands it rejects.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Route segment, e.g. 'add'")
    label: str = Field(..., description="Human readable name used in logs and service info")
    arity: int = Field(..., ge=1, le=2, description="Number of operands consumed")
    func: Callable[..., float] = Field(..., description="Function computing the result")
    template: str = Field(..., description="Log line template, formatted with num1, num2 and result")

    def _args(self, operands: Operands) -> Tuple[float, ...]:
        if self.arity == 1:
            return (operands.num1,)
        return (operands.num1, operands.num2)

    def apply(self, operands: Operands) -> float:
        """
        Compute the operation on validated operands.

        :param Operands operands: Validated request operands

        :return: Finite numeric result
        :rtype: float
        :raises DomainError: If the operands are outside the operation's domain
            or the result cannot be represented as a finite number
        """
        try:
            result = float(self.func(*self._args(operands)))
        except OverflowError as exc:
            raise DomainError("Result is out of range") from exc
        except ValueError as exc:
            # math.pow signals results outside the reals with ValueError
            raise DomainError("Result is not a real number") from exc

        if not math.isfinite(result):
            raise DomainError("Result is out of range")
        return result

    def describe(self, operands: Operands, result: float) -> str:
        """Render the info log line for a successful computation."""
        return self.template.format(num1=operands.num1, num2=operands.num2, result=result)

    def usage(self) -> str:
        """Describe the route for the service info payload."""
        params = "num1=X" if self.arity == 1 else "num1=X&num2=Y"
        return f"GET /{self.name}?{params} - {self.label}"


OPERATIONS: Dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            name="add", label="Addition", arity=2, func=operator.add,
            template="Addition requested: {num1} + {num2} = {result}",
        ),
        Operation(
            name="subtract", label="Subtraction", arity=2, func=operator.sub,
            template="Subtraction requested: {num1} - {num2} = {result}",
        ),
        Operation(
            name="multiply", label="Multiplication", arity=2, func=operator.mul,
            template="Multiplication requested: {num1} * {num2} = {result}",
        ),
        Operation(
            name="divide", label="Division", arity=2, func=divide,
            template="Division requested: {num1} / {num2} = {result}",
        ),
        Operation(
            name="power", label="Exponentiation", arity=2, func=power,
            template="Exponentiation requested: {num1}^{num2} = {result}",
        ),
        Operation(
            name="sqrt", label="Square root", arity=1, func=square_root,
            template="Square root requested: √{num1} = {result}",
        ),
        Operation(
            name="modulo", label="Modulo", arity=2, func=modulo,
            template="Modulo requested: {num1} % {num2} = {result}",
        ),
    )
}

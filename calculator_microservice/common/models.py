"""Pydantic models for request operands and JSON responses."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Operands(BaseModel):
    """Validated operands attached to a single request."""

    model_config = ConfigDict(frozen=True)

    num1: float = Field(..., description="First operand, always required")
    num2: Optional[float] = Field(default=None, description="Second operand, absent for unary operations")


class OperationResult(BaseModel):
    """Success envelope returned by every operation route."""

    result: float = Field(..., description="Numeric result of the operation")


class ErrorResponse(BaseModel):
    """Error envelope returned for rejected or failed requests."""

    error: str = Field(..., description="Human readable error message")


class ServiceInfo(BaseModel):
    """Static metadata served by the root route."""

    service: str
    status: str
    operations: List[str]
    example: str

"""HTTP application serving the arithmetic operations."""
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from calculator_microservice.common.errors import CalculatorError
from calculator_microservice.common.logger import SERVICE_NAME, build_logger
from calculator_microservice.common.models import ErrorResponse, Operands, OperationResult, ServiceInfo
from calculator_microservice.common.operations import OPERATIONS, Operation
from calculator_microservice.common.settings import Settings
from calculator_microservice.server.validator import operands_dependency

GENERIC_ERROR = "Something went wrong!"
USAGE_EXAMPLE = "/add?num1=5&num2=3"


def _add_operation_route(app: FastAPI, operation: Operation) -> None:
    """
    Register ``GET /<operation.name>``.

    The operands dependency runs before the handler, so a request with
    malformed operands never reaches ``operation.apply``.
    """

    def handle(request: Request, operands: Operands = Depends(operands_dependency(operation))) -> OperationResult:
        result = operation.apply(operands)
        request.app.state.logger.info(operation.describe(operands, result))
        return OperationResult(result=result)

    app.add_api_route(
        f"/{operation.name}",
        handle,
        methods=["GET"],
        name=operation.name,
        summary=operation.label,
        response_model=OperationResult,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The service logger is built once here and shared by every request
    through ``app.state.logger``.

    :param settings: Service configuration, read from the environment if omitted

    :return: Configured application
    :rtype: FastAPI
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title="Calculator Microservice", description="Arithmetic operations over HTTP GET")
    app.state.settings = settings
    app.state.logger = build_logger(settings.log_dir, settings.log_level)

    @app.get("/", response_model=ServiceInfo)
    def service_info() -> ServiceInfo:
        return ServiceInfo(
            service=SERVICE_NAME,
            status="healthy",
            operations=[operation.usage() for operation in OPERATIONS.values()],
            example=USAGE_EXAMPLE,
        )

    for operation in OPERATIONS.values():
        _add_operation_route(app, operation)

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError) -> JSONResponse:
        request.app.state.logger.error(exc.log_message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        request.app.state.logger.error(
            f"💥 Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc
        )
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    return app

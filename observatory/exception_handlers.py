"""Map controller errors to HTTP responses."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .errors import OperationFailed, ValidationFailed


def validation_failed_handler(_: Request, exc: ValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def operation_failed_handler(_: Request, exc: OperationFailed) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(OperationFailed, operation_failed_handler)

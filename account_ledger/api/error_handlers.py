"""
Error responses for the ledger API.

Every failure leaves the API as {"Tipo": ..., "Mensagem": ...}:
- LedgerError: its own code, message and status
- RequestValidationError (malformed body or path): 400 INVALID_REQUEST
- anything else: 500 INTERNAL_ERROR, details stay in the log
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_ledger.errors import LedgerError

logger = logging.getLogger(__name__)


def error_response(error: LedgerError) -> JSONResponse:
    """Map a ledger error to its HTTP response."""
    return JSONResponse(
        status_code=error.http_status, content=error.to_response(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        logger.error(
            f"LedgerError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        fields = ", ".join(
            ".".join(str(loc) for loc in e["loc"] if loc != "body")
            for e in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "Tipo": "INVALID_REQUEST",
                "Mensagem": f"Requisição inválida: {fields}",
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "Tipo": "INTERNAL_ERROR",
                "Mensagem": "Erro inesperado",
            },
        )

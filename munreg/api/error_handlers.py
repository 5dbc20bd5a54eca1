"""Error Handlers — global exception handlers for the registration API.

Invariants:
    - MunRegError → its own envelope and status (validation failures → 422 "Bad Request")
    - RequestValidationError (FastAPI path/param parsing) → the same 422 envelope,
      one report per request part
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (MunRegError), framework validation, catch-all
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from munreg.core.errors import (
    MunRegError, RequestValidationFailedError, STATUS_TITLES,
)
from munreg.core.validation_issues import ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(MunRegError)
    async def munreg_error_handler(request: Request, exc: MunRegError):
        if isinstance(exc, RequestValidationFailedError):
            for report in exc.reports:
                logger.warning(
                    f"Validation failed on {request.url.path}",
                    extra={
                        "path": request.url.path,
                        "source": report.source,
                        "issue_count": len(report.issues),
                    },
                )
        else:
            logger.error(
                f"MunRegError: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register FastAPI parameter validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        reports = build_reports_from_errors(exc.errors())
        return JSONResponse(
            status_code=422,
            content=RequestValidationFailedError(reports).to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "statusCode": 500,
                "message": STATUS_TITLES[500],
                "description": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def build_reports_from_errors(errors: list[dict]) -> list[ValidationReport]:
    """Group FastAPI errors by request part (loc[0]) into reports."""
    reports: dict[str, ValidationReport] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        source = str(loc[0]) if loc else "request"
        report = reports.setdefault(source, ValidationReport(source=source))
        report.issues.append(ValidationIssue(
            kind=error.get("type", "invalid"),
            path=loc[1:],
            message=error.get("msg", "Invalid value"),
        ))
    return list(reports.values())

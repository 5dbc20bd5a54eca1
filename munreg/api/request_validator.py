"""Request Validator — validates body and query against FormSchemas before the handler runs.

Invariants:
    - A part is validated only when a schema is configured for it
    - Body and query are validated independently; reports for BOTH are collected
      before failing (never fail-fast across parts)
    - Failure raises RequestValidationFailedError -> 422
      {"statusCode": 422, "message": "Bad Request", "description": [report, ...]}
    - Success hands the handler a ValidatedRequest with the coerced models;
      handlers never read the raw payload
    - is_async=False with a schema that needs reference data is rejected when
      the route is declared, not when a request arrives

Design Decisions:
    - check_request is framework-free (raw values in, ValidatedRequest out) so the
      same pipeline runs in tests and scripts; validate() adapts it to FastAPI
    - Two dependency variants: only async validators pull a DB-backed reference
      provider, sync ones never open a session
"""

import json
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, Request

from munreg.api.dependencies import get_reference_provider
from munreg.core.errors import RequestValidationFailedError
from munreg.core.reference_data import ReferenceSource
from munreg.core.repository_protocols import ReferenceProvider
from munreg.core.validation_issues import ValidationIssue, ValidationReport
from munreg.schemas.form_schema import FormSchema

BODY = "body"
QUERY = "query"


@dataclass(frozen=True)
class ValidatedRequest:
    body: Any = None
    query: Any = None


@dataclass(frozen=True)
class InvalidJSON:
    """Marker for a body that could not be decoded."""
    detail: str


async def _check_part(
    source: str,
    schema: FormSchema,
    raw: Any,
    reference: ReferenceSource | None,
    is_async: bool,
) -> tuple[Any, ValidationReport | None]:
    if isinstance(raw, InvalidJSON):
        issue = ValidationIssue(kind="json_invalid", path=(), message=raw.detail)
        return None, ValidationReport(source=source, issues=[issue])
    if is_async:
        result = await schema.parse_async(raw, reference)
    else:
        result = schema.parse(raw)
    if result.success:
        return result.value, None
    return None, result.report(source)


async def check_request(
    *,
    body_schema: FormSchema | None = None,
    body: Any = None,
    query_schema: FormSchema | None = None,
    query: Any = None,
    reference: ReferenceSource | None = None,
    is_async: bool = False,
) -> ValidatedRequest:
    """Validate the configured parts; raise with every failed part's report."""
    values: dict[str, Any] = {}
    reports: list[ValidationReport] = []
    for source, schema, raw in ((BODY, body_schema, body), (QUERY, query_schema, query)):
        if schema is None:
            continue
        value, report = await _check_part(source, schema, raw, reference, is_async)
        if report:
            reports.append(report)
        else:
            values[source] = value
    if reports:
        raise RequestValidationFailedError(reports)
    return ValidatedRequest(**values)


async def read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return InvalidJSON("Request body is not valid JSON")


def validate(
    *,
    body: FormSchema | None = None,
    query: FormSchema | None = None,
    is_async: bool = False,
):
    """Build a FastAPI dependency validating the request against the given schemas."""
    needs_reference = any(s is not None and s.needs_reference for s in (body, query))
    if needs_reference and not is_async:
        raise ValueError(
            "Schemas that check reference data must be validated with is_async=True",
        )

    async def _validate(
        request: Request, reference: ReferenceSource | None,
    ) -> ValidatedRequest:
        return await check_request(
            body_schema=body,
            body=await read_json_body(request) if body is not None else None,
            query_schema=query,
            query=dict(request.query_params),
            reference=reference,
            is_async=is_async,
        )

    if needs_reference:
        async def validate_with_reference(
            request: Request,
            provider: ReferenceProvider = Depends(get_reference_provider),
        ) -> ValidatedRequest:
            return await _validate(request, provider)
        return validate_with_reference

    async def validate_request(request: Request) -> ValidatedRequest:
        return await _validate(request, None)
    return validate_request

"""Form Schema Evaluator — shape validation followed by whole-object refinements.

Invariants:
    - Shape errors are ALL collected (pydantic validates every field) before returning
    - Refinements run only when shape validation passed
    - Reference refinements see one snapshot per call, resolved at most once and
      only after shape validation passed
    - parse() never awaits: a schema with reference refinements needs a ready
      ReferenceSnapshot there, parse_async() accepts any ReferenceSource
    - No state is kept between calls: the same input and snapshot always give
      the same ParseResult

Design Decisions:
    - pydantic errors converted to ValidationIssue at this boundary: callers,
      error envelopes and tests never depend on pydantic's error dicts
    - FormModel.error_messages overrides pydantic's default wording per
      (field, error type), "*" matching any type for that field
    - Refinements are plain functions returning issue lists (composition over
      pydantic model_validator: those cannot be async and lose the field path)
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from munreg.core.reference_data import (
    ReferenceSnapshot, ReferenceSource, resolve_snapshot,
)
from munreg.core.validation_issues import ParseResult, ValidationIssue


Refinement = Callable[[Any], list[ValidationIssue]]
ReferenceRefinement = Callable[[Any, ReferenceSnapshot], list[ValidationIssue]]


class FormModel(BaseModel):
    """Base for form shapes. Unknown keys are ignored, not rejected."""
    model_config = ConfigDict(extra="ignore")

    error_messages: ClassVar[Mapping[str, Mapping[str, str]]] = {}

    @classmethod
    def message_for(cls, field_name: str | None, error_type: str) -> str | None:
        if field_name is None:
            return None
        messages = cls.error_messages.get(field_name, {})
        return messages.get(error_type) or messages.get("*")


def issues_from_validation_error(
    exc: ValidationError, model: type[BaseModel],
) -> list[ValidationIssue]:
    """Convert pydantic errors into ValidationIssues, keeping their order."""
    issues = []
    for error in exc.errors():
        path = tuple(error["loc"])
        field_name = str(path[0]) if path else None
        message = None
        if issubclass(model, FormModel):
            message = model.message_for(field_name, error["type"])
        ctx = error.get("ctx") or {}
        options = ctx.get("options")
        issues.append(ValidationIssue(
            kind=error["type"],
            path=path,
            message=message or error["msg"],
            options=tuple(options) if options is not None else None,
        ))
    return issues


class FormSchema:
    """A pydantic shape plus the refinements that run once the shape is valid."""

    def __init__(
        self,
        model: type[BaseModel],
        refinements: Sequence[Refinement] = (),
        reference_refinements: Sequence[ReferenceRefinement] = (),
    ):
        self.model = model
        self.refinements = tuple(refinements)
        self.reference_refinements = tuple(reference_refinements)

    @property
    def name(self) -> str:
        return self.model.__name__

    @property
    def needs_reference(self) -> bool:
        return bool(self.reference_refinements)

    def parse(
        self, raw: Any, reference: ReferenceSnapshot | None = None,
    ) -> ParseResult:
        """Validate synchronously."""
        value, issues = self._parse_shape(raw)
        if issues:
            return ParseResult(issues=tuple(issues))
        if self.needs_reference and not isinstance(reference, ReferenceSnapshot):
            raise RuntimeError(
                f"{self.name} checks reference data: pass a ReferenceSnapshot "
                "or use parse_async",
            )
        issues = self._refine(value, reference)
        return ParseResult(value=None if issues else value, issues=tuple(issues))

    async def parse_async(
        self, raw: Any, reference: ReferenceSource | None = None,
    ) -> ParseResult:
        """Validate, awaiting the reference source when refinements need it."""
        value, issues = self._parse_shape(raw)
        if issues:
            return ParseResult(issues=tuple(issues))
        snapshot = None
        if self.needs_reference:
            if reference is None:
                raise RuntimeError(f"{self.name} requires a reference source")
            snapshot = await resolve_snapshot(reference)
        issues = self._refine(value, snapshot)
        return ParseResult(value=None if issues else value, issues=tuple(issues))

    def _parse_shape(self, raw: Any) -> tuple[BaseModel | None, list[ValidationIssue]]:
        try:
            return self.model.model_validate(raw), []
        except ValidationError as exc:
            return None, issues_from_validation_error(exc, self.model)

    def _refine(
        self, value: BaseModel, snapshot: ReferenceSnapshot | None,
    ) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for refinement in self.refinements:
            issues.extend(refinement(value))
        for refinement in self.reference_refinements:
            issues.extend(refinement(value, snapshot))
        return issues

"""ServiceResult and ServiceError — the service contract.

Every LayoutService operation returns a ServiceResult. The CLI renders it
for humans or dumps it as JSON; it never sees raw domain exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from formgrid.domain.errors import FormgridError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: FormgridError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"resolve_groups"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: FormgridError, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))

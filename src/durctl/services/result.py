"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: DurationService methods return ServiceResult and never raise
DurationError; the CLI formats whatever they return.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from durctl.domain.errors import DurationError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_duration"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a degraded calendar backend.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: DurationError, *, warnings: list[str] | None = None) -> ServiceResult:
        """Wrap a DurationError as a failed result, keeping its code and detail."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail),
        )

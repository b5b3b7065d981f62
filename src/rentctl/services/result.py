"""ServiceResult and ServiceError — the service-layer contract.

INVARIANT: All RentalService methods return ServiceResult.
The CLI formatter layer consumes this type. The pricing core below it
raises domain exceptions instead; RentalService converts them here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rentctl.domain.errors import RentalError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: RentalError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"rent"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (locale, currency, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: RentalError, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))

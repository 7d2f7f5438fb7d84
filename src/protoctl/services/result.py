"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer operations return ServiceResult.
A failed result carries the first error encountered, unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from protoctl.errors import ProtoctlError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ProtoctlError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"lint"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls, op: str, exc: ProtoctlError, *, warnings: list[str] | None = None, **data: Any
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data,
            warnings=warnings or [],
            error=ServiceError.from_exception(exc),
        )

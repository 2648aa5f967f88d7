"""Domain exceptions for catalog loading and CLI diagnostics."""

from __future__ import annotations


class CatalogValidationError(ValueError):
    """Raised when catalog data is malformed or ambiguous at load time."""


class LookupStageError(RuntimeError):
    """Raised when a specific lookup stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped lookup error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

"""Domain exceptions for comparison and CLI diagnostics."""

from __future__ import annotations


class ComparisonError(RuntimeError):
    """Raised when a specific comparison stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped comparison error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class FileAccessError(ComparisonError):
    """Raised when an input document cannot be opened or read."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="read", detail=detail, hint=hint)


class DecodingError(ComparisonError):
    """Raised when input bytes are not valid text under the expected encoding."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="decode", detail=detail, hint=hint)


class EmptyInputError(ComparisonError):
    """Raised when an input document is zero-length before normalization."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="validate", detail=detail, hint=hint)

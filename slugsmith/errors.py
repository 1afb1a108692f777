"""Domain exceptions for slug resolution and CLI diagnostics."""

from __future__ import annotations


class SlugStageError(RuntimeError):
    """Raised when a specific slug workflow stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped slug error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SlugExhaustedError(RuntimeError):
    """Raised when a bounded uniqueness search finds no free value."""

    def __init__(self, candidate: str, attempts: int) -> None:
        super().__init__(
            f"No free value for `{candidate}` after {attempts} taken candidate(s)."
        )
        self.candidate = candidate
        self.attempts = attempts

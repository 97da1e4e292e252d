"""Error hierarchy for untangle."""
from __future__ import annotations


class UntangleError(Exception):
    """Base error for all untangle errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Run-aborting errors
# ---------------------------------------------------------------------------


class InputFileError(UntangleError):
    """The input stylesheet is missing or unreadable."""

    def __init__(self, message: str, *, path: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class PreprocessorError(UntangleError):
    """The stylesheet preprocessor could not expand the input."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        exit_code: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.command = command or []
        self.exit_code = exit_code
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}\n{self.stderr.strip()}"
        return base


# ---------------------------------------------------------------------------
# Per-unit errors
# ---------------------------------------------------------------------------


class SearchError(UntangleError):
    """A search provider invocation failed for a single token."""

    def __init__(
        self,
        message: str,
        *,
        token: str = "",
        command: list[str] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.token = token
        self.command = command or []

from __future__ import annotations

from typing import Protocol


class SearchProvider(Protocol):
    """Protocol for "find occurrences of a token across a file tree"."""

    def search(self, token: str, path_glob: str | None = None) -> list[str]:
        """Return matches for *token*, each starting with a file path.

        A match is either a bare path or ``path:rest`` as printed by grep-like
        tools. Raises SearchError when the underlying search fails.
        """
        ...


def match_path(match: str) -> str:
    """Extract the file path from a grep-style ``path:line:text`` match."""
    return match.split(":", 1)[0]

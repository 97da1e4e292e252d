"""In-memory search provider for tests and dry runs."""

from __future__ import annotations

import fnmatch
import threading

from untangle.errors import SearchError
from untangle.search.base import match_path


class StaticSearchProvider:
    """Answers searches from a predefined ``token -> matches`` table.

    Tokens listed in *failures* raise SearchError. Call history and the
    peak number of concurrent calls are recorded for inspection.
    """

    def __init__(
        self,
        results: dict[str, list[str]] | None = None,
        failures: set[str] | None = None,
    ) -> None:
        self._results = {k: list(v) for k, v in (results or {}).items()}
        self._failures = set(failures or ())
        self._lock = threading.Lock()
        self._in_flight = 0
        self.calls: list[tuple[str, str | None]] = []
        self.peak_in_flight = 0

    def search(self, token: str, path_glob: str | None = None) -> list[str]:
        with self._lock:
            self.calls.append((token, path_glob))
            self._in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self._in_flight)
        try:
            self._wait()
            if token in self._failures:
                raise SearchError(f"Search failed for {token!r}", token=token)
            matches = self._results.get(token, [])
            if path_glob:
                matches = [m for m in matches if fnmatch.fnmatch(match_path(m), path_glob)]
            return list(matches)
        finally:
            with self._lock:
                self._in_flight -= 1

    def _wait(self) -> None:
        """Hook for subclasses that simulate latency."""

"""Origin resolver: attribute each unit to the file that references it."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed

from untangle.config import DEFAULT_CONCURRENCY
from untangle.errors import SearchError
from untangle.model.unit import Resolution, ResolutionStatus, StyleUnit
from untangle.search.base import SearchProvider, match_path

logger = logging.getLogger(__name__)


def _absolute(path: str, root: str | None = None) -> str:
    """Resolve *path* against *root* (or the cwd) to one canonical absolute form."""
    return os.path.realpath(os.path.join(root or os.getcwd(), path))


def search_token(selector: str) -> str:
    """Return the leading simple selector used as the search token.

    Descendant and compound selectors are anchored on the text before the
    first whitespace, so ``.nav .item a`` searches for ``.nav``.
    """
    parts = selector.split(None, 1)
    return parts[0] if parts else ""


class OriginResolver:
    """Classifies units by searching for their selector token.

    Args:
        provider: The search capability queried once per unit.
        ignore: Paths that are never valid origins (the input file belongs here).
        extension: Source-stylesheet extension a valid origin must carry.
        path_glob: Optional glob restricting the search.
        max_in_flight: Upper bound on concurrent search invocations.
        match_root: Directory the provider reports matched paths relative to.
            Defaults to the current working directory. Ignore entries are
            resolved against the current working directory.
    """

    def __init__(
        self,
        provider: SearchProvider,
        *,
        ignore: Iterable[str] = (),
        extension: str = "less",
        path_glob: str | None = None,
        max_in_flight: int = DEFAULT_CONCURRENCY,
        match_root: str | None = None,
    ) -> None:
        if max_in_flight < 1:
            raise ValueError(f"max_in_flight must be at least 1, got {max_in_flight}")
        self._provider = provider
        self._match_root = match_root
        self._ignore = frozenset(_absolute(p) for p in ignore)
        self._extension = extension.lstrip(".")
        self._path_glob = path_glob
        self._max_in_flight = max_in_flight

    @property
    def max_in_flight(self) -> int:
        return self._max_in_flight

    # --- Filtering / classification ---

    def candidates(self, matches: Iterable[str]) -> list[str]:
        """Filter raw provider matches down to distinct candidate origins."""
        seen: dict[str, None] = {}
        for match in matches:
            path = match_path(match)
            if not path or _absolute(path, self._match_root) in self._ignore:
                continue
            if self._extension_of(path) != self._extension:
                continue
            seen.setdefault(path, None)
        return list(seen)

    @staticmethod
    def _extension_of(path: str) -> str:
        return path.rsplit(".", 1)[-1] if "." in os.path.basename(path) else ""

    @staticmethod
    def classify(candidates: list[str]) -> ResolutionStatus:
        if len(candidates) == 1:
            return ResolutionStatus.RESOLVED
        if not candidates:
            return ResolutionStatus.UNMATCHED
        return ResolutionStatus.AMBIGUOUS

    # --- Resolution ---

    def resolve(self, unit: StyleUnit) -> Resolution:
        """Resolve a single unit. Provider failures become FAILED resolutions."""
        token = search_token(unit.selector)
        try:
            matches = self._provider.search(token, self._path_glob)
        except (SearchError, OSError) as exc:
            command = " ".join(getattr(exc, "command", []))
            logger.debug("Can't find %s using: %s: %s", token, command or "<provider>", exc)
            return Resolution(
                unit=unit.with_origins(()),
                status=ResolutionStatus.FAILED,
                token=token,
                error=str(exc),
            )

        candidates = self.candidates(matches)
        status = self.classify(candidates)
        if status is ResolutionStatus.AMBIGUOUS:
            logger.debug("%s matches %d files: %s", token, len(candidates), ", ".join(candidates))
        return Resolution(unit=unit.with_origins(tuple(candidates)), status=status, token=token)

    def resolve_all(self, units: Iterable[StyleUnit]) -> Iterator[Resolution]:
        """Resolve units on a bounded worker pool, yielding in completion order.

        All units are queued up front; at most ``max_in_flight`` searches run
        at once. Results are yielded to the calling thread only, so consumers
        can aggregate without locking.
        """
        units = list(units)
        if not units:
            return
        with ThreadPoolExecutor(
            max_workers=min(self._max_in_flight, len(units)),
            thread_name_prefix="untangle-search",
        ) as pool:
            futures = [pool.submit(self.resolve, unit) for unit in units]
            for future in as_completed(futures):
                yield future.result()

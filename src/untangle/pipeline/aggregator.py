"""Aggregator: route resolutions into origin groups or the unresolved set."""

from __future__ import annotations

from collections.abc import Iterable

from untangle.model.report import OriginGroup, UnresolvedEntry
from untangle.model.unit import Resolution


class Aggregator:
    """Single-writer accumulator over resolver output.

    Accepts resolutions in any order. A RESOLVED unit lands in exactly one
    group keyed by (origin file, media query); everything else is unresolved.
    """

    def __init__(self) -> None:
        self.groups: dict[tuple[str, str], OriginGroup] = {}
        self.unresolved: list[UnresolvedEntry] = []
        self._count = 0

    @property
    def count(self) -> int:
        """Number of resolutions received so far."""
        return self._count

    def add(self, resolution: Resolution) -> None:
        self._count += 1
        origin = resolution.origin
        if origin is None:
            self.unresolved.append(UnresolvedEntry.from_resolution(resolution))
            return

        unit = resolution.unit
        key = (origin, unit.media_query)
        group = self.groups.get(key)
        if group is None:
            group = OriginGroup(file_path=origin, media_query=unit.media_query)
            self.groups[key] = group
        group.append(unit)

    def extend(self, resolutions: Iterable[Resolution]) -> Aggregator:
        for resolution in resolutions:
            self.add(resolution)
        return self

"""Report model: origin groups, media fragments, and the final report."""

from __future__ import annotations

from dataclasses import dataclass, field

from tinycss2.ast import AtRule

from untangle.model.unit import Resolution, ResolutionStatus, StyleUnit


@dataclass
class OriginGroup:
    """Units attributed to one file under one media query."""

    file_path: str
    media_query: str
    units: list[StyleUnit] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return (self.file_path, self.media_query)

    @property
    def first_index(self) -> int:
        return min(u.index for u in self.units)

    def append(self, unit: StyleUnit) -> None:
        self.units.append(unit)


@dataclass(frozen=True)
class MediaFragment:
    """A serializable ``@media`` block holding the rules of one group."""

    media_query: str
    node: AtRule

    def serialize(self) -> str:
        return self.node.serialize()


@dataclass(frozen=True)
class UnresolvedEntry:
    """A unit with no single origin, kept for diagnostic display."""

    unit: StyleUnit
    status: ResolutionStatus
    token: str
    error: str = ""

    @classmethod
    def from_resolution(cls, resolution: Resolution) -> UnresolvedEntry:
        return cls(
            unit=resolution.unit,
            status=resolution.status,
            token=resolution.token,
            error=resolution.error,
        )

    @property
    def line(self) -> int:
        return self.unit.line

    @property
    def column(self) -> int:
        return self.unit.column

    @property
    def candidates(self) -> tuple[str, ...]:
        return self.unit.origins or ()


@dataclass
class Report:
    """Terminal pipeline output consumed by the presentation layer."""

    files: dict[str, list[MediaFragment]] = field(default_factory=dict)
    unresolved: list[UnresolvedEntry] = field(default_factory=list)
    unit_count: int = 0

    @property
    def attributed_count(self) -> int:
        return self.unit_count - len(self.unresolved)

    def fragments_for(self, file_path: str) -> list[MediaFragment]:
        return self.files.get(file_path, [])

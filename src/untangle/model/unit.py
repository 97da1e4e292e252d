"""Style unit model: one selector of one rule inside one media block."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from tinycss2.ast import QualifiedRule


class ResolutionStatus(Enum):
    """How a unit's origin search was classified."""

    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    UNMATCHED = "unmatched"
    FAILED = "failed"


@dataclass(frozen=True)
class StyleUnit:
    """The atomic work item of the pipeline.

    Attributes:
        selector: A single selector taken from the original rule.
        media_query: Condition text of the enclosing ``@media`` block.
        rule: A private copy of the rule node, narrowed to ``selector``.
        index: Position in flattening order; drives report ordering.
        origins: Candidate origin files, ``None`` until resolved.
    """

    selector: str
    media_query: str
    rule: QualifiedRule
    index: int
    origins: tuple[str, ...] | None = None

    @property
    def line(self) -> int:
        return self.rule.source_line

    @property
    def column(self) -> int:
        return self.rule.source_column

    @property
    def resolved(self) -> bool:
        return self.origins is not None

    def with_origins(self, origins: tuple[str, ...]) -> StyleUnit:
        """Return a copy of this unit carrying its resolved origins."""
        if self.origins is not None:
            raise ValueError(f"Unit {self.selector!r} is already resolved")
        return replace(self, origins=tuple(origins))


@dataclass(frozen=True)
class Resolution:
    """Classification produced by the origin resolver for one unit."""

    unit: StyleUnit
    status: ResolutionStatus
    token: str
    error: str = ""

    @property
    def origin(self) -> str | None:
        """The single origin file, or None when the unit is unresolved."""
        if self.status is ResolutionStatus.RESOLVED and self.unit.origins:
            return self.unit.origins[0]
        return None

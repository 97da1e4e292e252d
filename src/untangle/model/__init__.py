"""Untangle model layer -- public type re-exports."""

from untangle.model.report import MediaFragment, OriginGroup, Report, UnresolvedEntry
from untangle.model.unit import Resolution, ResolutionStatus, StyleUnit

__all__ = [
    # unit
    "StyleUnit",
    "Resolution",
    "ResolutionStatus",
    # report
    "OriginGroup",
    "MediaFragment",
    "UnresolvedEntry",
    "Report",
]

"""Report assembler: shape aggregated groups into per-file media fragments."""

from __future__ import annotations

from untangle.model.report import MediaFragment, Report
from untangle.pipeline.aggregator import Aggregator
from untangle.stylesheet import media_fragment


def assemble_report(aggregator: Aggregator, unit_count: int | None = None) -> Report:
    """Build the final Report from a completed aggregation.

    Ordering follows flattening order rather than completion order: files and
    media queries appear by their earliest unit, rules by unit index. The
    result is identical for any completion order of the same resolutions.
    """
    report = Report(unit_count=aggregator.count if unit_count is None else unit_count)

    groups = sorted(aggregator.groups.values(), key=lambda g: g.first_index)
    for group in groups:
        units = sorted(group.units, key=lambda u: u.index)
        fragment = MediaFragment(
            media_query=group.media_query,
            node=media_fragment(group.media_query, [u.rule for u in units]),
        )
        report.files.setdefault(group.file_path, []).append(fragment)

    report.unresolved = sorted(aggregator.unresolved, key=lambda e: e.unit.index)
    return report

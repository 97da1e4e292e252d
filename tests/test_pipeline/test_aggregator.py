"""Tests for the aggregator and the report assembler."""

from __future__ import annotations

import random

from untangle.model.unit import ResolutionStatus
from untangle.pipeline import Aggregator, OriginResolver, assemble_report, flatten
from untangle.search import StaticSearchProvider
from untangle.stylesheet import parse


SOURCE = """
@media (min-width: 768px) {
  .nav { color: red }
  .btn { padding: 0 }
  .card, .nav-item { margin: 1px }
}
@media print {
  .nav { display: none }
  .ghost { opacity: 0 }
  .card .title { font-weight: bold }
}
"""

RESULTS = {
    ".nav": ["layout.less:3:.nav {"],
    ".btn": ["buttons.less:1:.btn", "forms.less:9:.btn"],
    ".card": ["card.less:2:.card {", "main.less:40:.card"],
    ".nav-item": ["layout.less:12:.nav-item"],
}


def _resolutions():
    resolver = OriginResolver(StaticSearchProvider(RESULTS), ignore=["main.less"])
    return [resolver.resolve(u) for u in flatten(parse(SOURCE))]


def _snapshot(report):
    return (
        {path: [f.serialize() for f in fragments] for path, fragments in report.files.items()},
        list(report.files),
        [(e.unit.selector, e.status) for e in report.unresolved],
    )


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


class TestAggregator:
    def test_groups_by_file_and_media_query(self):
        aggregator = Aggregator().extend(_resolutions())
        assert set(aggregator.groups) == {
            ("layout.less", "(min-width: 768px)"),
            ("layout.less", "print"),
            ("card.less", "(min-width: 768px)"),
            ("card.less", "print"),
        }

    def test_group_members(self):
        aggregator = Aggregator().extend(_resolutions())
        group = aggregator.groups[("layout.less", "(min-width: 768px)")]
        assert [u.selector for u in group.units] == [".nav", ".nav-item"]

    def test_unresolved_collects_ambiguous_and_unmatched(self):
        aggregator = Aggregator().extend(_resolutions())
        unresolved = {(e.unit.selector, e.status) for e in aggregator.unresolved}
        assert unresolved == {
            (".btn", ResolutionStatus.AMBIGUOUS),
            (".ghost", ResolutionStatus.UNMATCHED),
        }

    def test_no_unit_lands_in_two_places(self):
        resolutions = _resolutions()
        aggregator = Aggregator().extend(resolutions)
        grouped = [u.index for g in aggregator.groups.values() for u in g.units]
        unresolved = [e.unit.index for e in aggregator.unresolved]
        assert sorted(grouped + unresolved) == list(range(len(resolutions)))

    def test_count_tracks_every_resolution(self):
        resolutions = _resolutions()
        aggregator = Aggregator()
        for r in resolutions:
            aggregator.add(r)
        assert aggregator.count == len(resolutions)


# ---------------------------------------------------------------------------
# Report assembly
# ---------------------------------------------------------------------------


class TestAssembleReport:
    def test_files_in_first_appearance_order(self):
        report = assemble_report(Aggregator().extend(_resolutions()))
        assert list(report.files) == ["layout.less", "card.less"]

    def test_one_fragment_per_media_query(self):
        report = assemble_report(Aggregator().extend(_resolutions()))
        assert [f.media_query for f in report.files["layout.less"]] == [
            "(min-width: 768px)",
            "print",
        ]

    def test_fragment_contents(self):
        report = assemble_report(Aggregator().extend(_resolutions()))
        first = report.files["layout.less"][0]
        assert first.serialize() == (
            "@media (min-width: 768px) {\n"
            "  .nav { color: red }\n"
            "  .nav-item { margin: 1px }\n"
            "}"
        )
        card_print = report.files["card.less"][1]
        assert card_print.serialize() == "@media print {\n  .card .title { font-weight: bold }\n}"

    def test_unresolved_in_source_order(self):
        report = assemble_report(Aggregator().extend(_resolutions()))
        assert [e.unit.selector for e in report.unresolved] == [".btn", ".ghost"]
        assert report.unresolved[0].line == 4
        assert report.unresolved[0].candidates == ("buttons.less", "forms.less")

    def test_counts(self):
        report = assemble_report(Aggregator().extend(_resolutions()))
        assert report.unit_count == 7
        assert report.attributed_count == 5

    def test_completion_order_does_not_change_report(self):
        resolutions = _resolutions()
        expected = _snapshot(assemble_report(Aggregator().extend(resolutions)))
        rng = random.Random(7)
        for _ in range(10):
            shuffled = list(resolutions)
            rng.shuffle(shuffled)
            assert _snapshot(assemble_report(Aggregator().extend(shuffled))) == expected

    def test_empty(self):
        report = assemble_report(Aggregator())
        assert report.files == {}
        assert report.unresolved == []
        assert report.unit_count == 0

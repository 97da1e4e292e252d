"""Tests for the rule flattener."""

from tinycss2.ast import IdentToken

from untangle.pipeline import flatten
from untangle.stylesheet import media_blocks, media_rules, parse, stringify


class TestFlatten:
    def test_empty_input_yields_no_units(self):
        assert flatten(parse("")) == []

    def test_rules_outside_media_are_ignored(self):
        assert flatten(parse(".a { color: red } .b { color: blue }")) == []

    def test_one_unit_per_selector(self):
        units = flatten(parse("@media print { .a, .b, .c p { display: none } }"))
        assert [u.selector for u in units] == [".a", ".b", ".c p"]

    def test_units_carry_their_media_query(self):
        source = "@media print { .a { x: 1 } } @media (min-width: 10px) { .b { y: 2 } }"
        units = flatten(parse(source))
        assert [(u.selector, u.media_query) for u in units] == [
            (".a", "print"),
            (".b", "(min-width: 10px)"),
        ]

    def test_indices_follow_source_order(self):
        units = flatten(parse("@media print { .a, .b { x: 1 } .c { y: 2 } }"))
        assert [u.index for u in units] == [0, 1, 2]

    def test_units_start_unresolved(self):
        units = flatten(parse("@media print { .a { x: 1 } }"))
        assert units[0].origins is None
        assert not units[0].resolved

    def test_rule_prelude_is_narrowed_to_selector(self):
        units = flatten(parse("@media print { .a, .b > p { display: none } }"))
        assert stringify(units[0].rule) == ".a { display: none }"
        assert stringify(units[1].rule) == ".b > p { display: none }"

    def test_declarations_are_preserved(self):
        source = "@media print { .a, .b { color: red; margin: 0 auto } }"
        original = media_rules(next(media_blocks(parse(source))))[0]
        units = flatten(parse(source))
        for unit in units:
            assert stringify(unit.rule.content) == stringify(original.content)

    def test_rule_copies_are_independent(self):
        units = flatten(parse("@media print { .a, .b { color: red } }"))
        units[0].rule.content.append(IdentToken(1, 1, "mutated"))
        units[0].rule.prelude.clear()
        assert "mutated" not in stringify(units[1].rule)
        assert stringify(units[1].rule) == ".b { color: red }"

    def test_source_position_is_kept(self):
        units = flatten(parse("@media print {\n\n  .a { x: 1 }\n}"))
        assert units[0].line == 3

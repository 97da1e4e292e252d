"""Rule flattener: one StyleUnit per selector of every rule inside @media."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from tinycss2.ast import Node, WhitespaceToken

from untangle.model.unit import StyleUnit
from untangle.stylesheet import media_blocks, media_query, media_rules, split_selectors, stringify


def flatten(nodes: Iterable[Node]) -> list[StyleUnit]:
    """Expand every rule nested in a top-level ``@media`` block.

    A rule with N selectors yields N units. Each unit holds its own deep copy
    of the rule whose prelude is narrowed to that unit's selector. Top-level
    rules outside ``@media`` are ignored.
    """
    units: list[StyleUnit] = []
    for block in media_blocks(nodes):
        query = media_query(block)
        for rule in media_rules(block):
            for tokens in split_selectors(rule):
                clone = copy.deepcopy(rule)
                clone.prelude = copy.deepcopy(tokens) + [WhitespaceToken(rule.source_line, rule.source_column, " ")]
                units.append(
                    StyleUnit(
                        selector=" ".join(stringify(tokens).split()),
                        media_query=query,
                        rule=clone,
                        index=len(units),
                    )
                )
    return units

"""Thin wrapper over tinycss2 for the nodes the pipeline works with.

Only three shapes matter here:
    * top-level ``@media`` at-rules,
    * qualified (style) rules nested directly inside them,
    * synthesized ``@media`` fragments built for re-serialization.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import tinycss2
from tinycss2.ast import AtRule, Node, QualifiedRule, WhitespaceToken

__all__ = [
    "parse",
    "stringify",
    "media_blocks",
    "media_query",
    "media_rules",
    "split_selectors",
    "media_fragment",
]


def parse(source: str) -> list[Node]:
    """Parse stylesheet text into top-level tinycss2 nodes."""
    return tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)


def stringify(nodes: Node | Iterable[Node]) -> str:
    """Serialize a node or a sequence of nodes back to stylesheet text."""
    if isinstance(nodes, Node):
        return nodes.serialize()
    return tinycss2.serialize(nodes)


def media_blocks(nodes: Iterable[Node]) -> Iterator[AtRule]:
    """Yield the top-level ``@media`` blocks that have a body."""
    for node in nodes:
        if node.type == "at-rule" and node.lower_at_keyword == "media" and node.content is not None:
            yield node


def media_query(block: AtRule) -> str:
    """Return the condition text of a ``@media`` block, whitespace-normalised."""
    return " ".join(tinycss2.serialize(block.prelude).split())


def media_rules(block: AtRule) -> list[QualifiedRule]:
    """Return the style rules directly inside a ``@media`` block."""
    nodes = tinycss2.parse_rule_list(block.content, skip_comments=True, skip_whitespace=True)
    return [n for n in nodes if n.type == "qualified-rule"]


def split_selectors(rule: QualifiedRule) -> list[list[Node]]:
    """Split a rule's prelude into one token list per selector.

    Only top-level commas separate selectors; commas inside functional
    pseudo-classes or attribute brackets are part of a nested block token.
    """
    groups: list[list[Node]] = [[]]
    for token in rule.prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return [g for g in (_strip_whitespace(g) for g in groups) if g]


def _strip_whitespace(tokens: list[Node]) -> list[Node]:
    start, end = 0, len(tokens)
    while start < end and tokens[start].type in ("whitespace", "comment"):
        start += 1
    while end > start and tokens[end - 1].type in ("whitespace", "comment"):
        end -= 1
    return tokens[start:end]


def media_fragment(query: str, rules: Iterable[QualifiedRule]) -> AtRule:
    """Synthesize a ``@media <query> { rules }`` node for serialization.

    tinycss2's serializer needs the at-keyword, a prelude token list, and a
    content list; rule nodes serialize themselves inside that list.
    """
    prelude: list[Node] = [WhitespaceToken(1, 1, " ")]
    prelude.extend(tinycss2.parse_component_value_list(query))
    prelude.append(WhitespaceToken(1, 1, " "))

    content: list[Node] = []
    for rule in rules:
        content.append(WhitespaceToken(1, 1, "\n  "))
        content.append(rule)
    content.append(WhitespaceToken(1, 1, "\n"))
    return AtRule(1, 1, "media", "media", prelude, content)

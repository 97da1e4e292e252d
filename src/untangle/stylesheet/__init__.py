from untangle.stylesheet.parser import (
    media_blocks,
    media_fragment,
    media_query,
    media_rules,
    parse,
    split_selectors,
    stringify,
)

__all__ = [
    "parse",
    "stringify",
    "media_blocks",
    "media_query",
    "media_rules",
    "split_selectors",
    "media_fragment",
]

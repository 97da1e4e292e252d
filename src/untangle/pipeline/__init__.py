"""Extraction-and-attribution pipeline stages."""

from untangle.pipeline.aggregator import Aggregator
from untangle.pipeline.flatten import flatten
from untangle.pipeline.report import assemble_report
from untangle.pipeline.resolver import OriginResolver, search_token

__all__ = [
    "flatten",
    "search_token",
    "OriginResolver",
    "Aggregator",
    "assemble_report",
]

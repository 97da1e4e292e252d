"""Pipeline runner: wires loading, flattening, resolution and assembly."""

from __future__ import annotations

import logging

from untangle.config import UntangleConfig
from untangle.errors import UntangleError
from untangle.model.report import Report
from untangle.pipeline import Aggregator, OriginResolver, assemble_report, flatten
from untangle.preprocess import load_stylesheet
from untangle.search.base import SearchProvider
from untangle.search.git_grep import GitGrepSearchProvider
from untangle.stylesheet import parse

logger = logging.getLogger(__name__)


def build_resolver(config: UntangleConfig, provider: SearchProvider | None = None) -> OriginResolver:
    """Create the OriginResolver described by *config*."""
    if provider is None:
        provider = GitGrepSearchProvider(timeout=config.search_timeout)
    return OriginResolver(
        provider,
        ignore=config.effective_ignore,
        extension=config.extension,
        path_glob=config.root_glob,
        max_in_flight=config.concurrency,
        match_root=getattr(provider, "working_directory", None),
    )


def run_pipeline(
    config: UntangleConfig,
    provider: SearchProvider | None = None,
    *,
    source: str | None = None,
) -> Report:
    """Run the whole pipeline and return the completed Report.

    InputFileError and PreprocessorError propagate before any unit exists.
    When *source* is given it is used instead of loading ``config.input_path``.
    """
    if source is None:
        source = load_stylesheet(
            config.input_path,
            precompile=config.precompile,
            command=config.preprocessor,
            timeout=config.preprocess_timeout,
        )

    units = flatten(parse(source))
    logger.info("Flattened %d rule selectors from %s", len(units), config.input_path)

    resolver = build_resolver(config, provider)
    aggregator = Aggregator().extend(resolver.resolve_all(units))

    if aggregator.count != len(units):
        raise UntangleError(
            f"Resolved {aggregator.count} of {len(units)} units; refusing to build a partial report"
        )
    return assemble_report(aggregator, unit_count=len(units))

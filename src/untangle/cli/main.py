"""Untangle CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from untangle import __version__
from untangle.config import DEFAULT_CONCURRENCY, UntangleConfig
from untangle.errors import UntangleError


class _ClickHandler(logging.Handler):
    """Emits log records through click, wrapped in CSS block comments."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(f"/* {self.format(record)} */", err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    handler = _ClickHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("untangle")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="untangle")
@click.argument("input_file", metavar="FILE", type=click.Path(dir_okay=False))
@click.option(
    "--print-queries",
    is_flag=True,
    help="Print the cherry-picked media queries for each matched file.",
)
@click.option(
    "--show-unmatched",
    is_flag=True,
    help="List the unmatched styles and where in the file they are.",
)
@click.option(
    "--ignore",
    "ignore",
    multiple=True,
    metavar="PATH",
    help="Ignore a file path. Can be used multiple times.",
)
@click.option("--root-glob", default=None, metavar="GLOB", help="Limit searches to paths matching GLOB.")
@click.option("--verbose", is_flag=True, help="Show errors and extra messages.")
@click.option("--extension", default="less", show_default=True, help="Extension of source stylesheets.")
@click.option(
    "--concurrency",
    default=DEFAULT_CONCURRENCY,
    show_default=True,
    type=click.IntRange(min=1),
    help="Maximum concurrent searches.",
)
@click.option("--preprocessor", default="lessc", show_default=True, help="Command that expands the input.")
@click.option("--no-compile", is_flag=True, help="Read the input as plain CSS, skipping the preprocessor.")
@click.option(
    "--search-timeout",
    default=30.0,
    show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds allowed for each search.",
)
@click.option(
    "--preprocess-timeout",
    default=120.0,
    show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds allowed for the preprocessor.",
)
def cli(
    input_file: str,
    print_queries: bool,
    show_unmatched: bool,
    ignore: tuple[str, ...],
    root_glob: str | None,
    verbose: bool,
    extension: str,
    concurrency: int,
    preprocessor: str,
    no_compile: bool,
    search_timeout: float,
    preprocess_timeout: float,
) -> None:
    """Untangle media queries.

    Matches every rule inside the @media blocks of FILE to the source
    stylesheet that references its selector. All console output other than
    stylesheet fragments is wrapped in CSS block comments for easier piping
    to files.
    """
    from untangle.cli.output import render_header, render_report
    from untangle.runner import run_pipeline

    configure_logging(verbose)
    config = UntangleConfig(
        input_path=input_file,
        ignore=ignore,
        root_glob=root_glob,
        extension=extension,
        concurrency=concurrency,
        preprocessor=preprocessor,
        precompile=not no_compile,
        search_timeout=search_timeout,
        preprocess_timeout=preprocess_timeout,
        print_queries=print_queries,
        show_unmatched=show_unmatched,
        verbose=verbose,
    )

    render_header(config)
    try:
        report = run_pipeline(config)
    except UntangleError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)

    render_report(report, config)

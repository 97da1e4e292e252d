"""Console rendering of a Report.

Everything that is not a stylesheet fragment is wrapped in a CSS block
comment so the output can be piped straight into a ``.css`` file.
"""

from __future__ import annotations

import click

from untangle.config import UntangleConfig
from untangle.model.report import Report
from untangle.stylesheet import stringify


def comment(text: str) -> str:
    return f"/* {text} */"


def render_header(config: UntangleConfig) -> None:
    click.secho(comment(f"Analysing: {config.input_path}"), fg="green")
    click.echo()


def render_report(report: Report, config: UntangleConfig) -> None:
    for file_path, fragments in report.files.items():
        click.secho(comment(f"Origin file: {file_path}"), fg="blue")
        if config.print_queries:
            for fragment in fragments:
                click.echo(fragment.serialize())
        click.echo()

    if config.show_unmatched:
        click.secho(comment("Showing unmatched styles"), fg="yellow")
        for entry in report.unresolved:
            click.echo()
            click.echo(
                comment(f"{config.input_path} Line: {entry.line} ({entry.status.value})")
            )
            if entry.candidates:
                click.echo(comment("Candidates: " + ", ".join(entry.candidates)))
            if config.verbose and entry.error:
                click.echo(comment(entry.error))
            click.echo(stringify(entry.unit.rule))
        click.echo()

    click.echo(
        comment(
            f"{report.unit_count} selector(s): {report.attributed_count} attributed "
            f"to {len(report.files)} file(s), {len(report.unresolved)} unresolved"
        )
    )

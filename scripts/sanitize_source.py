#!/usr/bin/python3
from pathlib import Path

import click

from verification.sanitizer import sanitize_source
from verification.utils import _read_text, _write_text


@click.command()
@click.option(
    "--source",
    "-s",
    help="Filepath of the flattened source file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)
@click.option(
    "--output",
    "-o",
    help="Filepath of the cleaned source file; defaults to rewriting the input",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
def cli(source, output):
    """Strip the build banner and duplicate license and pragma lines from a flattened file."""
    original = _read_text(source)
    cleaned = sanitize_source(original)
    output = output or source
    _write_text(output, cleaned)

    removed = len(original.splitlines()) - len(cleaned.splitlines())
    click.echo(f"(i) Removed {removed} line(s); wrote {output}")


if __name__ == "__main__":
    cli()

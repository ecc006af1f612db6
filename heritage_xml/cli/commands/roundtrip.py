"""Roundtrip command - read a document and write it back out."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...codec import XMLCodec
from ...exceptions import HeritageXMLError
from ...infrastructure.logging import ConsoleLogger
from ..helpers import VOCABULARY_CHOICE, load_config, resolve_vocabulary
from ..presenters import IssuesPresenter

# Diagnostics go to stderr so the document can be piped.
console = Console(stderr=True)


@click.command()
@click.argument("vocabulary", type=VOCABULARY_CHOICE)
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the document to this file (default: stdout)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a heritage_xml.toml config file (default: ./heritage_xml.toml)",
)
@click.option(
    "--strict/--lax",
    default=None,
    help="Fail on the first binding issue",
)
@click.option(
    "--pretty/--compact",
    "pretty_print",
    default=None,
    help="Indent the written document",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def roundtrip_command(
    vocabulary: str,
    source: Path,
    output: Path | None,
    config_file: Path | None,
    strict: bool | None,
    pretty_print: bool | None,
    verbose: int,
) -> None:
    """Unmarshal SOURCE and marshal it again.

    Content the vocabulary does not bind is dropped, so the result shows
    exactly what the typed records carry.

    Examples:

    \b
        heritage-xml roundtrip aat 300021512.rdf --pretty
        heritage-xml roundtrip lido record.xml -o normalized.xml
    """
    config = load_config(config_file, strict=strict, pretty_print=pretty_print)
    logger = ConsoleLogger(console, verbosity=verbose)
    codec = XMLCodec(config, logger)
    cls = resolve_vocabulary(vocabulary)

    try:
        result = codec.decode(source.read_bytes(), cls)
        if not result.ok:
            IssuesPresenter(console).present(source, result.issues)
        data = codec.marshal(result.record)
    except HeritageXMLError as exc:
        logger.error(f"{source}: {exc}")
        raise click.ClickException(str(exc)) from exc

    if output is not None:
        output.write_bytes(data)
        logger.success(f"Wrote {output}")
    else:
        click.echo(data, nl=False)
    logger.log_final_stats()

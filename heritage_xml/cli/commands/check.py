"""Check command - bind a document and report what does not fit its vocabulary."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...codec import XMLCodec
from ...exceptions import HeritageXMLError
from ...infrastructure.logging import ConsoleLogger
from ..helpers import VOCABULARY_CHOICE, load_config, resolve_vocabulary
from ..presenters import IssuesPresenter

console = Console()


@click.command()
@click.argument("vocabulary", type=VOCABULARY_CHOICE)
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a heritage_xml.toml config file (default: ./heritage_xml.toml)",
)
@click.option(
    "--strict/--lax",
    default=None,
    help="Stop at the first issue instead of collecting all of them",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def check_command(
    vocabulary: str,
    source: Path,
    config_file: Path | None,
    strict: bool | None,
    verbose: int,
) -> None:
    """Bind SOURCE to the root type of VOCABULARY and list the binding issues.

    Unknown elements and attributes are skipped silently; lexical errors and
    missing or repeated required content are reported.

    Examples:

    \b
        heritage-xml check lido record.xml
        heritage-xml check mets package/METS.xml --strict -v
    """
    config = load_config(config_file, strict=strict)
    logger = ConsoleLogger(console, verbosity=verbose)
    codec = XMLCodec(config, logger)
    cls = resolve_vocabulary(vocabulary)

    try:
        result = codec.decode(source.read_bytes(), cls)
    except HeritageXMLError as exc:
        logger.error(f"{source}: {exc}")
        raise click.ClickException(str(exc)) from exc

    IssuesPresenter(console).present(source, result.issues)
    logger.log_final_stats()
    if not result.ok:
        raise click.ClickException(f"{len(result.issues)} binding issue(s) in {source}")

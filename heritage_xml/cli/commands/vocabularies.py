import click
from rich.console import Console
from rich.table import Table

from ...binding import binding_for
from ...vocab import DOCUMENT_TYPES

console = Console()


@click.command()
def list_vocabularies_command() -> None:
    table = Table(title="Document Vocabularies")
    table.add_column("Key", style="cyan")
    table.add_column("Root Element")
    table.add_column("Record Type")
    for key, cls in sorted(DOCUMENT_TYPES.items()):
        qname = binding_for(cls).qname
        table.add_row(key, str(qname), f"{cls.__module__}.{cls.__name__}")
    console.print(table)

import click

from .commands.check import check_command
from .commands.roundtrip import roundtrip_command
from .commands.vocabularies import list_vocabularies_command


@click.group()
def app() -> None:
    pass


app.add_command(list_vocabularies_command, name="vocabularies")
app.add_command(check_command, name="check")
app.add_command(roundtrip_command, name="roundtrip")
__all__ = ["app"]

import typer

from . import generate, list

app = typer.Typer(help="Setting documentation commands.")

app.command("generate")(generate.generate_command)
app.command("list")(list.list_settings)

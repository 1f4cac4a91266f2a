import sys
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from haven.core.documentation import DEFAULT_NAMESPACE, SettingDocumentationError, SettingDocumentationGenerator
from haven.core.documentation.templates import type_to_string

from .console import configure_logging, console, err_console


def list_settings(
    source: str = typer.Argument(..., help="Directory or zip/wheel archive to scan"),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", envvar="HAVEN_SETTINGS_NAMESPACE", help="Only modules in this package are scanned"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every scanned component and setting"),
):
    """List the settings declared in a single source."""
    configure_logging(verbose)

    generator = SettingDocumentationGenerator(namespace=namespace or DEFAULT_NAMESPACE)
    try:
        generator.find_settings(source, source)
    except SettingDocumentationError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    settings = generator.settings[0]
    if not settings:
        console.print(f"[yellow]No settings found in {source}[/yellow]")
        return

    table = Table(title=f"Settings in {source} ({len(settings)})")
    table.add_column("Key", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Default / Mandatory")

    for setting in settings:
        if setting.default_value is not None:
            default = repr(setting.default_value)
        else:
            default = "mandatory" if setting.mandatory else "optional"

        type_name = type_to_string(setting.type)
        if setting.key in generator.enum_values:
            type_name += f" ({', '.join(generator.enum_values[setting.key])})"
        table.add_row(escape(setting.key), escape(type_name), escape(default))

    console.print(table)

"""
Generation of config_template.properties.

Pass source locations followed by the section name for the settings found there::

    haven-settings generate ../haven-core "Main Infrastructure" dist/plugin1.whl "Plugin 1"

Without arguments, the sources of the job file given with ``--config`` are scanned, or the
default sibling checkouts of the main infrastructure and the public plugins.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from haven.core.documentation import (
    DEFAULT_NAMESPACE,
    DocumentationJob,
    SettingDocumentationError,
    SettingDocumentationGenerator,
)

from .console import configure_logging, err_console


def generate_command(
    arguments: Optional[List[str]] = typer.Argument(
        None, help="Pairs of <source> <section name>. A source is a directory or a zip/wheel archive."
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the template to this file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML job file listing the sources"),
    namespace: Optional[str] = typer.Option(
        None,
        "--namespace",
        "-n",
        envvar="HAVEN_SETTINGS_NAMESPACE",
        help=f"Only modules in this package are scanned [default: {DEFAULT_NAMESPACE}]",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every scanned component and setting"),
):
    """Generate the configuration template documenting all known settings."""
    configure_logging(verbose)

    if arguments:
        if len(arguments) % 2 != 0:
            raise typer.BadParameter("Expecting: (<source> <section name>)*", param_hint="ARGUMENTS")
        pairs = list(zip(arguments[0::2], arguments[1::2]))
        job = DocumentationJob.from_pairs(pairs, namespace=namespace or DEFAULT_NAMESPACE)
    elif config is not None:
        job = _load_job(config)
        if namespace:
            job = job.model_copy(update={"namespace": namespace})
    else:
        job = DocumentationJob.default(namespace=namespace or DEFAULT_NAMESPACE)

    try:
        text = generate_setting_text(job)
    except SettingDocumentationError:
        err_console.print_exception()
        sys.exit(1)

    destination = output or (Path(job.output) if job.output else None)
    if destination is not None:
        destination.write_text(text, encoding="utf-8")
        err_console.print(f"[green]Configuration template written to {destination}[/green]")
    else:
        typer.echo(text, nl=False)


def generate_setting_text(job: DocumentationJob) -> str:
    """Scan all sources of a job, in order, and render the configuration template."""
    generator = SettingDocumentationGenerator(namespace=job.namespace)
    for source in job.sources:
        generator.find_settings(source.path, source.section)
    return generator.generate_setting_text()


def _load_job(config: Path) -> DocumentationJob:
    try:
        return DocumentationJob.from_yaml(config)
    except Exception as e:
        err_console.print(f"[red]Error: Invalid job file {config}: {escape(str(e))}[/red]")
        sys.exit(1)

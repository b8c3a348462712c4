"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from octopub.cli.commands import config_cmd, export_cmd, publish_cmd, rename_cmd


app = typer.Typer(name="octopub", no_args_is_help=True, help="Markdown to Octopress/Jekyll post exporter")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="export")(export_cmd)
app.command(name="publish")(publish_cmd)
app.command(name="rename")(rename_cmd)
app.command(name="config")(config_cmd)

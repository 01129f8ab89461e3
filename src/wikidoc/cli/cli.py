"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from wikidoc.cli.commands import check_cmd, export_cmd, preview_cmd, search_cmd, show_cmd
from wikidoc.logs import configure_logging


app = typer.Typer(name="wikidoc", no_args_is_help=True, help="Wiki article parser and previewer")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    log_json: Annotated[bool, typer.Option("--log-json", help="Log JSON lines to stderr")] = False,
    ):
    configure_logging(verbose=verbose, log_json=log_json)


app.command(name="preview")(preview_cmd)
app.command(name="check")(check_cmd)
app.command(name="show")(show_cmd)
app.command(name="search")(search_cmd)
app.command(name="export")(export_cmd)

"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from docdiff.cli.commands import (
    _settings, add_cmd, compare_cmd, diff_cmd, diff_versions_cmd, history_cmd,
    init_cmd, list_cmd, revert_cmd, revert_line_cmd, rollback_cmd,
)
from docdiff.logging_utils import configure_logging


app = typer.Typer(name="docdiff", no_args_is_help=True, help="Line diffs between text documents, with line-level revert")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ...")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Shorthand for --log-level DEBUG")] = False,
    log_file: Annotated[Optional[str], typer.Option("--log-file", help="Also append log records to this file")] = None,
    ):
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else (log_level or _settings().log_level)
    configure_logging(level, log_file=log_file, trace=verbose)


app.command(name="diff")(diff_cmd)
app.command(name="init")(init_cmd)
app.command(name="add")(add_cmd)
app.command(name="list")(list_cmd)
app.command(name="compare")(compare_cmd)
app.command(name="revert")(revert_cmd)
app.command(name="revert-line")(revert_line_cmd)
app.command(name="history")(history_cmd)
app.command(name="diff-versions")(diff_versions_cmd)
app.command(name="rollback")(rollback_cmd)

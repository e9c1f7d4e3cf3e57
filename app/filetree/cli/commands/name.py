"""Filename sanitization command."""

from typing import Annotated

import typer

from filetree.core.config import require_config
from filetree.tree.sanitize import to_legal_name

app = typer.Typer(
    help="Filename helpers.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def sanitize(
    names: Annotated[list[str], typer.Argument(help="Candidate filenames.")],
    replacement: Annotated[
        str | None,
        typer.Option(
            "--replacement",
            "-r",
            help="Text substituted for each illegal character (default from config).",
        ),
    ] = None,
) -> None:
    """Replace illegal filename characters (/ \\ : * ? \" < > | { }) in each NAME."""
    if replacement is None:
        replacement = require_config().replacement

    # Plain output, one name per line, so results can be piped
    for candidate in names:
        typer.echo(to_legal_name(candidate, replacement))

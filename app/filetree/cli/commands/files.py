"""File listing, type and cleanup commands.

Provides commands to list the files under a path, print file types,
and delete files or whole trees according to a deletion policy.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filetree.cli.types import OutputFormat, select_policy
from filetree.core.config import require_config
from filetree.tree.classifier import file_type, filter_by_type, resolved_file_type
from filetree.tree.models import DeletionPolicy, DeletionReport, TreeEntry
from filetree.tree.operator import TreeOperator
from filetree.tree.resolver import canonical_path
from filetree.tree.traversal import iter_files
from filetree.utils.formatting import (
    console,
    create_file_table,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="List, classify and delete files.",
    invoke_without_command=True,
    no_args_is_help=True,
)

_POLICY_LABELS: dict[DeletionPolicy, str] = {
    DeletionPolicy.ALL_FILES: "all files (recursive)",
    DeletionPolicy.ALL_EMPTY_FILES: "empty files (recursive)",
    DeletionPolicy.FILES: "files (direct children only)",
    DeletionPolicy.EMPTY_FILES: "empty files (direct children only)",
    DeletionPolicy.DIRECTORY: "entire directory tree",
}


@app.command("list")
def list_files(
    path: Annotated[Path, typer.Argument(help="File or directory to walk.")],
    canonical: Annotated[
        bool,
        typer.Option("--paths", "-p", help="Show canonical absolute paths."),
    ] = False,
    type_filter: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only files with this extension (case-insensitive)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of results.",
        ),
    ] = None,
) -> None:
    """List every file beneath PATH (directories are not listed)."""
    entries = list(iter_files(path))

    if type_filter is not None:
        if not type_filter:
            print_warning("An empty --type matches no files.")
        keep = set(filter_by_type(type_filter, [e.path for e in entries]))
        entries = [e for e in entries if e.path in keep]

    if not entries:
        print_info(f"No files found under {escape(str(path))}.")
        return

    display_entries = entries[:limit] if limit else entries

    if output_format == OutputFormat.JSON:
        _print_json(display_entries, canonical)
        return

    table = create_file_table(f"Files under {escape(str(path))}")
    for entry in display_entries:
        table.add_row(
            escape(_display_path(entry, canonical)),
            escape(_display_type(entry)),
            format_size(entry.size),
        )
    console.print(table)

    total_size = sum(e.size or 0 for e in entries)
    console.print(f"\n[dim]Found {len(entries)} files ({format_size(total_size)} total)[/dim]")
    if limit and len(display_entries) < len(entries):
        console.print(
            f"[dim](showing {len(display_entries)} of {len(entries)}, limited to {limit})[/dim]"
        )


@app.command("type")
def show_type(
    paths: Annotated[list[str], typer.Argument(help="Paths to classify.")],
) -> None:
    """Print the type (text after the last dot) of each PATH."""
    # Plain tab-separated output so results can be piped
    for path in paths:
        typer.echo(f"{path}\t{file_type(path)}")


@app.command()
def clean(
    path: Annotated[Path, typer.Argument(help="File or directory to clean.")],
    empty: Annotated[
        bool,
        typer.Option("--empty", "-e", help="Only delete zero-byte files."),
    ] = False,
    shallow: Annotated[
        bool,
        typer.Option("--shallow", "-s", help="Do not descend into subdirectories."),
    ] = False,
    whole_dir: Annotated[
        bool,
        typer.Option("--dir", "-d", help="Delete PATH itself and everything beneath it."),
    ] = False,
    dry_run: Annotated[
        bool | None,
        typer.Option(
            "--dry-run/--no-dry-run",
            help="Show what would be deleted. Defaults to the dry_run config setting.",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete files beneath PATH according to the selected policy."""
    try:
        policy = select_policy(empty=empty, shallow=shallow, whole_dir=whole_dir)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    settings = require_config()
    if dry_run is None:
        dry_run = settings.dry_run

    if not path.exists() and not path.is_symlink():
        print_info(f"Nothing to clean: {escape(str(path))} does not exist.")
        return

    if not dry_run and settings.confirm and not yes:
        confirmed = typer.confirm(
            f"Delete {_POLICY_LABELS[policy]} under {path}?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    operator = TreeOperator(dry_run=dry_run)
    report = operator.run(path, policy)

    _print_report(report)

    if not report.success:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _display_path(entry: TreeEntry, canonical: bool) -> str:
    return canonical_path(entry.path) if canonical else entry.path


def _display_type(entry: TreeEntry) -> str:
    # Same value the --type filter compares against
    return resolved_file_type(entry.path)


def _print_json(entries: list[TreeEntry], canonical: bool) -> None:
    """Display files as JSON."""
    data = [
        {
            "path": _display_path(e, canonical),
            "type": _display_type(e),
            "size_bytes": e.size,
        }
        for e in entries
    ]
    console.print_json(json.dumps(data))


def _print_report(report: DeletionReport) -> None:
    """Display deletion results."""
    label = "Deletion Results (dry-run)" if report.dry_run else "Deletion Results"
    table = Table(title=label, show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for deleted in report.deleted:
        if report.dry_run:
            table.add_row(escape(deleted), "[info]dry-run[/]", "Would delete")
        else:
            table.add_row(escape(deleted), "[success]deleted[/]", "")
    for failure in report.failed:
        table.add_row(escape(failure.path), "[error]failed[/]", escape(failure.error))

    if table.row_count:
        console.print(table)

    if report.dry_run:
        print_info(f"Dry-run: {len(report.deleted)} path(s) would be deleted.")
    elif report.failed:
        print_warning(f"{len(report.deleted)} deleted, {len(report.failed)} failed")
    elif report.deleted:
        print_success(f"All {len(report.deleted)} path(s) deleted successfully.")
    else:
        print_info("Nothing matched the selected policy.")

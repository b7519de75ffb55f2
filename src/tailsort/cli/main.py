"""tailsort CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from tailsort import __version__
from tailsort.config.resolve import resolve_options
from tailsort.errors import TailsortError
from tailsort.model.options import WriteMode
from tailsort.runner import Runner


@click.command()
@click.version_option(version=__version__, prog_name="tailsort")
@click.argument("file_or_dir", nargs=-1, type=click.Path())
@click.option("--write", is_flag=True, help="Write sorted classes back to the files")
@click.option("--dry-run", is_flag=True, help="Print a diff of the changes without writing")
@click.option(
    "--check-formatted",
    is_flag=True,
    help="Exit with status 1 if any file has unsorted classes",
)
@click.option("--stdin", "use_stdin", is_flag=True, help="Read text from stdin and print the result")
@click.option("--allow-duplicates", is_flag=True, help="Keep repeated classes")
@click.option(
    "--custom-regex",
    default=None,
    help="Pattern whose first capture group is the class string",
)
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file with sortOrder and customRegex",
)
@click.option(
    "--ignored-files",
    multiple=True,
    type=click.Path(),
    help="File to leave untouched (repeatable)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    file_or_dir: tuple[str, ...],
    write: bool,
    dry_run: bool,
    check_formatted: bool,
    use_stdin: bool,
    allow_duplicates: bool,
    custom_regex: str | None,
    config_file: str | None,
    ignored_files: tuple[str, ...],
    verbose: bool,
) -> None:
    """Sort utility classes in class attributes into a canonical order.

    Searches FILE_OR_DIR (files, or directories walked recursively) or stdin
    for class attributes and sorts their classes.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not file_or_dir and not use_stdin:
        raise click.UsageError("Provide at least one FILE_OR_DIR or --stdin")

    stdin_text = sys.stdin.read() if use_stdin else None

    try:
        options = resolve_options(
            paths=file_or_dir,
            stdin_text=stdin_text,
            write=write,
            dry_run=dry_run,
            check_formatted=check_formatted,
            allow_duplicates=allow_duplicates,
            custom_regex=custom_regex,
            config_file=config_file,
            ignored_files=ignored_files,
        )
    except TailsortError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    report = Runner(options).run()

    if options.write_mode is WriteMode.CHECK_FORMATTED:
        if not report.ok:
            click.echo(f"{len(report.changed)} file(s) have unsorted classes", err=True)
            sys.exit(1)
        click.echo("All classes are sorted")
    elif options.write_mode is WriteMode.TO_FILE:
        click.echo(f"Sorted classes in {len(report.changed)} file(s)")

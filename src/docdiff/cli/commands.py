"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from sqlmodel import Session

from docdiff.config import Settings, load_config
from docdiff.core.diff import compute_diff
from docdiff.core.models import DiffKind, DiffResult
from docdiff.core.pipeline import compare_documents, revert_document, revert_document_line, run_add
from docdiff.crud.database import init_db, make_engine, reset_db
from docdiff.crud.documents import get_all_documents, resolve_document
from docdiff.crud.versioning import diff_versions, list_versions, revert_to_version
from docdiff.errors import DocDiffError
from docdiff.renderers.base import format_stats
from docdiff.renderers.registry import get_renderer


ViewOpt = Annotated[Optional[str], typer.Option("--view", help="unified, split, or html")]
ContextOpt = Annotated[Optional[int], typer.Option("--context", "-U", help="Unchanged lines kept around each change")]
FullOpt = Annotated[bool, typer.Option("--full", help="Show every unchanged line (no collapsing)")]
StatOpt = Annotated[bool, typer.Option("--stat", help="Print only the change summary")]
ColorOpt = Annotated[Optional[bool], typer.Option("--color/--no-color", help="ANSI colors in terminal views")]
WidthOpt = Annotated[Optional[int], typer.Option("--width", help="Column width of the split view")]
OutOpt = Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the rendered diff to a file")]
ExitCodeOpt = Annotated[bool, typer.Option("--exit-code", help="Exit 1 when the documents differ")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _engine(settings: Settings):
    engine = make_engine(settings.db_url)
    init_db(engine)
    return engine


def _emit(
    result: DiffResult,
    settings: Settings,
    stat: bool,
    out: Optional[Path],
    old_title: str,
    new_title: str,
    exit_code: bool,
    ) -> None:
    """Render result with the configured view and write it to stdout or --out."""
    if stat:
        text = format_stats(result.stats) + "\n"
    else:
        renderer = get_renderer(
            settings.view, color=settings.color and out is None, width=settings.width,
            old_title=old_title, new_title=new_title,
        )
        text = renderer.render(result)

    if out:
        try:
            out.write_text(text, encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot write {out}", e)
        typer.echo(f"Wrote {out} ({format_stats(result.stats)})")
    else:
        typer.echo(text, nl=False)

    if exit_code and not result.is_identical:
        raise typer.Exit(1)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def diff_cmd(
    old: Annotated[Path, typer.Argument(help="Original file")],
    new: Annotated[Path, typer.Argument(help="Changed file")],
    view: ViewOpt = None,
    context: ContextOpt = None,
    full: FullOpt = False,
    reverse: Annotated[bool, typer.Option("--reverse", "-R", help="Swap the two sides")] = False,
    stat: StatOpt = False,
    color: ColorOpt = None,
    width: WidthOpt = None,
    out: OutOpt = None,
    exit_code: ExitCodeOpt = False,
    ):
    """Show the line diff between two files."""
    settings = _settings(overrides={"view": view, "context_lines": context, "color": color, "width": width})
    if reverse:
        old, new = new, old
    result = compute_diff(_read(old), _read(new), context_lines=settings.context_lines, collapse=not full)
    _emit(result, settings, stat, out, str(old), str(new), exit_code)


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing data cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def add_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to store")],
    ):
    """Store markdown files in the document database (updates snapshot the old content)."""
    settings = _settings()
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            results = run_add(session, path, settings.max_versions)
            session.commit()
            lines = [f"  {status}: {doc.slug}" for status, doc in results]
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .md/.mdx files found at {path}.")
        raise typer.Exit(1)
    for line in lines:
        typer.echo(line)
    typer.echo(f"Stored {len(results)} document(s)")


def list_cmd():
    """List stored documents."""
    settings = _settings()
    engine = _engine(settings)
    with Session(engine) as session:
        docs = [(d.slug, d.title, d.path) for d in get_all_documents(session)]
    if not docs:
        typer.echo("No documents found in database.")
        raise typer.Exit(1)
    for slug, title, path in docs:
        typer.echo(f"{slug}\t{title}\t{path}")


def compare_cmd(
    old: Annotated[str, typer.Argument(help="Slug or path of the original document")],
    new: Annotated[str, typer.Argument(help="Slug or path of the changed document")],
    fmt: Annotated[str, typer.Option("--format", help="kramdown (with attribute lines) or markdown")] = "kramdown",
    swap: Annotated[bool, typer.Option("--swap", help="Swap the two sides")] = False,
    view: ViewOpt = None,
    context: ContextOpt = None,
    full: FullOpt = False,
    stat: StatOpt = False,
    color: ColorOpt = None,
    width: WidthOpt = None,
    out: OutOpt = None,
    exit_code: ExitCodeOpt = False,
    ):
    """Show the line diff between two stored documents."""
    settings = _settings(overrides={"view": view, "context_lines": context, "color": color, "width": width})
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            left, right, result = compare_documents(
                session, old, new, fmt=fmt, swap=swap,
                context_lines=settings.context_lines, collapse=not full,
            )
            titles = left.title, right.title
    except (DocDiffError, ValueError) as e:
        _fail(str(e))
    _emit(result, settings, stat, out, titles[0], titles[1], exit_code)


def revert_cmd(
    old: Annotated[str, typer.Argument(help="Slug or path of the document to copy from")],
    new: Annotated[str, typer.Argument(help="Slug or path of the document to overwrite")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
    ):
    """Revert every change: overwrite NEW with the content of OLD."""
    settings = _settings()
    engine = _engine(settings)
    if not yes:
        typer.confirm(f"Overwrite '{new}' with the content of '{old}'?", abort=True)
    try:
        with Session(engine) as session:
            changed = revert_document(session, old, new, settings.max_versions)
            session.commit()
    except DocDiffError as e:
        _fail(str(e))
    typer.echo("Reverted." if changed else "Already identical; nothing to revert.")


def revert_line_cmd(
    old: Annotated[str, typer.Argument(help="Slug or path of the original document")],
    new: Annotated[str, typer.Argument(help="Slug or path of the document to edit")],
    added: Annotated[Optional[int], typer.Option("--added", help="New line number of an added line to delete")] = None,
    removed: Annotated[Optional[int], typer.Option("--removed", help="Old line number of a removed line to restore")] = None,
    ):
    """Undo a single changed line in NEW. Line numbers are those of `compare --format kramdown`."""
    if (added is None) == (removed is None):
        _fail("Pass exactly one of --added or --removed")
    kind, number = (DiffKind.added, added) if added is not None else (DiffKind.removed, removed)
    settings = _settings()
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            doc = revert_document_line(session, old, new, kind, number, settings.max_versions)
            slug = doc.slug
            session.commit()
    except DocDiffError as e:
        _fail(str(e))
    typer.echo(f"Reverted {kind.value} line {number} in {slug}")


def history_cmd(
    key: Annotated[str, typer.Argument(help="Slug or path of a stored document")],
    ):
    """List the stored versions of a document."""
    settings = _settings()
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            doc = resolve_document(session, key)
            rows = [(v.version_num, v.created_at, v.hash) for v in list_versions(session, doc.id)]
    except DocDiffError as e:
        _fail(str(e))
    if not rows:
        typer.echo("No versions stored.")
        return
    for num, created_at, content_hash in rows:
        typer.echo(f"v{num}\t{created_at:%Y-%m-%d %H:%M:%S}\t{content_hash[:12]}")


def diff_versions_cmd(
    key: Annotated[str, typer.Argument(help="Slug or path of a stored document")],
    from_num: Annotated[int, typer.Argument(help="Older version number")],
    to_num: Annotated[int, typer.Argument(help="Newer version number")],
    view: ViewOpt = None,
    context: ContextOpt = None,
    color: ColorOpt = None,
    width: WidthOpt = None,
    ):
    """Show the line diff between two stored versions of a document."""
    settings = _settings(overrides={"view": view, "context_lines": context, "color": color, "width": width})
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            doc = resolve_document(session, key)
            result = diff_versions(session, doc.id, from_num, to_num, settings.context_lines)
    except (DocDiffError, ValueError) as e:
        _fail(str(e))
    _emit(result, settings, False, None, f"v{from_num}", f"v{to_num}", False)


def rollback_cmd(
    key: Annotated[str, typer.Argument(help="Slug or path of a stored document")],
    version: Annotated[int, typer.Argument(help="Version number to restore")],
    ):
    """Restore a stored version (the current content is kept as a new version)."""
    settings = _settings()
    engine = _engine(settings)
    try:
        with Session(engine) as session:
            doc = resolve_document(session, key)
            revert_to_version(session, doc, version, settings.max_versions)
            session.commit()
    except (DocDiffError, ValueError) as e:
        _fail(str(e))
    typer.echo(f"Restored {key} to v{version}")

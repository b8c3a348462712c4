"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from octopub.config import Settings, load_config
from octopub.core.export import export_text, make_renderer
from octopub.core.parse import parse_file
from octopub.core.pipeline import run_export, run_rename


LayoutOption = Annotated[Optional[str], typer.Option("--layout", help="Default layout")]
PublishedOption = Annotated[Optional[str], typer.Option("--published", help="Default published state ('true' publishes)")]
CategoriesOption = Annotated[Optional[str], typer.Option("--categories", help="Default space-separated categories")]
TagsOption = Annotated[Optional[str], typer.Option("--tags", help="Default space-separated tags")]
TocOption = Annotated[Optional[int], typer.Option("--toc-depth", help="Default TOC depth; 0 = none")]


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
    except ValueError as e:
        _fail(str(e))


def export_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to export")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write to this file instead of stdout")] = None,
    layout: LayoutOption = None,
    published: PublishedOption = None,
    categories: CategoriesOption = None,
    tags: TagsOption = None,
    toc_depth: TocOption = None,
    ):
    """Export a single file as front matter + HTML body."""
    settings = _settings(overrides={
        "default_layout": layout, "default_published": published,
        "default_categories": categories, "default_tags": tags, "toc_depth": toc_depth,
    })
    if not path.is_file():
        _fail(f"No such file: {path}")
    try:
        text = export_text(parse_file(path), make_renderer(settings))
    except ValueError as e:
        _fail(f"Failed to export {path}", e)
    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"  {path} -> {out}")


def publish_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to publish")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ext: Annotated[Optional[str], typer.Option("--ext", help="Output file extension (html, md, markdown)")] = None,
    layout: LayoutOption = None,
    published: PublishedOption = None,
    categories: CategoriesOption = None,
    tags: TagsOption = None,
    toc_depth: TocOption = None,
    ):
    """Export a file or directory tree into the output directory."""
    settings = _settings(overrides={
        "output_dir": out, "output_ext": ext,
        "default_layout": layout, "default_published": published,
        "default_categories": categories, "default_tags": tags, "toc_depth": toc_depth,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found under {path}.")
        raise typer.Exit(1)
    for src, dest in results:
        typer.echo(f"  {src} -> {dest}")
    typer.echo(f"Published {len(results)} document(s) to {output_dir}/")


def rename_cmd(
    path: Annotated[str, typer.Argument(help="File or directory whose files get date-prefixed names")],
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show renames without applying them")] = False,
    ):
    """Rename files so their names start with the publish date from metadata.

    An existing YYYY-MM-DD- prefix is replaced; names without one get the date prepended.
    """
    settings = _settings()
    try:
        changes = run_rename(path, settings, dry_run=dry_run)
    except RuntimeError as e:
        _fail(str(e))
    for old, new in changes:
        typer.echo(f"  {old} -> {new}")
    verb = "Would rename" if dry_run else "Renamed"
    typer.echo(f"{verb} {len(changes)} file(s)")


def config_cmd():
    """Print the effective settings as YAML."""
    settings = _settings()
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False), nl=False)

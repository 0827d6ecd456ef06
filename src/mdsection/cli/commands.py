"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdsection.config import Settings, load_config
from mdsection.core.classes import compute_classes
from mdsection.core.dump import dump_tree
from mdsection.core.pipeline import build_tree, run_render
from mdsection.log import configure_logging


SectionClassOpt = Annotated[Optional[bool], typer.Option("--section-class/--no-section-class", help="Add section-h{level}")]
HeadingClassOpt = Annotated[Optional[bool], typer.Option("--heading-class/--no-heading-class", help="Add h{level}")]
PrefixOpt       = Annotated[Optional[str],  typer.Option("--prefix", help="Add {prefix}h{level}")]
CustomClassOpt  = Annotated[Optional[str],  typer.Option("--custom-class", help="Add a literal class to every section")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _class_overrides(section_class, heading_class, prefix, custom_class) -> dict:
    return {
        "section_class": section_class, "heading_class": heading_class,
        "custom_class_prefix": prefix, "custom_class": custom_class,
    }


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    section_class: SectionClassOpt = None,
    heading_class: HeadingClassOpt = None,
    prefix: PrefixOpt = None,
    custom_class: CustomClassOpt = None,
    ):
    """Render markdown files to HTML with nested <section> wrappers."""
    settings = _settings(overrides={
        "output_dir": out, "parser_config": parser,
        **_class_overrides(section_class, heading_class, prefix, custom_class),
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .md/.mdx files found at {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def tree_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to outline")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the grouped section tree of a markdown file."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        doc = build_tree(path.read_text(encoding='utf-8'), settings)
    except (OSError, ValueError) as e:
        _fail(f"Could not read {path}", e)
    typer.echo(dump_tree(doc))


def classes_cmd(
    level: Annotated[int, typer.Argument(help="Heading level")],
    section_class: SectionClassOpt = None,
    heading_class: HeadingClassOpt = None,
    prefix: PrefixOpt = None,
    custom_class: CustomClassOpt = None,
    ):
    """Print the class attribute value a section of LEVEL would get."""
    settings = _settings(overrides=_class_overrides(section_class, heading_class, prefix, custom_class))
    typer.echo(compute_classes(level, settings.section_config()))

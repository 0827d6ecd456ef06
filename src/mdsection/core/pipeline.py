"""Pipeline step functions: build section trees and render files to HTML"""

import logging
from pathlib import Path

from mdsection.config import Settings
from mdsection.core.blocks import tokens_to_nodes
from mdsection.core.group import group
from mdsection.core.models import Document
from mdsection.core.parse import discover_files, make_parser, strip_frontmatter
from mdsection.plugin import section_wrapper_plugin


logger = logging.getLogger(__name__)


def build_tree(text: str, settings: Settings) -> Document:
    """Parse markdown (frontmatter stripped) and return its grouped Document."""
    _, body = strip_frontmatter(text)
    tokens = make_parser(settings.parser_config).parse(body)
    return group(Document(children=tokens_to_nodes(tokens)), 0)


def render_markdown(text: str, settings: Settings) -> str:
    """Render markdown (frontmatter stripped) to HTML with nested sections."""
    _, body = strip_frontmatter(text)
    md = make_parser(settings.parser_config).use(section_wrapper_plugin, config=settings.section_config())
    return md.render(body)


def _output_path(src: Path, root: Path, output_dir: Path) -> Path:
    """Mirror src's location relative to root under output_dir, with an .html suffix."""
    rel = src.relative_to(root) if root.is_dir() else Path(src.name)
    return output_dir / rel.with_suffix('.html')


def run_render(path: str, settings: Settings, output_dir: Path) -> list[tuple[Path, Path]]:
    """Render every markdown file under path into output_dir. Returns (source, output) pairs."""
    root = Path(path)
    results = []
    for p in discover_files(root):
        try:
            html = render_markdown(p.read_text(encoding='utf-8'), settings)
            out_file = _output_path(p, root, output_dir)
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(html, encoding='utf-8')
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("Rendered %s -> %s", p, out_file)
    return results

"""Render rules emitting <section> tags for section_open/section_close tokens"""

from markdown_it.common.utils import escapeHtml

from mdsection.config import SectionConfig
from mdsection.core.classes import compute_classes


def make_section_rules(config: SectionConfig):
    """Return (open_rule, close_rule) render functions bound to config.

    The class attribute is always written, even when it is empty.
    """
    def render_section_open(self, tokens, idx, options, env) -> str:
        classes = compute_classes(tokens[idx].meta["level"], config)
        return f'<section class="{escapeHtml(classes)}">\n'

    def render_section_close(self, tokens, idx, options, env) -> str:
        return "</section>\n"

    return render_section_open, render_section_close

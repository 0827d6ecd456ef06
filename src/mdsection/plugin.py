"""markdown-it-py plugin wrapping heading scopes in nested <section> elements

Usage::

    md = MarkdownIt().use(section_wrapper_plugin, config=SectionConfig(heading_class=True))
    html = md.render(text)
"""

import logging

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from mdsection.config import SectionConfig
from mdsection.core.blocks import nodes_to_tokens, tokens_to_nodes
from mdsection.core.group import group
from mdsection.core.models import Document, iter_sections
from mdsection.core.render import make_section_rules


logger = logging.getLogger(__name__)

TREE_ENV_KEY = "section_tree"


def section_wrapper_plugin(md: MarkdownIt, config: SectionConfig | None = None) -> None:
    """Register the section grouping core rule and the section render rules on md."""
    config = config or SectionConfig()

    def section_wrapper(state: StateCore) -> None:
        if state.inlineMode:
            return
        doc = group(Document(children=tokens_to_nodes(state.tokens)), 0)
        state.tokens = nodes_to_tokens(doc.children)
        state.env[TREE_ENV_KEY] = doc
        logger.debug("Wrapped %d section(s)", sum(1 for _ in iter_sections(doc.children)))

    md.core.ruler.push("section_wrapper", section_wrapper)
    open_rule, close_rule = make_section_rules(config)
    md.add_render_rule("section_open", open_rule)
    md.add_render_rule("section_close", close_rule)

"""Regroup a flat block sequence into nested sections by heading level"""

import logging

from mdsection.core.models import Heading, Node, Parent, Section


logger = logging.getLogger(__name__)


def _closes(node: Node, level: int) -> bool:
    """True if node is a heading that ends a section opened at level."""
    return isinstance(node, Heading) and node.level <= level


def group_nodes(nodes: list[Node], base_level: int = 0) -> list[Node]:
    """Return a new child list with a Section around every heading deeper than base_level.

    A section opened by a heading collects the following siblings up to, but not
    including, the next heading at the same or a shallower level. That heading is
    re-examined by this scan against base_level. Everything else passes through
    unchanged. Sections are grouped recursively with their own level as base.
    """
    grouped: list[Node] = []
    i = 0
    while i < len(nodes):
        node = nodes[i]
        if isinstance(node, Heading) and node.level > base_level:
            j = i + 1
            while j < len(nodes) and not _closes(nodes[j], node.level):
                j += 1
            grouped.append(Section(level=node.level, children=nodes[i:j]))
            i = j
        else:
            grouped.append(node)
            i += 1

    for node in grouped:
        if isinstance(node, Section):
            group(node, node.level)
    return grouped


def group(node: Parent, base_level: int = 0) -> Parent:
    """Replace node.children with its grouped form and return node."""
    node.children = group_nodes(node.children, base_level)
    logger.debug("Grouped %d node(s) at base level %d", len(node.children), base_level)
    return node

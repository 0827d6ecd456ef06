"""Indented text outline of a document tree, for debugging"""

from mdsection.core.models import Block, Document, Heading, Section


def _label(node) -> str:
    if isinstance(node, Document):
        return "Document"
    if isinstance(node, Section):
        return f"Section(level={node.level})"
    if isinstance(node, Heading):
        return f'Heading(level={node.level}) "{node.content}"'
    if isinstance(node, Block):
        return f"Block({node.kind})"
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _lines(node, depth: int) -> list[str]:
    lines = ["  " * depth + _label(node)]
    for child in getattr(node, "children", []):
        lines.extend(_lines(child, depth + 1))
    return lines


def dump_tree(node) -> str:
    """Return one line per node, indented two spaces per nesting depth."""
    return "\n".join(_lines(node, 0))

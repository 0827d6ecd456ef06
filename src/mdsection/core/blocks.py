"""Conversion between flat markdown-it token streams and document tree nodes"""

from markdown_it.token import Token

from mdsection.core.models import Block, Heading, Node, Section
from mdsection.core.utils.tokens import heading_level, inline_text


def _make_node(run: list[Token]) -> Node:
    """Wrap one top-level token run as a Heading or an opaque Block."""
    first = run[0]
    level = heading_level(first)
    if level is not None:
        return Heading(level=level, content=inline_text(run), tokens=run)
    return Block(
        kind=first.type.removesuffix('_open'),
        content=inline_text(run) or first.content,
        tokens=run,
    )


def tokens_to_nodes(tokens: list[Token]) -> list[Node]:
    """Split a block token stream into top-level nodes, one per balanced token run."""
    nodes: list[Node] = []
    run: list[Token] = []
    depth = 0

    for tok in tokens:
        run.append(tok)
        depth += tok.nesting
        if depth <= 0:
            nodes.append(_make_node(run))
            run, depth = [], 0
    if run:
        nodes.append(_make_node(run))
    return nodes


def nodes_to_tokens(nodes: list[Node], depth: int = 0) -> list[Token]:
    """Flatten nodes back into a token stream with section_open/section_close around sections."""
    tokens: list[Token] = []
    for node in nodes:
        if isinstance(node, Section):
            meta = {"level": node.level}
            tokens.append(Token("section_open", "section", 1, level=depth, meta=meta, block=True))
            tokens.extend(nodes_to_tokens(node.children, depth + 1))
            tokens.append(Token("section_close", "section", -1, level=depth, meta=dict(meta), block=True))
        else:
            tokens.extend(node.tokens)
    return tokens

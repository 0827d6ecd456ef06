"""Document tree node types used by the section grouper"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(eq=False)
class Heading:
    """A heading block: heading_open, inline, heading_close tokens."""
    level:   int
    content: str = ""               # plain heading text, for dumps and tests
    tokens:  list = field(default_factory=list)


@dataclass(eq=False)
class Block:
    """Any other top-level block, carried through as an opaque token run."""
    kind:    str                    # opening token type without '_open' (paragraph, fence, ...)
    content: str = ""
    tokens:  list = field(default_factory=list)


@dataclass(eq=False)
class Section:
    """Synthetic wrapper scoping one heading and everything nested under it.

    The first child is always the Heading that opened the section.
    """
    level:    int
    children: list["Node"] = field(default_factory=list)

    @property
    def heading(self) -> Heading:
        return self.children[0]


@dataclass(eq=False)
class Document:
    """Root of a parsed document; its children are grouped with base level 0."""
    children: list["Node"] = field(default_factory=list)


Node = Union[Heading, Block, Section]
Parent = Union[Document, Section]


def iter_leaves(nodes: list[Node]):
    """Yield Heading and Block nodes depth-first, ignoring Section boundaries."""
    for node in nodes:
        if isinstance(node, Section):
            yield from iter_leaves(node.children)
        else:
            yield node


def iter_sections(nodes: list[Node]):
    """Yield every Section depth-first, outermost first."""
    for node in nodes:
        if isinstance(node, Section):
            yield node
            yield from iter_sections(node.children)

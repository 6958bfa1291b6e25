"""Thin adapter over the justhtml parser.

The sanitizer only needs four things from a DOM: parse, walk in document
order, detach a subtree, and serialize. Everything justhtml-specific lives
here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from justhtml import JustHTML
from justhtml.context import FragmentContext
from justhtml.node import Template

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from justhtml.node import Node


def parse_markup(markup: str, *, document: bool = False) -> JustHTML:
    """Parse `markup` without justhtml's own sanitization.

    By default the input is parsed as a fragment in a `<div>` context, so no
    html/head/body skeleton is added. `document=True` parses a full document.
    """

    if document:
        return JustHTML(markup, safe=False)
    return JustHTML(markup, safe=False, fragment_context=FragmentContext("div"))


# The parser drops one newline right after these start tags, so serialization
# emits an extra one; otherwise every reparse loses a leading newline.
_LEADING_NEWLINE_ELEMENTS: frozenset[str] = frozenset({"pre", "textarea", "listing"})


def _restore_leading_newlines(root: Node) -> None:
    for node in iter_document_order(root):
        if str(node.name).lower() not in _LEADING_NEWLINE_ELEMENTS:
            continue
        children = getattr(node, "children", None)
        if not children:
            continue
        first = children[0]
        if first.name == "#text" and first.data and first.data.startswith("\n"):
            first.data = "\n" + first.data


def serialize(doc: JustHTML) -> str:
    _restore_leading_newlines(doc.root)
    return doc.to_html(pretty=False)


def child_nodes(node: Node) -> list[Node]:
    """Children of `node` in document order, including template contents."""

    children = list(getattr(node, "children", None) or [])
    if type(node) is Template and node.template_content is not None:
        children.append(node.template_content)
    return children


def iter_document_order(root: Node) -> Iterator[Node]:
    """Yield `root` and all its descendants, depth-first, left to right."""

    # Iterative traversal keeps deep trees off the Python call stack.
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_nodes(node)))


def collect(root: Node, predicate: Callable[[Node], bool]) -> list[Node]:
    """Return the topmost nodes matching `predicate`, in document order.

    Descendants of a matching node are not visited: detaching the match takes
    them with it.
    """

    found: list[Node] = []
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            found.append(node)
            continue
        stack.extend(reversed(child_nodes(node)))
    return found


def detach(node: Node) -> bool:
    """Remove `node` (and its subtree) from its parent.

    Returns False for a node that is already detached, such as the root.
    """

    parent = node.parent
    if parent is None:
        return False
    parent.remove_child(node)
    return True


def node_attrs(node: Node) -> dict[str, str | None]:
    attrs = getattr(node, "attrs", None)
    return attrs if attrs is not None else {}

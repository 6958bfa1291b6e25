"""Built-in allow-lists and fixed names used by the sanitizer."""

from __future__ import annotations

# Node names the parser always creates: root containers and text. Stripping
# them would empty the tree, so they are merged into every tag allow-list.
REQUIRED_TAGS: frozenset[str] = frozenset(
    {
        "#document",
        "#document-fragment",
        "#text",
    }
)

# Full-document parsing also synthesizes the html/head/body skeleton.
DOCUMENT_REQUIRED_TAGS: frozenset[str] = REQUIRED_TAGS | frozenset({"html", "head", "body"})

DEFAULT_TAGS: tuple[str, ...] = (
    # Structure
    "p",
    "div",
    "span",
    "br",
    "hr",
    # Headings
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    # Lists
    "ul",
    "ol",
    "li",
    "dl",
    "dt",
    "dd",
    # Text formatting
    "b",
    "strong",
    "i",
    "em",
    "u",
    "s",
    "sub",
    "sup",
    "small",
    "mark",
    "abbr",
    # Quotes/code
    "blockquote",
    "q",
    "code",
    "pre",
    # Tables
    "table",
    "caption",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    # Links and images
    "a",
    "img",
)

DEFAULT_ATTRIBUTES: tuple[str, ...] = (
    "href",
    "src",
    "alt",
    "title",
    "width",
    "height",
    "class",
    "id",
    "colspan",
    "rowspan",
    "align",
    "target",
    "rel",
    "cite",
    "lang",
    "dir",
)

# Attributes whose value a browser may resolve as a URL or evaluate as code.
DEFAULT_SCRIPTABLE_ATTRIBUTES: tuple[str, ...] = (
    "href",
    "src",
    "lowsrc",
    "dynsrc",
    "background",
    "action",
    "formaction",
    "cite",
    "data",
    "codebase",
    "poster",
    "xlink:href",
    "style",
)

# Matched as prefixes, so both "javascript:" and a bare "javascript" hit.
SCRIPT_SCHEMES: tuple[str, ...] = ("javascript", "vbscript")

SCRIPT_TYPES: frozenset[str] = frozenset({"text/javascript", "text/vbscript"})

"""Allow-list sanitization over a parsed DOM.

The sanitizer runs three passes over the tree built by `tagsieve.dom`:

1. tag pass: detach every node whose name is not allowed (with its subtree);
2. script-type pass: detach elements typed `text/javascript`/`text/vbscript`;
3. attribute pass: drop attributes that are not allowed, then drop scriptable
   attributes whose value carries a `javascript`/`vbscript` scheme.

Passes 2 and the scheme half of 3 only run when the scriptable-attribute set
is non-empty ("script scrutiny").

Every finding goes through `Configuration.handle_unsafe` (which may raise)
and then the optional `report` callback.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

from . import dom
from .config import DEFAULT_CONFIG, Configuration, normalize_names
from .constants import SCRIPT_TYPES
from .decode import has_script_scheme
from .errors import UnsafeHtmlError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from justhtml.node import Node

    from .errors import ReportCallback


# -----------------
# Public API
# -----------------


def sanitize_html(
    dirty_input: str,
    whitelisted_tags: Iterable[str] | None,
    whitelisted_attributes: Iterable[str] | None,
    scriptable_attributes: Iterable[str] | None = None,
    *,
    config: Configuration = DEFAULT_CONFIG,
    report: ReportCallback | None = None,
) -> str:
    """Return `dirty_input` with everything outside the allow-lists removed.

    - An empty or missing `whitelisted_tags` bypasses sanitization entirely and
        returns the input unchanged.
    - Omitting `scriptable_attributes` (or passing None) uses
        `config.scriptable_attributes`; an explicit empty collection turns off
        script scrutiny.
    - The caller's collections are never modified.

    Sanitization fails closed: if the parser or a pass raises, the input is
    treated as hostile and "" is returned. `UnsafeHtmlError` (strict mode)
    propagates.
    """

    if not whitelisted_tags:
        return dirty_input

    try:
        doc = dom.parse_markup(dirty_input, document=config.document)
        sanitize_tree(
            doc.root,
            whitelisted_tags,
            whitelisted_attributes,
            scriptable_attributes,
            config=config,
            report=report,
        )
        return dom.serialize(doc)
    except UnsafeHtmlError:
        raise
    except Exception as exc:  # noqa: BLE001
        if report is not None:
            # A failing report hook must not turn a dropped input into a crash.
            with contextlib.suppress(Exception):
                report(f"Sanitizer failure ({type(exc).__name__}: {exc}); input dropped", node=None)
        return ""


def sanitize(
    dirty_input: str,
    *,
    config: Configuration = DEFAULT_CONFIG,
    report: ReportCallback | None = None,
) -> str:
    """Sanitize with all three allow-lists resolved from `config`."""

    return sanitize_html(
        dirty_input,
        config.tags,
        config.attributes,
        config.scriptable_attributes,
        config=config,
        report=report,
    )


def sanitize_tree(
    root: Node,
    whitelisted_tags: Iterable[str] | None,
    whitelisted_attributes: Iterable[str] | None,
    scriptable_attributes: Iterable[str] | None = None,
    *,
    config: Configuration = DEFAULT_CONFIG,
    report: ReportCallback | None = None,
) -> None:
    """Run the tag, script-type and attribute passes on `root` in place."""

    allowed_tags = normalize_names(whitelisted_tags) | config.required_tags
    allowed_attrs = normalize_names(whitelisted_attributes)
    if scriptable_attributes is None:
        scriptable = config.scriptable_attributes
    else:
        scriptable = normalize_names(scriptable_attributes)

    def _report_unsafe(msg: str, *, node: Any | None = None) -> None:
        config.handle_unsafe(msg, node=node)
        if report is not None:
            report(msg, node=node)

    drop_disallowed_tags(root, allowed_tags, report=_report_unsafe)
    if scriptable:
        drop_script_typed(root, report=_report_unsafe)
    filter_attributes(root, allowed_attrs, scriptable, report=_report_unsafe)


# -----------------
# Passes
# -----------------


def _tag_name(node: Node) -> str:
    return str(node.name).lower()


def drop_disallowed_tags(root: Node, allowed_tags: frozenset[str], *, report: ReportCallback) -> int:
    """Detach every node whose lower-cased name is not in `allowed_tags`.

    Matches are collected first and detached afterwards, so removal never
    disturbs the traversal. Returns the number of subtrees removed.
    """

    targets = dom.collect(root, lambda node: _tag_name(node) not in allowed_tags)
    removed = 0
    for node in targets:
        report(f"Unsafe tag '{_tag_name(node)}' (not allowed)", node=node)
        if dom.detach(node):
            removed += 1
    return removed


def _is_script_typed(node: Node) -> bool:
    for name, value in dom.node_attrs(node).items():
        if str(name).lower() == "type" and value is not None and value.strip().lower() in SCRIPT_TYPES:
            return True
    return False


def drop_script_typed(root: Node, *, report: ReportCallback) -> int:
    """Detach elements whose `type` attribute names a script MIME type."""

    targets = dom.collect(root, _is_script_typed)
    removed = 0
    for node in targets:
        script_type = next(v for k, v in dom.node_attrs(node).items() if str(k).lower() == "type")
        report(f"Unsafe script element <{_tag_name(node)} type='{script_type}'>", node=node)
        if dom.detach(node):
            removed += 1
    return removed


def filter_attributes(
    root: Node,
    allowed_attrs: frozenset[str],
    scriptable: frozenset[str],
    *,
    report: ReportCallback,
) -> None:
    """Drop disallowed attributes, then scriptable ones carrying a script scheme.

    Surviving attributes keep their original order.
    """

    for node in dom.iter_document_order(root):
        attrs = dom.node_attrs(node)
        if not attrs:
            continue

        tag = _tag_name(node)
        kept: dict[str, str | None] = {}
        changed = False
        for name, value in attrs.items():
            key = str(name).lower()
            if key not in allowed_attrs:
                report(f"Unsafe attribute '{name}' on <{tag}> (not allowed)", node=node)
                changed = True
                continue
            if key in scriptable and has_script_scheme(value):
                report(f"Unsafe URL in attribute '{name}' on <{tag}>", node=node)
                changed = True
                continue
            kept[name] = value

        if changed:
            node.attrs = kept

"""Immutable sanitizer configuration.

A `Configuration` replaces process-wide mutable settings: build one at startup
(or per call) and pass it explicitly. Values are frozen, so concurrent
sanitizer calls can share one without locking.

Each of the three name lists resolves the same way:

1. a non-empty replace list (`custom_*`) wins outright;
2. otherwise a non-empty supplement list (`supplemental_*`) is added to the
   built-in default;
3. otherwise the built-in default is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from .constants import (
    DEFAULT_ATTRIBUTES,
    DEFAULT_SCRIPTABLE_ATTRIBUTES,
    DEFAULT_TAGS,
    DOCUMENT_REQUIRED_TAGS,
    REQUIRED_TAGS,
)
from .errors import UnsafeHtmlError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

UnsafeHandling = Literal["strip", "raise"]

_UNSAFE_HANDLING_MODES: frozenset[str] = frozenset({"strip", "raise"})


def normalize_names(names: Iterable[str] | None) -> frozenset[str]:
    """Lower-case `names` into a frozenset for case-insensitive membership."""

    if not names:
        return frozenset()
    return frozenset(str(name).lower() for name in names)


def resolve_names(
    custom: Iterable[str] | None,
    supplemental: Iterable[str] | None,
    default: Iterable[str],
) -> frozenset[str]:
    custom_set = normalize_names(custom)
    if custom_set:
        return custom_set
    return normalize_names(default) | normalize_names(supplemental)


@dataclass(frozen=True, slots=True)
class Configuration:
    """Allow-list overrides and behaviour switches for the sanitizer.

    - `custom_*` lists replace the built-in defaults.
    - `supplemental_*` lists extend them; ignored when the matching
        `custom_*` list is non-empty.
    - `document` parses input as a full document (html/head/body) instead of
        a `<div>` fragment.
    - `unsafe_handling` is "strip" (remove silently) or "raise" (raise
        `UnsafeHtmlError` on the first finding).
    """

    custom_tags: tuple[str, ...]
    custom_attributes: tuple[str, ...]
    custom_scriptable_attributes: tuple[str, ...]
    supplemental_tags: tuple[str, ...]
    supplemental_attributes: tuple[str, ...]
    supplemental_scriptable_attributes: tuple[str, ...]
    document: bool
    unsafe_handling: UnsafeHandling

    def __init__(
        self,
        *,
        custom_tags: Iterable[str] | None = None,
        custom_attributes: Iterable[str] | None = None,
        custom_scriptable_attributes: Iterable[str] | None = None,
        supplemental_tags: Iterable[str] | None = None,
        supplemental_attributes: Iterable[str] | None = None,
        supplemental_scriptable_attributes: Iterable[str] | None = None,
        document: bool = False,
        unsafe_handling: UnsafeHandling = "strip",
    ) -> None:
        if unsafe_handling not in _UNSAFE_HANDLING_MODES:
            raise ValueError(f"Invalid unsafe_handling: {unsafe_handling!r} (expected 'strip' or 'raise')")

        object.__setattr__(self, "custom_tags", tuple(custom_tags or ()))
        object.__setattr__(self, "custom_attributes", tuple(custom_attributes or ()))
        object.__setattr__(self, "custom_scriptable_attributes", tuple(custom_scriptable_attributes or ()))
        object.__setattr__(self, "supplemental_tags", tuple(supplemental_tags or ()))
        object.__setattr__(self, "supplemental_attributes", tuple(supplemental_attributes or ()))
        object.__setattr__(
            self, "supplemental_scriptable_attributes", tuple(supplemental_scriptable_attributes or ())
        )
        object.__setattr__(self, "document", bool(document))
        object.__setattr__(self, "unsafe_handling", unsafe_handling)

    @property
    def tags(self) -> frozenset[str]:
        return resolve_names(self.custom_tags, self.supplemental_tags, DEFAULT_TAGS)

    @property
    def attributes(self) -> frozenset[str]:
        return resolve_names(self.custom_attributes, self.supplemental_attributes, DEFAULT_ATTRIBUTES)

    @property
    def scriptable_attributes(self) -> frozenset[str]:
        return resolve_names(
            self.custom_scriptable_attributes,
            self.supplemental_scriptable_attributes,
            DEFAULT_SCRIPTABLE_ATTRIBUTES,
        )

    @property
    def required_tags(self) -> frozenset[str]:
        return DOCUMENT_REQUIRED_TAGS if self.document else REQUIRED_TAGS

    def handle_unsafe(self, msg: str, *, node: Any | None = None) -> None:
        if self.unsafe_handling == "raise":
            raise UnsafeHtmlError(msg, node=node)


DEFAULT_CONFIG: Configuration = Configuration()

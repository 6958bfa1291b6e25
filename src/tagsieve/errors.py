"""Error type and report-callback protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Protocol

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


class UnsafeHtmlError(ValueError):
    """Raised for a sanitizer finding when `unsafe_handling="raise"`.

    `node` is the offending parsed node, when there is one.
    """

    def __init__(self, message: str, *, node: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.node = node

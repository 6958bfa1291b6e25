"""Tolerant decoders used by the script-scheme check.

Both decoders return a best-effort string for malformed input and never raise.
"""

from __future__ import annotations

from html import unescape
from urllib.parse import unquote

from .constants import SCRIPT_SCHEMES


def url_decode(value: str) -> str:
    # Invalid %-escapes are kept verbatim; undecodable bytes become U+FFFD.
    return unquote(value, errors="replace")


def entity_decode(value: str) -> str:
    return unescape(value)


def decoded_forms(value: str | None) -> tuple[str, str, str]:
    """Return the verbatim, percent-decoded and entity-decoded forms of `value`."""

    raw = "" if value is None else str(value)
    return raw, url_decode(raw), entity_decode(raw)


def has_script_scheme(value: str | None) -> bool:
    """True if any decoded form, trimmed and lower-cased, starts with a script scheme.

    Known gap: control characters inside the scheme name ("java\\tscript:")
    and double encoding are not normalized away.
    """

    for form in decoded_forms(value):
        if form.strip().lower().startswith(SCRIPT_SCHEMES):
            return True
    return False

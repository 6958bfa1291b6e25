from .config import DEFAULT_CONFIG, Configuration
from .constants import (
    DEFAULT_ATTRIBUTES,
    DEFAULT_SCRIPTABLE_ATTRIBUTES,
    DEFAULT_TAGS,
    DOCUMENT_REQUIRED_TAGS,
    REQUIRED_TAGS,
)
from .decode import entity_decode, has_script_scheme, url_decode
from .errors import UnsafeHtmlError
from .sanitize import sanitize, sanitize_html, sanitize_tree

__all__ = [
    "DEFAULT_ATTRIBUTES",
    "DEFAULT_CONFIG",
    "DEFAULT_SCRIPTABLE_ATTRIBUTES",
    "DEFAULT_TAGS",
    "DOCUMENT_REQUIRED_TAGS",
    "REQUIRED_TAGS",
    "Configuration",
    "UnsafeHtmlError",
    "entity_decode",
    "has_script_scheme",
    "sanitize",
    "sanitize_html",
    "sanitize_tree",
    "url_decode",
]

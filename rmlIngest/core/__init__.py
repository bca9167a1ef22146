"""Detection, validation and resolution helpers for mapping documents."""

__all__ = [
    "Format",
    "detect_format",
    "is_valid_language_tag",
    "is_valid_uri",
    "Uri",
    "scan_leading_directives",
    "extract_base_uri",
    "base_uri_from_stream",
    "base_uri_from_text",
    "with_resource",
    "scoped",
    "open_stream",
    "resolve",
    "SearchRoot",
    "DirectorySearchRoot",
    "PackageSearchRoot",
    "ChainedSearchRoot",
    "default_search_root",
]

from .formats import Format, detect_format
from .language import is_valid_language_tag
from .uri import Uri, is_valid_uri
from .directives import (
    base_uri_from_stream,
    base_uri_from_text,
    extract_base_uri,
    scan_leading_directives,
)
from .scoped import open_stream, scoped, with_resource
from .search_roots import (
    ChainedSearchRoot,
    DirectorySearchRoot,
    PackageSearchRoot,
    SearchRoot,
    default_search_root,
)
from .resolver import resolve

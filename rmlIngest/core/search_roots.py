from __future__ import annotations

"""Search roots used to look up relative resource tokens.

A search root plays the part a classpath plays for JVM tools: an ordered set
of locations where a relative token such as ``mappings/people.ttl`` may live.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class SearchRoot(Protocol):
    def locate(self, token: str) -> Path | None:
        """Return the filesystem location of ``token`` or ``None``."""


class DirectorySearchRoot:
    """Look tokens up in a list of directories; the first regular file wins."""

    def __init__(self, *directories: str | Path) -> None:
        self.directories = tuple(Path(d) for d in directories)

    def locate(self, token: str) -> Path | None:
        for directory in self.directories:
            candidate = directory / token
            if candidate.is_file():
                logger.debug("located %s under %s", token, directory)
                return candidate
        return None

    def __repr__(self) -> str:
        return f"DirectorySearchRoot({', '.join(str(d) for d in self.directories)})"


class PackageSearchRoot:
    """Look tokens up among the resources shipped inside a Python package."""

    def __init__(self, package: str) -> None:
        self.package = package

    def locate(self, token: str) -> Path | None:
        try:
            entry = resources.files(self.package)
        except (ModuleNotFoundError, TypeError, ValueError):
            logger.debug("package %s is not importable", self.package)
            return None
        for part in token.replace("\\", "/").split("/"):
            if part:
                entry = entry.joinpath(part)
        if not isinstance(entry, Path):
            # Zipped packages have no real filesystem path to hand out.
            logger.debug("resource %s in %s is not on the filesystem", token, self.package)
            return None
        return entry if entry.is_file() else None

    def __repr__(self) -> str:
        return f"PackageSearchRoot({self.package!r})"


class ChainedSearchRoot:
    """Try several search roots in order."""

    def __init__(self, *roots: SearchRoot) -> None:
        self.roots = tuple(roots)

    def locate(self, token: str) -> Path | None:
        for root in self.roots:
            located = root.locate(token)
            if located is not None:
                return located
        return None


def default_search_root() -> SearchRoot:
    """Build the search root described by the active configuration."""
    from rmlIngest.config import load_config

    return DirectorySearchRoot(*load_config().search_directories())


__all__ = [
    "SearchRoot",
    "DirectorySearchRoot",
    "PackageSearchRoot",
    "ChainedSearchRoot",
    "default_search_root",
]

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rmlIngest.core.resolver import Token, resolve
from rmlIngest.core.search_roots import SearchRoot
from rmlIngest.core.uri import Uri


@dataclass(frozen=True, slots=True)
class FileDataSource:
    """A logical source backed by a file on the local filesystem."""

    uri: Uri

    @property
    def path(self) -> Path:
        return Path(self.uri.value)

    @classmethod
    def from_path(cls, path: Path) -> "FileDataSource":
        return cls(Uri(str(path)))

    @classmethod
    def from_uri(cls, uri: Token, search_root: SearchRoot | None = None) -> "FileDataSource":
        """Resolve ``uri`` (absolute, or relative to ``search_root``) to a data source."""

        return resolve(uri, search_root, into=cls.from_path)

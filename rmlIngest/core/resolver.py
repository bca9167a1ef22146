from __future__ import annotations

"""Resolution of path and URI tokens into concrete filesystem locations."""

import logging
import os
from pathlib import Path
from typing import Callable, TypeVar

from rmlIngest.errors import ResourceNotFoundError

from .search_roots import SearchRoot, default_search_root
from .uri import Uri

logger = logging.getLogger(__name__)

T = TypeVar("T")

Token = Uri | str | os.PathLike


def resolve(
    uri: Token,
    search_root: SearchRoot | None = None,
    *,
    into: Callable[[Path], T] | None = None,
) -> Path | T:
    """Resolve ``uri`` to an absolute, normalized path.

    Absolute tokens name their resource directly and are never looked up
    again; relative tokens are located through ``search_root`` (the
    configured default when omitted). Either branch raises
    :class:`ResourceNotFoundError` carrying the original token when no
    regular file exists there; empty tokens and directories are never
    found. ``into`` turns the resolved path into the desired result
    type.
    """

    token = str(uri) if isinstance(uri, Uri) else os.fspath(uri)
    if not token.strip():
        raise ResourceNotFoundError(token)
    path = Path(token)
    if path.is_absolute():
        if not path.is_file():
            raise ResourceNotFoundError(token)
        resolved = path.resolve()
        logger.debug("resolved absolute %s -> %s", token, resolved)
    else:
        root = search_root if search_root is not None else default_search_root()
        located = root.locate(token)
        if located is None:
            raise ResourceNotFoundError(token)
        resolved = Path(located).resolve()
        logger.debug("resolved %s via %r -> %s", token, root, resolved)
    if into is None:
        return resolved
    return into(resolved)


__all__ = ["resolve"]

from __future__ import annotations

"""Scoped acquisition of streams and other releasable resources."""

import os
from contextlib import contextmanager
from typing import BinaryIO, Callable, Iterator, TypeVar

from rmlIngest.errors import ReadError

R = TypeVar("R")
T = TypeVar("T")


def _release(resource: object, release: Callable[[], object] | None, body_error: BaseException | None) -> None:
    if resource is None:
        return
    closer = release if release is not None else getattr(resource, "close")
    try:
        closer()
    except Exception as exc:
        raise ReadError(str(exc), body_error=body_error) from exc


def with_resource(
    resource: R,
    body: Callable[[R], T],
    *,
    release: Callable[[], object] | None = None,
) -> T:
    """Run ``body(resource)`` once and release ``resource`` on every exit path.

    ``release`` defaults to ``resource.close``; a ``None`` resource is passed
    to ``body`` but never released. A failing release is raised as
    :class:`ReadError` in place of the body's outcome. When the body failed
    too, its exception is kept on ``ReadError.body_error``.
    """

    try:
        result = body(resource)
    except BaseException as exc:
        _release(resource, release, exc)
        raise
    _release(resource, release, None)
    return result


@contextmanager
def scoped(resource: R, release: Callable[[], object] | None = None) -> Iterator[R]:
    """Context-manager form of :func:`with_resource`."""

    try:
        yield resource
    except BaseException as exc:
        _release(resource, release, exc)
        raise
    _release(resource, release, None)


def open_stream(path: str | os.PathLike[str]) -> BinaryIO:
    """Open ``path`` as a binary input stream owned by the caller."""

    return open(os.fspath(path), "rb")


__all__ = ["with_resource", "scoped", "open_stream"]

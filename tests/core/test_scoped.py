from __future__ import annotations

import pytest

from rmlIngest.core.scoped import open_stream, scoped, with_resource
from rmlIngest.errors import ReadError


class Tracked:
    def __init__(self, fail_on_close: bool = False) -> None:
        self.fail_on_close = fail_on_close
        self.closed = 0
        self.events: list[str] = []

    def close(self) -> None:
        self.closed += 1
        if self.fail_on_close:
            raise OSError("disk went away")


def test_body_result_is_returned_and_resource_released_once() -> None:
    res = Tracked()
    calls: list[Tracked] = []

    def body(r: Tracked) -> str:
        calls.append(r)
        return "done"

    assert with_resource(res, body) == "done"
    assert calls == [res]
    assert res.closed == 1


def test_release_runs_once_when_body_raises() -> None:
    res = Tracked()

    def body(r: Tracked) -> None:
        r.events.append("started")
        raise ValueError("bad body")

    with pytest.raises(ValueError, match="bad body"):
        with_resource(res, body)
    assert res.closed == 1
    # No rollback of what the body did before failing.
    assert res.events == ["started"]


def test_release_failure_becomes_read_error() -> None:
    res = Tracked(fail_on_close=True)
    with pytest.raises(ReadError, match="disk went away") as info:
        with_resource(res, lambda r: "ignored")
    assert isinstance(info.value.__cause__, OSError)
    assert info.value.body_error is None
    assert res.closed == 1


def test_release_failure_takes_precedence_but_keeps_body_failure() -> None:
    res = Tracked(fail_on_close=True)

    def body(r: Tracked) -> None:
        raise ValueError("bad body")

    with pytest.raises(ReadError) as info:
        with_resource(res, body)
    assert isinstance(info.value.body_error, ValueError)
    assert isinstance(info.value.__context__, ValueError)
    assert res.closed == 1


def test_absent_resource_is_not_released() -> None:
    assert with_resource(None, lambda r: r is None) is True


def test_custom_release_operation() -> None:
    released: list[str] = []
    value = with_resource({"k": 1}, lambda d: d["k"], release=lambda: released.append("x"))
    assert value == 1
    assert released == ["x"]


def test_context_manager_form() -> None:
    res = Tracked()
    with scoped(res) as r:
        r.events.append("used")
    assert res.closed == 1

    res = Tracked()
    with pytest.raises(KeyError):
        with scoped(res):
            raise KeyError("x")
    assert res.closed == 1

    res = Tracked(fail_on_close=True)
    with pytest.raises(ReadError):
        with scoped(res):
            pass


def test_open_stream_reads_bytes(tmp_path) -> None:
    target = tmp_path / "doc.ttl"
    target.write_text("@base <http://a.org/> .\n", encoding="utf-8")
    stream = open_stream(target)
    assert with_resource(stream, lambda s: s.read()) == b"@base <http://a.org/> .\n"
    assert stream.closed

from __future__ import annotations

from pathlib import Path

import rmlIngest
from rmlIngest.core.search_roots import (
    ChainedSearchRoot,
    DirectorySearchRoot,
    PackageSearchRoot,
    SearchRoot,
)


def test_package_search_root_finds_packaged_modules() -> None:
    root = PackageSearchRoot("rmlIngest")
    located = root.locate("mapping/namespaces.py")
    assert located is not None
    assert located == Path(rmlIngest.__file__).parent / "mapping" / "namespaces.py"
    assert root.locate("mapping/absent.ttl") is None


def test_package_search_root_with_unknown_package() -> None:
    assert PackageSearchRoot("no_such_package_for_rmlingest").locate("x.ttl") is None


def test_chained_roots_are_tried_in_order(tmp_path: Path) -> None:
    (tmp_path / "local.ttl").write_text("", encoding="utf-8")
    chained = ChainedSearchRoot(DirectorySearchRoot(tmp_path), PackageSearchRoot("rmlIngest"))
    assert chained.locate("local.ttl") == tmp_path / "local.ttl"
    assert chained.locate("errors.py") is not None
    assert chained.locate("neither.ttl") is None


def test_search_roots_satisfy_the_protocol(tmp_path: Path) -> None:
    for root in (DirectorySearchRoot(tmp_path), PackageSearchRoot("rmlIngest"), ChainedSearchRoot()):
        assert isinstance(root, SearchRoot)


def test_package_search_root_with_empty_package_name() -> None:
    assert PackageSearchRoot("").locate("x.ttl") is None


def test_package_search_root_skips_directories() -> None:
    assert PackageSearchRoot("rmlIngest").locate("mapping") is None


def test_directory_search_root_skips_directories(tmp_path: Path) -> None:
    (tmp_path / "nested").mkdir()
    assert DirectorySearchRoot(tmp_path).locate("nested") is None
    assert DirectorySearchRoot(tmp_path).locate("") is None

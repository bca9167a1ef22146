from __future__ import annotations

"""Console entry point for ``rmlIngest``."""

import sys


def main(argv: list[str] | None = None) -> None:  # pragma: no cover - thin wrapper
    """Run the command group, importing click and rdflib only when invoked."""

    from .__main__ import cli

    cli.main(args=argv if argv is not None else sys.argv[1:], prog_name="rmlIngest")


__all__ = ["main"]

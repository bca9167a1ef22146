"""Value types shared by the loader and its callers."""

__all__ = ["FileDataSource"]

from .data_source import FileDataSource

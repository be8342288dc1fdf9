"""Shared file I/O helpers."""

from .files import iter_file_chunks

__all__ = ["iter_file_chunks"]

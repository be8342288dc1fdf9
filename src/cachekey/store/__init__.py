"""Key index backends recording which cache keys exist."""

from __future__ import annotations

from .base import KeyStore
from .index import JsonKeyIndex, load_index, new_index, prune_index, save_index

__all__ = ["JsonKeyIndex", "KeyStore", "load_index", "new_index", "prune_index", "save_index"]

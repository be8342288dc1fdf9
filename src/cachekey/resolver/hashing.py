"""Content hashing over ordered manifest files."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable
from pathlib import Path

from cachekey.constants.keys import IDENTIFIER_DELIMITER
from cachekey.exceptions import MissingFileError
from cachekey.io import iter_file_chunks
from cachekey.model import CacheManifest

logger = logging.getLogger(__name__)


def compute_hash(paths: Iterable[Path], *, root: Path | None = None) -> str:
    """Return a SHA-256 hex digest over the identifiers and contents of ``paths``.

    Each file contributes ``<identifier>\\0<size>\\0<content>``, where the
    identifier is the path relative to ``root`` (when given) in POSIX form.
    The digest is order-sensitive and independent of the checkout location
    when ``root`` is supplied.
    """
    return hash_manifest(CacheManifest(paths=tuple(paths), root=root))


def hash_manifest(manifest: CacheManifest) -> str:
    """Return the content hash for a ``CacheManifest``."""
    digest = hashlib.sha256()
    for path in manifest.paths:
        if not path.is_file():
            raise MissingFileError(path)
        identifier = manifest.identifier(path)
        size = path.stat().st_size
        digest.update(identifier.encode("utf-8"))
        digest.update(IDENTIFIER_DELIMITER)
        digest.update(str(size).encode("ascii"))
        digest.update(IDENTIFIER_DELIMITER)
        for chunk in iter_file_chunks(path):
            digest.update(chunk)
        logger.debug("Hashed manifest file %s (%d bytes)", identifier, size)
    return digest.hexdigest()

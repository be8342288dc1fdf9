"""Primary key and fallback prefix construction."""

from __future__ import annotations

from collections.abc import Iterable

from cachekey.constants.keys import KEY_SEPARATOR, WHITESPACE_PATTERN
from cachekey.exceptions import InvalidNamespaceError
from cachekey.utils.naming import slugify_level


def validate_namespace(namespace: str) -> str:
    """Return ``namespace`` unchanged, or raise ``InvalidNamespaceError``."""
    if not namespace:
        raise InvalidNamespaceError(namespace, "namespace must not be empty")
    if KEY_SEPARATOR in namespace:
        raise InvalidNamespaceError(namespace, f"namespace must not contain the key separator {KEY_SEPARATOR!r}")
    if WHITESPACE_PATTERN.search(namespace):
        raise InvalidNamespaceError(namespace, "namespace must not contain whitespace")
    return namespace


def build_key(namespace: str, content_hash: str, *, scope: str | None = None) -> str:
    """Join namespace, optional scope level, and content hash into a primary key.

    >>> build_key("elm", "abc123")
    'elm-abc123'
    >>> build_key("elm", "abc123", scope="main")
    'elm-main-abc123'
    """
    validate_namespace(namespace)
    segments = [namespace]
    if scope:
        level = slugify_level(scope)
        if level:
            segments.append(level)
    segments.append(content_hash)
    return KEY_SEPARATOR.join(segments)


def build_fallbacks(namespace: str, extra: Iterable[str]) -> tuple[str, ...]:
    """Return restore prefixes ordered most specific first, ending with ``namespace``.

    Each entry of ``extra`` is one specificity level (a branch name, the
    default branch, ...). Levels that slugify to nothing and repeated levels
    are dropped.
    """
    validate_namespace(namespace)
    prefixes: list[str] = []
    for raw_level in extra:
        level = slugify_level(raw_level)
        if not level:
            continue
        prefix = f"{namespace}{KEY_SEPARATOR}{level}"
        if prefix not in prefixes:
            prefixes.append(prefix)
    prefixes.append(namespace)
    return tuple(prefixes)

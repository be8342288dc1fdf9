"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]

# Either key -> written_at_ns, or bare keys when the backend keeps no write times.
type AvailableKeys = Mapping[str, int] | Iterable[str]

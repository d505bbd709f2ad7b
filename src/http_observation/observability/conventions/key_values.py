"""Conventions – KeyValue and KeyValues."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, Iterator


@dataclasses.dataclass(frozen=True)
class KeyValue:
    """A single tag attached to an observation."""

    key: str
    value: str

    @classmethod
    def of(cls, key: str | Enum, value: str) -> "KeyValue":
        if isinstance(key, Enum):
            key = key.value
        return cls(key=str(key), value=str(value))


class KeyValues:
    """Immutable, insertion-ordered collection of :class:`KeyValue`.

    Keys are unique: adding a pair whose key is already present replaces the
    existing value while keeping its original position.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[KeyValue] = ()) -> None:
        merged: dict[str, KeyValue] = {}
        for pair in pairs:
            merged[pair.key] = pair
        self._pairs: tuple[KeyValue, ...] = tuple(merged.values())

    @classmethod
    def of(cls, *pairs: KeyValue) -> "KeyValues":
        return cls(pairs)

    @classmethod
    def empty(cls) -> "KeyValues":
        return cls()

    def and_(self, *pairs: KeyValue) -> "KeyValues":
        """Return a new collection with *pairs* added (or replacing same keys)."""
        return KeyValues((*self._pairs, *pairs))

    def get(self, key: str | Enum) -> str | None:
        if isinstance(key, Enum):
            key = key.value
        for pair in self._pairs:
            if pair.key == key:
                return pair.value
        return None

    def keys(self) -> list[str]:
        return [pair.key for pair in self._pairs]

    def to_dict(self) -> dict[str, str]:
        """Plain ``{key: value}`` mapping, e.g. for metric labels."""
        return {pair.key: pair.value for pair in self._pairs}

    def __iter__(self) -> Iterator[KeyValue]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, item: object) -> bool:
        return item in self._pairs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyValues):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        inner = ", ".join(f"{p.key}={p.value!r}" for p in self._pairs)
        return f"KeyValues({inner})"


__all__ = ["KeyValue", "KeyValues"]

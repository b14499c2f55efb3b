"""Query descriptors handed to the retrieval pipeline.

A descriptor is an immutable, ordered mapping from field name to value. It is
built from the required fields of an endpoint followed by its declared
optional fields, skipping every optional field whose value is its "absent"
sentinel.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, NamedTuple, Tuple

from .exceptions import MissingRequiredFieldError

# Sentinel for optional integer parameters that were not supplied.
UNSET = -1


def is_unset(value: Any) -> bool:
    """True for the integer "not supplied" sentinel."""
    return value == UNSET


def is_missing(value: Any) -> bool:
    """True when a collection parameter was omitted entirely.

    An empty collection is a supplied value and is not missing.
    """
    return value is None


class OptionalField(NamedTuple):
    """Declaration of one optional descriptor field."""

    name: str
    value: Any
    is_absent: Callable[[Any], bool]


class QueryDescriptor(Mapping):
    """Immutable ordered mapping describing what the pipeline should fetch.

    Field order is part of the value: two descriptors, or a descriptor and a
    plain mapping, only compare equal when their fields appear in the same order.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: Iterable[Tuple[str, Any]] = ()):
        entries = tuple(items)
        index = dict(entries)
        if len(index) != len(entries):
            names = [name for name, _ in entries]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            raise ValueError(f"Duplicate query fields: {', '.join(duplicates)}")
        object.__setattr__(self, "_items", entries)
        object.__setattr__(self, "_index", index)

    def __getitem__(self, key: str) -> Any:
        return self._index[key]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("QueryDescriptor is immutable")

    def __delattr__(self, name: str) -> None:
        raise TypeError("QueryDescriptor is immutable")

    def __eq__(self, other: object) -> bool:
        """Equal to any mapping holding the same fields in the same order."""
        if isinstance(other, QueryDescriptor):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self._items == tuple(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._items)
        return f"QueryDescriptor({fields})"


def _freeze(value: Any) -> Any:
    if isinstance(value, (set, frozenset, list, tuple)):
        return frozenset(value)
    return value


def build_query(
    required: Mapping[str, Any],
    optional: Iterable[OptionalField] = (),
) -> QueryDescriptor:
    """
    Build a query descriptor.

    :param required: Fields inserted unconditionally, in mapping order
    :param optional: Field declarations inserted in declared order unless absent
    :returns: Immutable descriptor
    :raises MissingRequiredFieldError: If a required value is None
    :raises ValueError: If a field name is declared twice
    """
    items = []
    for name, value in required.items():
        if value is None:
            raise MissingRequiredFieldError(name)
        items.append((name, _freeze(value)))

    for field in optional:
        if not field.is_absent(field.value):
            items.append((field.name, _freeze(field.value)))

    return QueryDescriptor(items)

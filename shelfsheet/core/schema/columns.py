from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from operator import attrgetter
from typing import Any

from ..canonical.fields import FieldKind, FieldSpec
from ..errors import SchemaMismatch

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


@dataclass(frozen=True)
class Lookup:
    """Id/display-text pairs backing a lookup column."""

    items: tuple[tuple[int, str], ...] = ()
    _by_id: dict[int, str] = field(init=False, repr=False, compare=False)
    _by_text: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[int, str] = {}
        by_text: dict[str, int] = {}
        for item_id, text in self.items:
            cleaned = str(text or "").strip()
            if not cleaned or item_id in by_id:
                continue
            by_id[item_id] = cleaned
            by_text.setdefault(cleaned, item_id)
        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(self, "_by_text", by_text)

    @classmethod
    def from_mapping(cls, values: Mapping[int, str] | Iterable[tuple[int, str]]) -> "Lookup":
        pairs = values.items() if isinstance(values, Mapping) else values
        return cls(items=tuple((int(item_id), str(text or "")) for item_id, text in pairs))

    @property
    def names(self) -> list[str]:
        return list(self._by_id.values())

    def text_for(self, item_id: int) -> str | None:
        return self._by_id.get(item_id)

    def id_for(self, text: str) -> int | None:
        return self._by_text.get(str(text or "").strip())


@dataclass(frozen=True)
class Accessor:
    """Custom getter (and optional setter) for a synthetic column."""

    getter: Getter
    kind: FieldKind = FieldKind.TEXT
    setter: Setter | None = None


@dataclass(frozen=True)
class Column:
    name: str
    kind: FieldKind
    getter: Getter
    setter: Setter | None = None
    field_name: str | None = None
    enum: type[IntEnum] | None = None
    lookup: Lookup | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.field_name is None

    def value_of(self, record: Any) -> Any:
        return self.getter(record)


def _attribute_setter(attribute: str) -> Setter:
    def _set(record: Any, value: Any) -> None:
        setattr(record, attribute, value)

    return _set


def as_accessor(value: Accessor | Getter) -> Accessor:
    if isinstance(value, Accessor):
        return value
    if callable(value):
        return Accessor(getter=value)
    raise TypeError(f"Accessor must be callable, got {type(value).__name__}")


def field_column(name: str, field_name: str, spec: FieldSpec, *, lookup: Lookup | None = None) -> Column:
    kind = spec.kind
    if lookup is not None:
        if spec.kind is not FieldKind.INT:
            raise SchemaMismatch(name, reason=f"lookup columns must bind an integer field, got {spec.kind.value}")
        kind = FieldKind.LOOKUP
    return Column(
        name=name,
        kind=kind,
        getter=attrgetter(spec.attribute),
        setter=_attribute_setter(spec.attribute),
        field_name=field_name,
        enum=spec.enum,
        lookup=lookup,
    )


def synthetic_column(name: str, accessor: Accessor | Getter, *, lookup: Lookup | None = None) -> Column:
    resolved = as_accessor(accessor)
    kind = FieldKind.LOOKUP if lookup is not None else resolved.kind
    return Column(
        name=name,
        kind=kind,
        getter=resolved.getter,
        setter=resolved.setter,
        field_name=None,
        lookup=lookup,
    )


__all__ = [
    "Accessor",
    "Column",
    "Getter",
    "Lookup",
    "Setter",
    "as_accessor",
    "field_column",
    "synthetic_column",
]

# topmark:header:start
#
#   project      : YamlBlock
#   file         : values.py
#   file_relpath : src/yamlblock/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source value model consumed by the YAML block renderer.

A source value is a small tagged union with one immutable variant per JSON kind:

- `YNull`
- `YBool`
- `YNumber` (numeric text kept verbatim, integers and floats share the variant)
- `YString`
- `YSequence` (ordered items)
- `YMapping` (ordered ``(key, value)`` pairs, unique string keys)

Mappings keep their entries as a tuple of pairs rather than a ``dict`` so the
document order is part of the value itself and survives equality checks.

`to_source_value` maps plain Python data (as returned by ``json.loads`` or
built by hand) onto this model.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, Union

from yamlblock.core.errors import SourceValueError

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class YNull:
    """The JSON ``null`` value."""


@dataclass(frozen=True, slots=True)
class YBool:
    """A JSON boolean."""

    value: bool


@dataclass(frozen=True, slots=True)
class YNumber:
    """A JSON number, stored as its textual form.

    Attributes:
        text (str): Numeric text exactly as it appeared in the source
            (e.g. ``"12"``, ``"-0.5"``, ``"1E+3"``).
    """

    text: str


@dataclass(frozen=True, slots=True)
class YString:
    """A JSON string."""

    value: str


@dataclass(frozen=True, slots=True)
class YSequence:
    """A JSON array."""

    items: tuple[SourceValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[SourceValue]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class YMapping:
    """A JSON object with entries in document order.

    Attributes:
        entries (tuple[tuple[str, SourceValue], ...]): Key/value pairs. Keys are unique.
    """

    entries: tuple[tuple[str, SourceValue], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> tuple[str, ...]:
        """Return the keys in document order."""
        return tuple(key for key, _ in self.entries)

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, SourceValue]]) -> YMapping:
        """Build a mapping from raw pairs, collapsing duplicate keys.

        The last value for a duplicated key wins; the key keeps the position of
        its first occurrence.
        """
        merged: dict[str, SourceValue] = {}
        for key, value in pairs:
            merged[key] = value
        return cls(tuple(merged.items()))


SourceValue = Union[YNull, YBool, YNumber, YString, YSequence, YMapping]

SCALAR_TYPES: Final[tuple[type, ...]] = (YNull, YBool, YNumber, YString)
SOURCE_VALUE_TYPES: Final[tuple[type, ...]] = (*SCALAR_TYPES, YSequence, YMapping)

NULL: Final[YNull] = YNull()


def is_scalar(value: SourceValue) -> bool:
    """Return True for null, boolean, number and string values."""
    return isinstance(value, SCALAR_TYPES)


def is_block(value: SourceValue) -> bool:
    """Return True for collections that render as an indented block (non-empty ones)."""
    return isinstance(value, (YSequence, YMapping)) and len(value) > 0


def _number_from_float(x: float) -> YNumber:
    if math.isnan(x):
        return YNumber(".nan")
    if math.isinf(x):
        return YNumber(".inf" if x > 0 else "-.inf")
    return YNumber(repr(x))


@dataclass
class _Pending:
    """A plain container whose children are being converted.

    Attributes:
        data (Any): The list, tuple or mapping being converted.
        segment (str): Path segment leading to this container (``"$"`` for the root).
        children (list[tuple[str | None, Any]]): ``(key, raw value)`` pairs; the key
            is None for sequence items.
        converted (list[SourceValue]): Converted children completed so far.
    """

    data: Any
    segment: str
    children: list[tuple[str | None, Any]]
    converted: list[SourceValue] = field(default_factory=lambda: [])

    @classmethod
    def open(cls, data: Any, segment: str, stack: list[_Pending]) -> _Pending:
        if isinstance(data, Mapping):
            children: list[tuple[str | None, Any]] = []
            for key, value in data.items():
                if not isinstance(key, str):
                    raise SourceValueError(
                        f"mapping keys must be strings, got {type(key).__name__}",
                        path=_path_of(stack, segment),
                    )
                children.append((key, value))
        else:
            children = [(None, item) for item in data]
        return cls(data=data, segment=segment, children=children)

    def child_segment(self, index: int) -> str:
        key: str | None = self.children[index][0]
        return f"[{index}]" if key is None else f".{key}"

    def close(self) -> SourceValue:
        if isinstance(self.data, Mapping):
            keys = (key for key, _ in self.children)
            return YMapping(tuple(zip(keys, self.converted)))  # type: ignore[arg-type]
        return YSequence(tuple(self.converted))


def _path_of(stack: list[_Pending], segment: str) -> str:
    """Return the JSONPath-like location of ``segment`` below the frames in ``stack``."""
    return "".join(frame.segment for frame in stack) + segment


def _convert_leaf(data: Any) -> SourceValue | None:
    """Convert a non-container value; return None for plain lists, tuples and mappings.

    Raises:
        TypeError: If ``data`` has an unsupported type.
    """
    if isinstance(data, SOURCE_VALUE_TYPES):
        return data
    if data is None:
        return NULL
    # bool is a subclass of int: check it first
    if isinstance(data, bool):
        return YBool(data)
    if isinstance(data, int):
        return YNumber(str(data))
    if isinstance(data, float):
        return _number_from_float(data)
    if isinstance(data, str):
        return YString(data)
    if isinstance(data, (list, tuple, Mapping)):
        return None
    raise TypeError(f"unsupported value type {type(data).__name__}")


def to_source_value(data: Any) -> SourceValue:
    """Map plain Python data onto the source value model.

    Containers are converted with an explicit stack, so nesting depth is limited
    by available memory only.

    Args:
        data (Any): ``None``, ``bool``, ``int``, ``float``, ``str``, lists/tuples,
            mappings with ``str`` keys, or source values (returned unchanged).

    Returns:
        SourceValue: The equivalent immutable source value tree.

    Raises:
        SourceValueError: If a value (or a mapping key) has an unsupported type,
            or if a container contains itself.
    """
    try:
        leaf: SourceValue | None = _convert_leaf(data)
    except TypeError as exc:
        raise SourceValueError(str(exc), path="$") from exc
    if leaf is not None:
        return leaf

    stack: list[_Pending] = [_Pending.open(data, "$", [])]
    active: set[int] = {id(data)}
    while True:
        frame: _Pending = stack[-1]
        index: int = len(frame.converted)
        if index < len(frame.children):
            raw: Any = frame.children[index][1]
            try:
                value: SourceValue | None = _convert_leaf(raw)
            except TypeError as exc:
                raise SourceValueError(
                    str(exc), path=_path_of(stack, frame.child_segment(index))
                ) from exc
            if value is not None:
                frame.converted.append(value)
                continue
            segment: str = frame.child_segment(index)
            if id(raw) in active:
                raise SourceValueError("container contains itself", path=_path_of(stack, segment))
            stack.append(_Pending.open(raw, segment, stack))
            active.add(id(raw))
            continue

        done: SourceValue = frame.close()
        stack.pop()
        active.discard(id(frame.data))
        if not stack:
            return done
        stack[-1].converted.append(done)

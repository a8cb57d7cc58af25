"""
Typed operand values passed to remote stack functions.

Value is a closed union: every operand is wrapped in exactly one of the
variants below before it is handed to an executor. Use Value.get() to wrap
plain Python objects and to_object() to unwrap them again.

Usage:
    from lstack.core.values import Value

    Value.get([1, "two", b"three"])   # ListValue of Integer/String/Bytes
    Value.get({"a": 1}).to_object()   # {"a": 1}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from lstack.core.errors import InvalidArgumentError

__all__ = [
    "ValueType",
    "Value",
    "NullValue",
    "IntegerValue",
    "FloatValue",
    "BooleanValue",
    "StringValue",
    "BytesValue",
    "ListValue",
    "MapValue",
]


class ValueType(Enum):
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    BYTES = "bytes"
    LIST = "list"
    MAP = "map"


class Value:
    """Base of the operand union. Not instantiated directly."""

    type: ValueType

    def to_object(self) -> Any:
        raise NotImplementedError

    @staticmethod
    def get(obj: Any) -> "Value":
        """
        Wrap a Python object in the matching Value variant.

        Lists and tuples become ListValue, dicts become MapValue, with their
        members wrapped recursively. Map keys must be scalars. A Value is
        returned unchanged.

        Raises:
            InvalidArgumentError: If the object (or a member) has no variant
        """
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return NULL
        # bool before int: bool is an int subclass
        if isinstance(obj, bool):
            return BooleanValue(obj)
        if isinstance(obj, int):
            return IntegerValue(obj)
        if isinstance(obj, float):
            return FloatValue(obj)
        if isinstance(obj, str):
            return StringValue(obj)
        if isinstance(obj, (bytes, bytearray)):
            return BytesValue(bytes(obj))
        if isinstance(obj, (list, tuple)):
            return ListValue(tuple(Value.get(item) for item in obj))
        if isinstance(obj, dict):
            return MapValue(tuple(
                (_map_key(k), Value.get(v)) for k, v in obj.items()
            ))
        raise InvalidArgumentError(
            f"Unsupported value type: {type(obj).__name__}"
        )


def _map_key(obj: Any) -> Value:
    key = Value.get(obj)
    if key.type in (ValueType.LIST, ValueType.MAP):
        raise InvalidArgumentError(
            f"Map keys must be scalar values, got {type(obj).__name__}"
        )
    return key


@dataclass(frozen=True)
class NullValue(Value):
    type = ValueType.NULL

    def to_object(self) -> None:
        return None


@dataclass(frozen=True)
class IntegerValue(Value):
    value: int
    type = ValueType.INTEGER

    def to_object(self) -> int:
        return self.value


@dataclass(frozen=True)
class FloatValue(Value):
    value: float
    type = ValueType.FLOAT

    def to_object(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanValue(Value):
    value: bool
    type = ValueType.BOOLEAN

    def to_object(self) -> bool:
        return self.value


@dataclass(frozen=True)
class StringValue(Value):
    value: str
    type = ValueType.STRING

    def to_object(self) -> str:
        return self.value


@dataclass(frozen=True)
class BytesValue(Value):
    value: bytes
    type = ValueType.BYTES

    def to_object(self) -> bytes:
        return self.value


@dataclass(frozen=True)
class ListValue(Value):
    items: Tuple[Value, ...] = ()
    type = ValueType.LIST

    def __len__(self) -> int:
        return len(self.items)

    def to_object(self) -> list:
        return [item.to_object() for item in self.items]


@dataclass(frozen=True)
class MapValue(Value):
    """Mapping stored as ordered (key, value) pairs so the value stays hashable."""

    entries: Tuple[Tuple[Value, Value], ...] = ()
    type = ValueType.MAP

    def __len__(self) -> int:
        return len(self.entries)

    def to_object(self) -> Dict[Any, Any]:
        return {k.to_object(): v.to_object() for k, v in self.entries}


NULL = NullValue()

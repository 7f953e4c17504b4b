from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from .app_constants import DEFAULT_INDENT, DEFAULT_MAX_DEPTH


class JSONType(IntEnum):
    NULL = 0
    BOOL = 1
    NUMBER = 2
    STRING = 3
    ARRAY = 4
    OBJECT = 5


JSONArray = list["JSONValue"]
JSONObject = dict[str, "JSONValue"]

# Returned by the read accessors on type mismatch; neither can be mutated.
EMPTY_ARRAY: tuple[JSONValue, ...] = ()
EMPTY_OBJECT: Mapping[str, JSONValue] = MappingProxyType({})

_MAX_EXACT_INT = 2**53


def _convert(value: Any) -> tuple[JSONType, Any]:
    if isinstance(value, JSONValue):
        clone = _copy_tree(value)
        return clone._type, clone._data
    if value is None:
        return JSONType.NULL, None
    if isinstance(value, bool):
        return JSONType.BOOL, value
    if isinstance(value, (int, float)):
        try:
            return JSONType.NUMBER, float(value)
        except OverflowError as exc:
            raise ValueError("Integer is too large for a JSON number") from exc
    if isinstance(value, str):
        return JSONType.STRING, value
    if isinstance(value, Mapping):
        data: JSONObject = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
            data[key] = JSONValue(item)
        return JSONType.OBJECT, data
    if isinstance(value, (list, tuple)):
        return JSONType.ARRAY, [JSONValue(item) for item in value]
    raise TypeError(f"Cannot convert {type(value).__name__} to a JSON value")


def _copy_tree(source: JSONValue) -> JSONValue:
    # Walks with an explicit stack so arbitrarily deep trees can be copied.
    root = object.__new__(JSONValue)
    pending = [(source, root)]
    while pending:
        src, dst = pending.pop()
        dst._frozen = False
        dst._type = src._type
        if src._type == JSONType.ARRAY:
            dst._data = [object.__new__(JSONValue) for _ in src._data]
            pending.extend(zip(src._data, dst._data))
        elif src._type == JSONType.OBJECT:
            dst._data = {key: object.__new__(JSONValue) for key in src._data}
            pending.extend((item, dst._data[key]) for key, item in src._data.items())
        else:
            dst._data = src._data
    return root


def _check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"JSON array indices must be int, not {type(index).__name__}")
    if index < 0:
        raise IndexError(f"JSON array index cannot be negative: {index}")
    return index


class JSONValue:
    """A JSON datum: null, boolean, number, string, array or object.

    The value holds a type tag and exactly one payload. Changing the type
    discards the previous payload. Arrays and objects own their children:
    anything stored into a value is deep-copied first, so two values never
    share a sub-tree.

    Reads are permissive. ``get_bool``, ``get_number``, ``get_string``,
    ``get_array`` and ``get_object`` return ``False``, ``0.0``, ``""``,
    ``EMPTY_ARRAY`` and ``EMPTY_OBJECT`` when the value holds another type,
    and ``get``/``at`` return ``JSONValue.EMPTY`` for a missing child.
    Callers that care about the difference between "empty" and "wrong
    type" must check ``type`` or the ``is_*`` predicates first.

    Subscripting is coercive: ``value["key"]`` turns a non-object into an
    empty object and ``value[0]`` turns a non-array into an empty array,
    creating Null children on demand, so ``v["a"]["b"].push(1)`` builds
    the nested structure.
    """

    __slots__ = ("_type", "_data", "_frozen")

    EMPTY: JSONValue

    def __init__(self, value: Any = None) -> None:
        self._frozen = False
        self._type, self._data = _convert(value)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("JSONValue.EMPTY is read-only")

    def _reset(self, value_type: JSONType, data: Any) -> None:
        self._check_mutable()
        self._type = value_type
        self._data = data

    def _ensure(self, value_type: JSONType) -> None:
        if self._type == value_type:
            self._check_mutable()
            return
        self._reset(value_type, [] if value_type == JSONType.ARRAY else {})

    @property
    def type(self) -> JSONType:
        return self._type

    def is_null(self) -> bool:
        return self._type == JSONType.NULL

    def is_bool(self) -> bool:
        return self._type == JSONType.BOOL

    def is_number(self) -> bool:
        return self._type == JSONType.NUMBER

    def is_string(self) -> bool:
        return self._type == JSONType.STRING

    def is_array(self) -> bool:
        return self._type == JSONType.ARRAY

    def is_object(self) -> bool:
        return self._type == JSONType.OBJECT

    def get_bool(self) -> bool:
        return self._data if self._type == JSONType.BOOL else False

    def get_number(self) -> float:
        return self._data if self._type == JSONType.NUMBER else 0.0

    def get_string(self) -> str:
        return self._data if self._type == JSONType.STRING else ""

    def get_array(self) -> tuple[JSONValue, ...]:
        return tuple(self._data) if self._type == JSONType.ARRAY else EMPTY_ARRAY

    def get_object(self) -> Mapping[str, JSONValue]:
        return MappingProxyType(self._data) if self._type == JSONType.OBJECT else EMPTY_OBJECT

    def get(self, key: str) -> JSONValue:
        if self._type != JSONType.OBJECT:
            return JSONValue.EMPTY
        return self._data.get(key, JSONValue.EMPTY)

    def at(self, index: int) -> JSONValue:
        if self._type != JSONType.ARRAY or not 0 <= index < len(self._data):
            return JSONValue.EMPTY
        return self._data[index]

    def contains(self, key: str) -> bool:
        return self._type == JSONType.OBJECT and key in self._data

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def size(self) -> int:
        if self._type in (JSONType.ARRAY, JSONType.OBJECT):
            return len(self._data)
        return 0

    def is_empty(self) -> bool:
        if self._type in (JSONType.ARRAY, JSONType.OBJECT):
            return not self._data
        return False

    def __getitem__(self, key: str | int) -> JSONValue:
        if isinstance(key, str):
            self._ensure(JSONType.OBJECT)
            child = self._data.get(key)
            if child is None:
                child = self._data[key] = JSONValue()
            return child
        index = _check_index(key)
        self._ensure(JSONType.ARRAY)
        self._grow(index + 1)
        return self._data[index]

    def __setitem__(self, key: str | int, value: Any) -> None:
        item = JSONValue(value)
        if isinstance(key, str):
            self._ensure(JSONType.OBJECT)
            self._data[key] = item
            return
        index = _check_index(key)
        self._ensure(JSONType.ARRAY)
        self._grow(index + 1)
        self._data[index] = item

    def __delitem__(self, key: str | int) -> None:
        # Erasing never coerces and never raises for a missing child.
        if isinstance(key, str):
            self.erase_key(key)
        else:
            self.erase(_check_index(key))

    def _grow(self, size: int) -> None:
        missing = size - len(self._data)
        if missing > 0:
            self._data.extend(JSONValue() for _ in range(missing))

    def set(self, value: Any) -> None:
        self._reset(*_convert(value))

    def set_null(self) -> None:
        self._reset(JSONType.NULL, None)

    def set_empty_array(self) -> None:
        self._reset(JSONType.ARRAY, [])

    def set_empty_object(self) -> None:
        self._reset(JSONType.OBJECT, {})

    def push(self, value: Any) -> None:
        item = JSONValue(value)
        self._ensure(JSONType.ARRAY)
        self._data.append(item)

    def insert(self, index: int, value: Any) -> None:
        item = JSONValue(value)
        index = _check_index(index)
        self._ensure(JSONType.ARRAY)
        self._data.insert(min(index, len(self._data)), item)

    def insert_pair(self, pair: tuple[str, Any]) -> None:
        key, value = pair
        if not isinstance(key, str):
            raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
        item = JSONValue(value)
        self._ensure(JSONType.OBJECT)
        self._data[key] = item

    def pop(self) -> None:
        if self._type == JSONType.ARRAY and self._data:
            self._data.pop()

    def erase(self, pos: int, length: int = 1) -> None:
        if self._type != JSONType.ARRAY:
            return
        if length <= 0 or pos < 0 or pos + length > len(self._data):
            return
        del self._data[pos : pos + length]

    def erase_key(self, key: str) -> bool:
        if self._type != JSONType.OBJECT or key not in self._data:
            return False
        del self._data[key]
        return True

    def resize(self, new_size: int) -> None:
        if new_size < 0:
            raise ValueError(f"JSON array size cannot be negative: {new_size}")
        self._ensure(JSONType.ARRAY)
        if new_size < len(self._data):
            del self._data[new_size:]
        else:
            self._grow(new_size)

    def clear(self) -> None:
        if self._type in (JSONType.ARRAY, JSONType.OBJECT):
            self._data.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONValue):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left._type != right._type:
                return False
            if left._type == JSONType.ARRAY:
                if len(left._data) != len(right._data):
                    return False
                pending.extend(zip(left._data, right._data))
            elif left._type == JSONType.OBJECT:
                if left._data.keys() != right._data.keys():
                    return False
                pending.extend((item, right._data[key]) for key, item in left._data.items())
            elif left._data != right._data:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> JSONValue:
        return _copy_tree(self)

    def __copy__(self) -> JSONValue:
        return _copy_tree(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> JSONValue:
        return _copy_tree(self)

    def to_python(self) -> Any:
        if self._type == JSONType.ARRAY:
            return [item.to_python() for item in self._data]
        if self._type == JSONType.OBJECT:
            return {key: item.to_python() for key, item in self._data.items()}
        if self._type == JSONType.NUMBER and self._data.is_integer() and abs(self._data) <= _MAX_EXACT_INT:
            return int(self._data)
        return self._data

    def from_string(self, text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
        """Parse ``text`` into this value and report success.

        On failure the value holds whatever was built before the error and
        must be discarded.
        """
        from .json_reader import parse_into

        return parse_into(self, text, max_depth=max_depth)

    def to_string(self, spacing: int = DEFAULT_INDENT) -> str:
        from .json_writer import serialize

        return serialize(self, spacing)

    def __str__(self) -> str:
        return self.to_string(0)

    def __repr__(self) -> str:
        return f"JSONValue({self.to_string(0)})"


JSONValue.EMPTY = JSONValue()
JSONValue.EMPTY._frozen = True

from .exceptions import JSONParseError, JSONValueError
from .json_reader import loads, parse
from .json_writer import dumps, serialize
from .startup_options import StartupOptions
from .value import EMPTY_ARRAY, EMPTY_OBJECT, JSONType, JSONValue

__all__ = [
    "EMPTY_ARRAY",
    "EMPTY_OBJECT",
    "JSONParseError",
    "JSONType",
    "JSONValue",
    "JSONValueError",
    "StartupOptions",
    "dumps",
    "loads",
    "parse",
    "serialize",
]

"""
This module provides the canonical JSON encoder used by the highlighter.

The encoder walks a node tree and produces compact JSON text (no whitespace between
tokens) through a small set of sink methods. Subclasses decide where the text goes:
an in-memory buffer, a text stream, or the segment builder that splits the output
into highlighted runs.
"""

import math
from typing import IO, Any, List, NamedTuple, Union

from json_highlight_writer.nodes import (
    Array,
    Boolean,
    JsonValue,
    Null,
    Number,
    Object,
    String,
)

# Escape sequences for characters that must not appear raw inside a JSON string.
# Control characters without a short form are written as \u00XX.
ESCAPED = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}
for _code in range(0x20):
    ESCAPED.setdefault(chr(_code), f"\\u{_code:04x}")
del _code


def format_number(value: Union[int, float]) -> str:
    """
    Format a number as the shortest JSON text that reads back to the same value.

    NaN and the infinities have no JSON spelling and come out as `null`.
    """
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return "null"
        return float.__repr__(value)
    return int.__repr__(value)


class _Key(NamedTuple):
    """Stack entry: an object key, written together with its colon."""

    key: str


class _Leave(NamedTuple):
    """Stack entry: the end of a node, handed back to `leave` with the token from `enter`."""

    node: JsonValue
    token: Any


class Generator:
    """
    Base class for the canonical JSON encoder.

    Subclasses must implement `write`; `write_char` defaults to it. Every piece of text
    is handed to the sink exactly once, in document order.

    The walk keeps its own stack instead of recursing, so documents of any nesting
    depth can be written. Subclasses that need to know where each node starts and ends
    override `enter` and `leave`.
    """

    def write(self, text: str):
        raise NotImplementedError

    def write_char(self, ch: str):
        self.write(ch)

    def enter(self, node: JsonValue) -> Any:
        """Called before the first character of `node`; the return value goes to `leave`."""
        return None

    def leave(self, token: Any):
        """Called after the last character of a node."""

    def write_string_complex(self, string: str, start: int):
        """Write the rest of a string that has at least one character to escape at `start`."""
        # The prefix before `start` is known to be clean
        self.write(string[:start])

        for index in range(start, len(string)):
            escape = ESCAPED.get(string[index])
            if escape is not None:
                self.write(string[start:index])
                self.write(escape)
                start = index + 1
        self.write(string[start:])

        self.write_char('"')

    def write_string(self, string: str):
        self.write_char('"')

        for index, ch in enumerate(string):
            if ch in ESCAPED:
                return self.write_string_complex(string, index)

        self.write(string)
        self.write_char('"')

    def write_number(self, number: Number):
        self.write(format_number(number.value))

    def write_object(self, obj: Object, stack: list):
        """Write the opening brace and schedule the members and closing brace."""
        self.write_char("{")
        stack.append("}")
        members = list(obj.items())
        for index in range(len(members) - 1, -1, -1):
            key, value = members[index]
            stack.append(value)
            stack.append(_Key(key))
            if index:
                stack.append(",")

    def write_array(self, arr: Array, stack: list):
        """Write the opening bracket and schedule the items and closing bracket."""
        self.write_char("[")
        stack.append("]")
        for index in range(len(arr) - 1, -1, -1):
            stack.append(arr[index])
            if index:
                stack.append(",")

    def write_json(self, root: JsonValue):
        """
        Encode a node and all of its children.

        Raises:
            TypeError: If a node is not one of the JSON node types
        """
        # Entries are nodes to write, keys, punctuation, or node ends
        stack: list = [root]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                self.write_char(item)
            elif isinstance(item, _Key):
                self.write_string(item.key)
                self.write_char(":")
            elif isinstance(item, _Leave):
                self.leave(item.token)
            else:
                stack.append(_Leave(item, self.enter(item)))
                self.write_value(item, stack)

    def write_value(self, node: JsonValue, stack: list):
        if isinstance(node, Null):
            self.write("null")
        elif isinstance(node, Boolean):
            self.write("true" if node.value else "false")
        elif isinstance(node, Number):
            self.write_number(node)
        elif isinstance(node, String):
            self.write_string(node.value)
        elif isinstance(node, Array):
            self.write_array(node, stack)
        elif isinstance(node, Object):
            self.write_object(node, stack)
        else:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")


class DumpGenerator(Generator):
    """Collects the encoded text in memory."""

    def __init__(self):
        self.code: List[str] = []

    def write(self, text: str):
        self.code.append(text)

    def consume(self) -> str:
        return "".join(self.code)


class WriterGenerator(Generator):
    """
    Writes the encoded text straight into a text stream.

    Errors raised by the stream propagate to the caller as-is. The output is not
    resumable, so a failed write leaves the stream holding a partial document.
    """

    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write(self, text: str):
        self.stream.write(text)


def dumps(value: JsonValue) -> str:
    """Return the canonical compact encoding of a node tree."""
    gen = DumpGenerator()
    gen.write_json(value)
    return gen.consume()


def dump(value: JsonValue, stream: IO[str]):
    """Write the canonical compact encoding of a node tree into `stream`."""
    WriterGenerator(stream).write_json(value)

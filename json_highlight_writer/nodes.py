"""
This module defines the JSON value tree that the highlighting encoder walks.

Python shares a single object for None, True, False, small integers and interned
strings, so plain Python data cannot tell two equal scalars apart. Every value here
is wrapped in its own node object instead, which makes the node itself (compared
with `is`) a stable handle that can be passed in as a highlight target.

A node can sit in at most one place: once it has been added to an array or object
it is attached, and adding it anywhere else raises `ValueError`.
"""

from typing import Any, Dict, Iterator, List, Tuple, Union


class JsonValue:
    """
    Base class for all nodes of a JSON document tree.

    Two nodes compare equal with `==` when they hold the same data, but they are only
    the same node when they are the same object. Nodes are not hashable.

    Attributes:
        attached (bool): Whether the node is already a child of an array or object
    """

    __slots__ = ("attached",)
    __hash__ = None

    def __init__(self):
        self.attached = False

    def to_python(self) -> Any:
        """Convert the node (and its children) back to plain Python data."""
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, JsonValue):
            return NotImplemented
        return type(self) is type(other) and self.to_python() == other.to_python()

    def __repr__(self):
        return f"{type(self).__name__}({self.to_python()!r})"


class Null(JsonValue):
    __slots__ = ()

    def to_python(self) -> None:
        return None


class Boolean(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        super().__init__()
        self.value = bool(value)

    def to_python(self) -> bool:
        return self.value


class Number(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: Union[int, float]):
        super().__init__()
        # bool is an int subclass, but true/false are not numbers in JSON
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Unsupported number type: {type(value).__name__}")
        self.value = value

    def to_python(self) -> Union[int, float]:
        return self.value

    def __eq__(self, other):
        # NaN never equals itself, match float semantics
        if isinstance(other, Number):
            return self.value == other.value
        return super().__eq__(other)


class String(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: str):
        super().__init__()
        if not isinstance(value, str):
            raise TypeError(f"Unsupported string type: {type(value).__name__}")
        self.value = value

    def to_python(self) -> str:
        return self.value


class Array(JsonValue):
    """An ordered sequence of nodes. Indexing returns the child node itself."""

    __slots__ = ("items",)

    def __init__(self, items=()):
        super().__init__()
        self.items: List[JsonValue] = [_adopt(item) for item in items]

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list:
        return _to_python(self)


class Object(JsonValue):
    """
    An ordered mapping from string keys to nodes.

    Keys keep their insertion order, which is also the order they are written in.
    Indexing with a key returns the child node itself.
    """

    __slots__ = ("members",)

    def __init__(self, members=()):
        super().__init__()
        if isinstance(members, JsonValue):
            raise TypeError(
                f"Object members must be a dict or (key, value) pairs, not {type(members).__name__}"
            )
        self.members: Dict[str, JsonValue] = {}
        pairs = members.items() if isinstance(members, dict) else members
        for key, value in pairs:
            self.members[_check_key(key)] = _adopt(value)

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def __contains__(self, key: str) -> bool:
        return key in self.members

    def __len__(self) -> int:
        return len(self.members)

    def items(self) -> Iterator[Tuple[str, JsonValue]]:
        return iter(self.members.items())

    def to_python(self) -> dict:
        return _to_python(self)


def from_python(value: Any) -> JsonValue:
    """
    Build a fresh node tree from plain Python data.

    Every scalar in the input gets its own node, so two `None`s in the same list
    become two distinct `Null` nodes that can be targeted independently. Nodes found
    inside the data are kept as they are. Nesting depth is not limited by the
    interpreter's recursion limit.

    Args:
        value: dict, list, tuple, str, int, float, bool or None, nested freely

    Returns:
        JsonValue: The root node of the new tree

    Raises:
        TypeError: If the data contains a type with no JSON counterpart
        ValueError: If the data contains a node that is already attached elsewhere
    """
    root = _shallow(value)
    stack = [(root, value)]
    while stack:
        node, data = stack.pop()
        if isinstance(data, JsonValue):
            continue
        if isinstance(data, dict):
            for key, item in data.items():
                child = _attach(_shallow(item))
                node.members[_check_key(key)] = child
                stack.append((child, item))
        elif isinstance(data, (list, tuple)):
            for item in data:
                child = _attach(_shallow(item))
                node.items.append(child)
                stack.append((child, item))
    return root


def array(*items: Any) -> Array:
    """Array literal helper: `array(None, "world", True)`."""
    return Array(items)


def object_(pairs=(), **members: Any) -> Object:
    """
    Object literal helper.

    Accepts either a sequence of `(key, value)` pairs / a dict, or keyword members,
    e.g. `object_(foo=False, bar=None)`. Keys that are not valid Python identifiers
    (such as `"2ndobj"`) need the pairs form.
    """
    obj = Object(pairs)
    for key, value in members.items():
        obj.members[key] = _adopt(value)
    return obj


def _shallow(value: Any) -> JsonValue:
    # Containers come back empty; from_python fills them in
    if isinstance(value, JsonValue):
        return value
    if value is None:
        return Null()
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, (list, tuple)):
        return Array()
    if isinstance(value, dict):
        return Object()
    raise TypeError(f"Unsupported type in JSON document: {type(value).__name__}")


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
    return key


def _attach(node: JsonValue) -> JsonValue:
    if node.attached:
        raise ValueError(f"{node!r} is already part of a document; build a new node instead")
    node.attached = True
    return node


def _adopt(value: Any) -> JsonValue:
    return _attach(from_python(value))


def _to_python(root: JsonValue) -> Any:
    def shallow(node):
        if isinstance(node, Array):
            return []
        if isinstance(node, Object):
            return {}
        return node.to_python()

    result = shallow(root)
    stack = [(root, result)]
    while stack:
        node, data = stack.pop()
        if isinstance(node, Array):
            for item in node.items:
                value = shallow(item)
                data.append(value)
                stack.append((item, value))
        elif isinstance(node, Object):
            for key, item in node.members.items():
                value = shallow(item)
                data[key] = value
                stack.append((item, value))
    return result

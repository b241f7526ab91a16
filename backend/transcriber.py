"""
JSON to Gameplay3D property transcriber.

Walks a parsed JSON value tree depth-first and writes the property text
straight to a stream as it goes:

    name
    {
        key = value
        child
        {
            ...
        }
    }
"""
import enum
import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

INDENTATION_SPACES = 4
MAX_EXACT_INTEGER = 2 ** 53


class Modification(enum.Enum):
    """Most recent change made to a namespace"""
    NONE = 0
    VALUE_ADDED = 1
    NAMESPACE_ADDED = 2


class Entry:
    """A key = value line. The value stays None until the scalar is visited."""

    def __init__(self, key: str):
        self.key = key
        self.value: Optional[str] = None

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


class Namespace:
    """
    A brace-delimited scope in the output.

    The root namespace sits at depth -1, has no name, and is never rendered.
    """

    def __init__(self, name: str = "", depth: int = -1):
        self.name = name
        self.depth = depth
        self.last_action = Modification.NONE
        self.entries: List[Entry] = []
        self.namespaces: List["Namespace"] = []

    def add_namespace(self, child: "Namespace"):
        self.namespaces.append(child)
        self.last_action = Modification.NAMESPACE_ADDED

    def reserve_entry(self, key: str) -> Entry:
        entry = Entry(key)
        self.entries.append(entry)
        return entry

    def fill_last_entry(self, value: str) -> Entry:
        entry = self.entries[-1]
        entry.value = value
        self.last_action = Modification.VALUE_ADDED
        return entry

    def has_pending_entry(self) -> bool:
        return bool(self.entries) and self.entries[-1].value is None

    def __repr__(self):
        return f"Namespace({self.name!r}, depth={self.depth})"


def is_namespace_type(node: Any) -> bool:
    return isinstance(node, (dict, list))


def get_indentation(depth: int) -> str:
    return " " * (max(depth, 0) * INDENTATION_SPACES)


def format_scalar(value: Any) -> str:
    """
    Display string for a scalar value.

    Strings are written verbatim, booleans and null use their JSON spelling,
    and integral floats lose the trailing ".0".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < MAX_EXACT_INTEGER:
            return str(int(value))
        return repr(value)
    return str(value)


def get_key_name(node: Any, name_key: Optional[str]) -> str:
    """Name carried inside an array element, or "" when it has none"""
    if not name_key or not isinstance(node, dict):
        return ""
    name = node.get(name_key)
    if isinstance(name, str):
        return name
    return ""


def get_formatted_name(child: Namespace, parent: Namespace) -> str:
    if child.name:
        return child.name
    return f"{parent.name}_{len(parent.namespaces)}"


def begin_namespace_scope(child: Namespace, parent: Namespace, stream):
    if parent.last_action != Modification.NONE:
        stream.write("\n")

    indentation = get_indentation(child.depth)
    stream.write(f"{indentation}{get_formatted_name(child, parent)}\n")
    stream.write(f"{indentation}{{\n")
    parent.last_action = Modification.NAMESPACE_ADDED


def end_namespace_scope(child: Namespace, stream):
    stream.write(f"{get_indentation(child.depth)}}}\n")


def transcribe(node: Any, namespace: Namespace, stream, sort_keys: bool = False,
               name_key: Optional[str] = "name"):
    """
    Write `node` to `stream` in property format, within `namespace`.

    Args:
        node: Parsed JSON value (dict, list or scalar). Never modified.
        namespace: Namespace the node belongs to; a fresh Namespace() for the root.
        stream: Text stream with a write() method.
        sort_keys: Emit object members in sorted key order instead of insertion order.
        name_key: Member of an array element object that names its namespace.
    """
    def convert(current, current_namespace: Namespace):
        if isinstance(current, list):
            value_index = 0
            for item in current:
                if is_namespace_type(item):
                    child = Namespace(get_key_name(item, name_key), current_namespace.depth + 1)
                    descend(item, child, current_namespace)
                else:
                    current_namespace.reserve_entry(str(value_index))
                    convert(item, current_namespace)
                    value_index += 1

        elif isinstance(current, dict):
            items = current.items()
            if sort_keys:
                items = sorted(items, key=lambda pair: str(pair[0]))
            for key, value in items:
                if is_namespace_type(value):
                    child = Namespace(str(key), current_namespace.depth + 1)
                    descend(value, child, current_namespace)
                else:
                    current_namespace.reserve_entry(str(key))
                    convert(value, current_namespace)

        else:
            if not current_namespace.has_pending_entry():
                # A bare scalar document has no key to write it under
                logger.debug("Skipping scalar %r with no reserved entry", current)
                return

            if current_namespace.last_action == Modification.NAMESPACE_ADDED:
                stream.write("\n")

            entry = current_namespace.fill_last_entry(format_scalar(current))
            stream.write(
                f"{get_indentation(current_namespace.depth + 1)}{entry.key} = {entry.value}\n"
            )

    def descend(value, child: Namespace, parent: Namespace):
        begin_namespace_scope(child, parent, stream)
        convert(value, child)
        parent.add_namespace(child)
        end_namespace_scope(child, stream)

    convert(node, namespace)

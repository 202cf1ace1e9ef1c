"""
pluglog Metadata Sanitizer

Rewrites arbitrary metadata graphs so they can cross a serialization
boundary. Objects that are revisited while still open on the current
traversal path are replaced by CIRCULAR_MARKER. Objects shared by sibling
branches are not cycles and are copied in full at every occurrence.

The walk keeps its own stack, so nesting depth is not bounded by the
interpreter's recursion limit.
"""

import math
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Set, Union


CIRCULAR_MARKER = "[Circular]"
DEPTH_MARKER = "[Truncated]"

# Nesting kept for JSON output; json.dumps recurses once per level
MAX_JSON_DEPTH = 500

# Key types json.dumps accepts
_JSON_KEY_TYPES = (str, int, float, bool, type(None))


class _Frame:
    """One open composite: its id, remaining items and the copy being built."""

    __slots__ = ("node_id", "items", "result", "is_tuple", "parent", "parent_key", "depth")

    def __init__(self, node_id: int, data: Any, parent: Optional["_Frame"], parent_key: Any):
        self.node_id = node_id
        self.parent = parent
        self.parent_key = parent_key
        self.depth = parent.depth + 1 if parent is not None else 1
        self.is_tuple = isinstance(data, tuple)
        if isinstance(data, Mapping):
            self.items = iter(list(data.items()))
            self.result: Union[Dict[Any, Any], List[Any]] = {}
        else:
            self.items = iter(enumerate(list(data)))
            self.result = []

    def add(self, key: Any, value: Any) -> None:
        if isinstance(self.result, dict):
            self.result[key] = value
        else:
            self.result.append(value)

    def finish(self) -> Union[Dict[Any, Any], List[Any], tuple]:
        if self.is_tuple:
            return tuple(self.result)
        return self.result


class MetadataSanitizer:
    """
    Single-use walker holding the set of composites open on the current path.

    The input is never modified; mappings are rebuilt as dicts, lists as
    lists and tuples as tuples. Any other value is returned as-is.

    With ``json_compatible`` set, mapping keys that JSON cannot use are
    converted with ``str()`` and non-finite floats become None. Composites
    nested deeper than ``max_depth`` are replaced by DEPTH_MARKER.
    """

    def __init__(self, json_compatible: bool = False, max_depth: Optional[int] = None):
        self.json_compatible = json_compatible
        self.max_depth = max_depth
        self._open: Set[int] = set()

    @staticmethod
    def _is_composite(value: Any) -> bool:
        return isinstance(value, (Mapping, list, tuple))

    def _leaf(self, value: Any) -> Any:
        if self.json_compatible and isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    def _key(self, key: Any) -> Any:
        if self.json_compatible and not isinstance(key, _JSON_KEY_TYPES):
            return str(key)
        return key

    def sanitize(self, value: Any) -> Any:
        if not self._is_composite(value):
            return self._leaf(value)

        root = _Frame(id(value), value, None, None)
        self._open.add(root.node_id)
        stack = [root]

        while stack:
            frame = stack[-1]
            entry = next(frame.items, None)

            if entry is None:
                stack.pop()
                # Only ancestors on the current path count as open
                self._open.discard(frame.node_id)
                if frame.parent is None:
                    return frame.finish()
                frame.parent.add(frame.parent_key, frame.finish())
                continue

            key, child = entry
            key = self._key(key)
            if not self._is_composite(child):
                frame.add(key, self._leaf(child))
            elif id(child) in self._open:
                frame.add(key, CIRCULAR_MARKER)
            elif self.max_depth is not None and frame.depth >= self.max_depth:
                frame.add(key, DEPTH_MARKER)
            else:
                self._open.add(id(child))
                stack.append(_Frame(id(child), child, frame, key))

        return None


def sanitize(value: Any) -> Any:
    """
    Return a copy of ``value`` with circular references replaced.

    Args:
        value: Metadata of any shape

    Returns:
        Structurally equal value in which every composite reached again
        from inside itself is the literal "[Circular]"

    Example:
        >>> meta = {"key": "value"}
        >>> meta["self"] = meta
        >>> sanitize(meta)
        {'key': 'value', 'self': '[Circular]'}
    """
    return MetadataSanitizer().sanitize(value)


def sanitize_meta(meta: Any) -> Union[Dict[Any, Any], List[Any], tuple]:
    """
    Sanitize structured metadata for JSON output.

    Anything that is not a mapping or sequence becomes {}. Keys JSON cannot
    represent are stringified, NaN/Infinity become None and nesting beyond
    MAX_JSON_DEPTH is truncated.
    """
    if isinstance(meta, (Mapping, list, tuple)):
        return MetadataSanitizer(json_compatible=True, max_depth=MAX_JSON_DEPTH).sanitize(meta)
    return {}

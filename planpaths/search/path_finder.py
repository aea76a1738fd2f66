"""
Locate every occurrence of a key in a tree of mappings and sequences.

Plan documents enumerate equivalent children in different orders between runs,
so results should be compared as sets (see ``path_set``), not as sequences.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, List, Sequence, Tuple

from planpaths.search.models import KeyOccurrence
from planpaths.search.path_format import format_path
from planpaths.search.tree import (
    PathSegment,
    TreePath,
    is_mapping,
    is_sequence,
    validate_key,
    validate_tree,
)


class PathLookupError(LookupError):
    """Raised when a path does not exist in a tree."""


def find_key_occurrences(tree: Any, key: str) -> List[KeyOccurrence]:
    """
    Find every mapping entry whose key equals *key* exactly.

    Entries are reported with their raw value; ``{"constant_value": ...}``
    wrappers are not unwrapped. When a matching entry holds a mapping or a
    sequence, the traversal keeps descending into it, so nested matches are
    reported as well.

    Args:
        tree: Mapping, sequence or scalar (see ``planpaths.search.tree``)
        key: Key to look for (case-sensitive)

    Returns:
        Occurrences in depth-first order

    Raises:
        InvalidInputError: If *tree* is malformed or *key* is not a string
    """
    validate_key(key)
    validate_tree(tree)

    found: List[KeyOccurrence] = []

    # Explicit stack; children are pushed in reverse to keep depth-first order.
    stack: List[Tuple[Any, TreePath, bool]] = [(tree, [], False)]
    while stack:
        node, path, matched = stack.pop()
        if matched:
            found.append(KeyOccurrence(path=path, value=node))
        if is_mapping(node):
            for name, child in reversed(list(node.items())):
                stack.append((child, path + [name], name == key))
        elif is_sequence(node):
            for index in range(len(node) - 1, -1, -1):
                stack.append((node[index], path + [index], False))
    return found


def find_key_paths(tree: Any, key: str) -> List[TreePath]:
    """
    Return the access path of every occurrence of *key* in *tree*.

    Example:
        >>> find_key_paths({"a": {"b": True}, "c": [{"b": False}]}, "b")
        [['a', 'b'], ['c', 0, 'b']]
    """
    return [occ.path for occ in find_key_occurrences(tree, key)]


def count_key(tree: Any, key: str) -> int:
    return len(find_key_occurrences(tree, key))


def _where(path: Sequence[PathSegment], depth: int) -> str:
    return format_path(list(path[: depth + 1]))


def resolve_path(tree: Any, path: Sequence[PathSegment]) -> Any:
    """
    Return the node reached by following *path* from the root of *tree*.

    Raises:
        PathLookupError: If a segment does not exist or does not fit the node
            it is applied to (a key on a sequence, an index on a mapping)
    """
    node = tree
    for depth, segment in enumerate(path):
        if is_mapping(node):
            if not isinstance(segment, str) or segment not in node:
                raise PathLookupError(f"No key at {_where(path, depth)}")
            node = node[segment]
        elif is_sequence(node):
            if isinstance(segment, bool) or not isinstance(segment, int):
                raise PathLookupError(f"Expected an index at {_where(path, depth)}")
            if not 0 <= segment < len(node):
                raise PathLookupError(f"Index out of range at {_where(path, depth)}")
            node = node[segment]
        else:
            raise PathLookupError(f"Cannot descend into a scalar at {_where(path, depth)}")
    return node


def path_set(paths: Iterable[Sequence[PathSegment]]) -> FrozenSet[Tuple[PathSegment, ...]]:
    """Order-insensitive form of a search result."""
    return frozenset(tuple(path) for path in paths)

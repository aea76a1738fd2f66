"""Tree value model for semi-structured plan documents."""

from __future__ import annotations

from typing import Any, Dict, List, Union

Scalar = Union[bool, int, float, str, None]
TreeValue = Union[Dict[str, Any], List[Any], Scalar]
PathSegment = Union[str, int]
TreePath = List[PathSegment]

SCALAR_TYPES = (bool, int, float, str, type(None))
SEQUENCE_TYPES = (list, tuple)


class InvalidInputError(ValueError):
    """Raised when a value does not conform to the tree model."""


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_sequence(value: Any) -> bool:
    return isinstance(value, SEQUENCE_TYPES)


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def _location(path: TreePath) -> str:
    # Imported lazily: path_format depends on this module for its types.
    from planpaths.search.path_format import format_path

    return format_path(path, style="jq")


def validate_tree(tree: Any) -> None:
    """
    Check that *tree* is made only of mappings, sequences and scalars.

    Mapping keys must be strings. The walk uses an explicit stack so that very
    deep documents do not hit the interpreter recursion limit.

    Raises:
        InvalidInputError: On the first malformed node, naming its location.
    """
    stack: List[tuple] = [(tree, [])]
    while stack:
        node, path = stack.pop()
        if is_mapping(node):
            for key, child in node.items():
                if not isinstance(key, str):
                    raise InvalidInputError(
                        f"Mapping key {key!r} at {_location(path)} is not a string"
                    )
                stack.append((child, path + [key]))
        elif is_sequence(node):
            for index, child in enumerate(node):
                stack.append((child, path + [index]))
        elif not is_scalar(node):
            raise InvalidInputError(
                f"Unsupported value of type {type(node).__name__} at {_location(path)}"
            )


def validate_key(key: Any) -> str:
    """Return *key* if it is a usable search key."""
    if not isinstance(key, str):
        raise InvalidInputError(f"Search key must be a string, got {type(key).__name__}")
    return key

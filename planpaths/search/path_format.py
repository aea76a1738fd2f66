"""Rendering and parsing of access paths."""

from __future__ import annotations

import json
import re
from typing import Sequence

from planpaths.search.tree import PathSegment, TreePath

PATH_STYLES = ("jq", "dot")

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _jq_segment(segment: PathSegment) -> str:
    if isinstance(segment, int) and not isinstance(segment, bool):
        return f"[{segment}]"
    if _IDENTIFIER.fullmatch(segment):
        return f".{segment}"
    return f".{json.dumps(segment)}"


def format_path(path: Sequence[PathSegment], style: str = "jq") -> str:
    """
    Render a path for display.

    Examples:
        >>> format_path(["c", 0, "b"])
        '.c[0].b'
        >>> format_path(["c", 0, "b"], style="dot")
        'c.0.b'
        >>> format_path(["tags", "cost-center"])
        '.tags."cost-center"'
    """
    if style == "jq":
        if not path:
            return "."
        return "".join(_jq_segment(segment) for segment in path)
    if style == "dot":
        return ".".join(str(segment) for segment in path)
    raise ValueError(f"Unknown path style '{style}' (expected one of {', '.join(PATH_STYLES)})")


def parse_dot_path(text: str) -> TreePath:
    """
    Parse dot notation (``values.network_interface.0.network``) into a path.

    All-digit segments become sequence indices.
    """
    if not text:
        return []
    path: TreePath = []
    for part in text.split("."):
        path.append(int(part) if part.isascii() and part.isdigit() else part)
    return path

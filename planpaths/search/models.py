"""Models for key search results."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from planpaths.search.path_format import format_path
from planpaths.search.tree import TreePath
from planpaths.search.values import describe_value, is_constant_wrapper, unwrap_constant_value


@dataclass
class KeyOccurrence:
    """A single mapping entry whose key matched the search key."""

    path: TreePath
    """Segments from the document root to the entry, ending with the key."""

    value: Any
    """The raw value stored under the key, exactly as found."""

    @property
    def jq_path(self) -> str:
        return format_path(self.path, style="jq")

    @property
    def dot_path(self) -> str:
        return format_path(self.path, style="dot")

    @property
    def is_wrapped(self) -> bool:
        return is_constant_wrapper(self.value)

    @property
    def unwrapped_value(self) -> Any:
        return unwrap_constant_value(self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "jq_path": self.jq_path, "value": self.value}


@dataclass
class KeySearchResult:
    """Complete result of searching one document for one key."""

    key: str
    """The key that was searched for."""

    source: str
    """Where the tree came from (plan file path, or "<memory>")."""

    occurrences: List[KeyOccurrence] = field(default_factory=list)
    """Every occurrence found, in traversal order."""

    section: Optional[str] = None
    """Top-level plan section the search was restricted to, if any."""

    errors: List[str] = field(default_factory=list)
    """Load or input errors that prevented the search."""

    total_occurrences: int = 0
    """Number of occurrences found."""

    found: bool = False
    """Whether at least one occurrence was found without errors."""

    def __post_init__(self):
        """Calculate summary statistics."""
        self.total_occurrences = len(self.occurrences)
        self.found = self.total_occurrences > 0 and len(self.errors) == 0

    @property
    def paths(self) -> List[TreePath]:
        return [occ.path for occ in self.occurrences]

    def summary(self) -> str:
        """Generate a human-readable summary."""
        if self.errors:
            status = "ERROR"
        elif self.found:
            status = "FOUND"
        else:
            status = "NOT FOUND"
        scope = f" (section: {self.section})" if self.section else ""
        lines = [
            f"{status}",
            f"Key: {self.key}{scope}",
            f"Occurrences: {self.total_occurrences}",
            f"Source: {self.source}",
        ]
        for err in self.errors:
            lines.append(f"Error: {err}")
        return "\n".join(lines)

    def describe(self, style: str = "jq", show_values: bool = True, unwrap: bool = False) -> List[str]:
        """One display line per occurrence."""
        lines = []
        for occ in self.occurrences:
            rendered = format_path(occ.path, style=style)
            if show_values:
                value = occ.unwrapped_value if unwrap else occ.value
                rendered = f"{rendered} = {describe_value(value)}"
            lines.append(rendered)
        return lines

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "source": self.source,
            "section": self.section,
            "found": self.found,
            "total_occurrences": self.total_occurrences,
            "occurrences": [occ.to_dict() for occ in self.occurrences],
            "errors": list(self.errors),
        }

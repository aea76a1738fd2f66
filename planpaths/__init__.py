"""planpaths: key-path search for Terraform plan JSON."""

from planpaths.search import (
    InvalidInputError,
    KeyOccurrence,
    KeySearchResult,
    PathLookupError,
    TerraformPlanParser,
    find_key_occurrences,
    find_key_paths,
    search_plan,
    search_plan_result,
)

__version__ = "0.1.0"

__all__ = [
    "find_key_paths",
    "find_key_occurrences",
    "search_plan",
    "search_plan_result",
    "KeyOccurrence",
    "KeySearchResult",
    "TerraformPlanParser",
    "InvalidInputError",
    "PathLookupError",
]

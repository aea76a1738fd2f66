"""
Key search for Terraform plan JSON.

This module provides tools to:
1. Validate semi-structured plan trees
2. Find every occurrence of a key and report its access path
3. Load Terraform plan files and query their resource changes
4. Interpret the raw values found (constant_value wrappers, references)

Recommended API:
    from planpaths.search import search_plan

    paths = search_plan("tfplan.json", "encrypted")
    # Returns: list of access paths, one per occurrence
"""

from planpaths.search.key_search import search_plan, search_plan_result, search_tree
from planpaths.search.models import KeyOccurrence, KeySearchResult
from planpaths.search.path_finder import (
    PathLookupError,
    count_key,
    find_key_occurrences,
    find_key_paths,
    path_set,
    resolve_path,
)
from planpaths.search.path_format import format_path, parse_dot_path
from planpaths.search.plan_parser import TerraformPlanParser
from planpaths.search.tree import InvalidInputError, validate_tree
from planpaths.search.values import unwrap_constant_value

__all__ = [
    "search_plan",  # Primary API - returns the access paths of a key in a plan file
    "search_plan_result",
    "search_tree",
    "find_key_paths",
    "find_key_occurrences",
    "count_key",
    "resolve_path",
    "path_set",
    "format_path",
    "parse_dot_path",
    "unwrap_constant_value",
    "validate_tree",
    "KeyOccurrence",
    "KeySearchResult",
    "TerraformPlanParser",
    "InvalidInputError",
    "PathLookupError",
]

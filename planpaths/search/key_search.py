"""
Key search over Terraform plan documents.

This module provides the primary search API for locating a field everywhere
it appears in a plan, e.g. to see which encodings of ``encrypted`` a policy
rule has to cope with.
"""
import logging
from typing import Any, List, Optional

from planpaths.search.models import KeySearchResult
from planpaths.search.path_finder import find_key_occurrences
from planpaths.search.plan_parser import TerraformPlanParser
from planpaths.search.tree import InvalidInputError, TreePath

logger = logging.getLogger(__name__)

MEMORY_SOURCE = "<memory>"


def search_plan(plan_file_path: str, key: str, section: Optional[str] = None) -> List[TreePath]:
    """
    Find the access paths of *key* in a plan file.

    Args:
        plan_file_path: Path to the plan JSON
        key: Key to look for (case-sensitive)
        section: Optional top-level section to restrict the search to

    Returns:
        List of paths; empty when nothing matched or the plan could not be read

    Example:
        >>> search_plan("tfplan.json", "encrypted")
        [['planned_values', 'root_module', 'resources', 0, 'values', 'encrypted'], ...]
    """
    result = search_plan_result(plan_file_path, key, section=section)
    if result.errors:
        logger.error(f"Search error: {'; '.join(result.errors)}")
        return []
    return result.paths


def search_plan_result(
    plan_file_path: str, key: str, section: Optional[str] = None
) -> KeySearchResult:
    """
    Search a plan file and return a structured KeySearchResult.

    This is the recommended API when you need values as well as paths.
    """
    try:
        parser = TerraformPlanParser(plan_file_path)
        parser.parse()
        logger.info(
            f"Plan {plan_file_path}: terraform {parser.terraform_version or 'unknown'}, "
            f"format {parser.format_version or 'unknown'}"
        )

        occurrences = parser.find_key(key, section=section)
        result = KeySearchResult(
            key=key,
            source=str(plan_file_path),
            section=section,
            occurrences=occurrences,
        )
    except (OSError, ValueError, KeyError) as e:
        logger.exception("Search error")
        return KeySearchResult(
            key=str(key),
            source=str(plan_file_path),
            section=section,
            errors=[_error_message(e)],
        )

    _log_result(result)
    return result


def search_tree(tree: Any, key: str, source: str = MEMORY_SOURCE) -> KeySearchResult:
    """
    Search an in-memory tree and return a KeySearchResult.

    Malformed trees are reported through ``errors`` instead of raising.
    """
    try:
        occurrences = find_key_occurrences(tree, key)
    except InvalidInputError as e:
        logger.warning(f"Invalid input from {source}: {e}")
        return KeySearchResult(key=str(key), source=source, errors=[str(e)])

    result = KeySearchResult(key=key, source=source, occurrences=occurrences)
    _log_result(result)
    return result


def _error_message(exc: Exception) -> str:
    # KeyError wraps its message in quotes
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def _log_result(result: KeySearchResult) -> None:
    logger.info(
        f"Key '{result.key}': {result.total_occurrences} occurrence(s) in {result.source}"
    )
    for occ in result.occurrences:
        logger.debug(f"Key '{result.key}' at {occ.jq_path}")

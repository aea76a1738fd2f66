"""Terraform plan JSON parser."""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from planpaths.search.models import KeyOccurrence
from planpaths.search.path_finder import find_key_occurrences
from planpaths.search.path_format import parse_dot_path
from planpaths.search.tree import validate_tree


class TerraformPlanParser:
    """Parse and query the output of ``terraform show -json``."""

    def __init__(self, plan_file_path: str):
        """
        Initialize parser with a plan file.

        Args:
            plan_file_path: Path to the plan JSON (e.g. tfplan.json)
        """
        self.plan_file_path = Path(plan_file_path)
        self._plan_data: Optional[Dict[str, Any]] = None
        self._resource_changes: Optional[List[Dict[str, Any]]] = None

    def parse(self) -> Dict[str, Any]:
        """
        Parse the plan file.

        Returns:
            The full plan document as a dictionary

        Raises:
            FileNotFoundError: If plan file doesn't exist
            ValueError: If plan file is invalid JSON, too deeply nested or not a JSON object
        """
        if self._plan_data is not None:
            return self._plan_data

        if not self.plan_file_path.exists():
            raise FileNotFoundError(f"Plan file not found: {self.plan_file_path}")

        try:
            with open(self.plan_file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in plan file: {e}")
        except RecursionError:
            raise ValueError(f"Plan file nests too deeply to decode: {self.plan_file_path}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Plan file must contain a JSON object, got {type(data).__name__}"
            )
        validate_tree(data)

        self._plan_data = data
        return self._plan_data

    @property
    def format_version(self) -> Optional[str]:
        return self.parse().get("format_version")

    @property
    def terraform_version(self) -> Optional[str]:
        return self.parse().get("terraform_version")

    def get_resource_changes(self) -> List[Dict[str, Any]]:
        """
        Extract managed resource changes from the plan.

        Returns:
            List of change dictionaries with flattened structure

        Plan structure:
        {
          "resource_changes": [
            {
              "address": "aws_s3_bucket.logs",
              "type": "aws_s3_bucket",
              "change": {
                "actions": ["create"],
                "before": null,
                "after": {"bucket": "logs", ...},
                "after_unknown": {"arn": true, ...}
              }
            }
          ]
        }
        """
        if self._resource_changes is not None:
            return self._resource_changes

        plan = self.parse()
        self._resource_changes = []

        for change_entry in plan.get("resource_changes") or []:
            # Data sources are read, not changed
            if change_entry.get("mode", "managed") != "managed":
                continue

            change = change_entry.get("change") or {}
            self._resource_changes.append(
                {
                    "address": change_entry.get("address"),
                    "type": change_entry.get("type"),
                    "name": change_entry.get("name"),
                    "mode": change_entry.get("mode", "managed"),
                    "provider": change_entry.get("provider_name"),
                    "actions": list(change.get("actions") or []),
                    "before": change.get("before"),
                    "after": change.get("after"),
                    "after_unknown": change.get("after_unknown") or {},
                }
            )

        return self._resource_changes

    def find_resource_changes_by_type(self, resource_type: str) -> List[Dict[str, Any]]:
        """
        Find all resource changes of a specific type.

        Args:
            resource_type: The Terraform resource type (e.g., "aws_s3_bucket")
        """
        return [c for c in self.get_resource_changes() if c["type"] == resource_type]

    def get_planned_resources(self) -> List[Dict[str, Any]]:
        """Resources from ``planned_values``, flattened across child modules."""
        root = (self.parse().get("planned_values") or {}).get("root_module") or {}
        resources: List[Dict[str, Any]] = []

        modules = [root]
        while modules:
            module = modules.pop(0)
            for resource in module.get("resources") or []:
                resources.append(
                    {
                        "address": resource.get("address"),
                        "type": resource.get("type"),
                        "name": resource.get("name"),
                        "values": resource.get("values") or {},
                    }
                )
            modules.extend(module.get("child_modules") or [])

        return resources

    def get_change_attribute(self, change: Dict[str, Any], path: str) -> Optional[Any]:
        """
        Extract a nested attribute from a resource change using dot notation.

        Args:
            change: Change dictionary from get_resource_changes()
            path: Attribute path like "after.bucket" or "server_side_encryption.0.enabled"

        Returns:
            The attribute value, or None if not found

        Examples:
            >>> parser.get_change_attribute(change, "after.bucket")
            "logs"
            >>> parser.get_change_attribute(change, "before.bucket")
            None
        """
        side = "after"
        if path.startswith("after."):
            path = path[len("after."):]
        elif path.startswith("before."):
            side = "before"
            path = path[len("before."):]

        current = change.get(side)
        for part in parse_dot_path(path):
            if current is None:
                return None

            if isinstance(part, int):
                if isinstance(current, list) and part < len(current):
                    current = current[part]
                else:
                    return None
            elif isinstance(current, dict):
                current = current.get(part)
            else:
                return None

        return current

    def find_key(self, key: str, section: Optional[str] = None) -> List[KeyOccurrence]:
        """
        Find every occurrence of *key* in the plan.

        Args:
            key: Key to look for (case-sensitive)
            section: Optional top-level section to restrict the search to
                (e.g. "configuration"); paths stay rooted at the document

        Raises:
            KeyError: If *section* is not present in the plan
            InvalidInputError: If *key* is not a string
        """
        plan = self.parse()
        if section is None:
            return find_key_occurrences(plan, key)

        if section not in plan:
            raise KeyError(f"Section '{section}' not found in plan")

        occurrences = find_key_occurrences(plan[section], key)
        for occ in occurrences:
            occ.path = [section] + occ.path
        return occurrences


"""
Pytest configuration and shared fixtures for all tests.
"""

from __future__ import annotations

import copy
import json
import sys
from pathlib import Path

import pytest

# Ensure the repo root is on `sys.path` so top-level imports work.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from planpaths.config import CONFIG_ENV_VAR, reset_config


# Trimmed `terraform show -json` output for an encrypted EBS volume and an S3
# bucket. `encrypted` appears bare in planned_values/resource_changes and
# wrapped in configuration, as real plans do.
SAMPLE_PLAN = {
    "format_version": "1.2",
    "terraform_version": "1.7.5",
    "planned_values": {
        "root_module": {
            "resources": [
                {
                    "address": "aws_ebs_volume.data",
                    "mode": "managed",
                    "type": "aws_ebs_volume",
                    "name": "data",
                    "values": {"encrypted": True, "size": 40, "tags": {"team": "infra"}},
                },
            ],
            "child_modules": [
                {
                    "address": "module.logs",
                    "resources": [
                        {
                            "address": "module.logs.aws_s3_bucket.this",
                            "mode": "managed",
                            "type": "aws_s3_bucket",
                            "name": "this",
                            "values": {"bucket": "acme-logs", "tags": None},
                        },
                    ],
                },
            ],
        },
    },
    "resource_changes": [
        {
            "address": "aws_ebs_volume.data",
            "mode": "managed",
            "type": "aws_ebs_volume",
            "name": "data",
            "provider_name": "registry.terraform.io/hashicorp/aws",
            "change": {
                "actions": ["create"],
                "before": None,
                "after": {"encrypted": True, "size": 40, "tags": {"team": "infra"}},
                "after_unknown": {"id": True, "tags": {}},
            },
        },
        {
            "address": "module.logs.aws_s3_bucket.this",
            "mode": "managed",
            "type": "aws_s3_bucket",
            "name": "this",
            "provider_name": "registry.terraform.io/hashicorp/aws",
            "change": {
                "actions": ["update"],
                "before": {"bucket": "acme-logs", "force_destroy": True},
                "after": {"bucket": "acme-logs", "force_destroy": False},
                "after_unknown": {},
            },
        },
        {
            "address": "data.aws_caller_identity.current",
            "mode": "data",
            "type": "aws_caller_identity",
            "name": "current",
            "provider_name": "registry.terraform.io/hashicorp/aws",
            "change": {"actions": ["read"], "before": None, "after": {}, "after_unknown": {}},
        },
    ],
    "configuration": {
        "root_module": {
            "resources": [
                {
                    "address": "aws_ebs_volume.data",
                    "mode": "managed",
                    "type": "aws_ebs_volume",
                    "name": "data",
                    "expressions": {
                        "encrypted": {"constant_value": True},
                        "size": {"references": ["var.volume_size"]},
                    },
                },
            ],
        },
    },
}


@pytest.fixture(autouse=True)
def cleanup_config(monkeypatch):
    """
    Automatically reset the cached configuration around each test.

    Also clears PLANPATHS_CONFIG so a developer's environment cannot leak in.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_plan():
    """A fresh copy of the sample plan document."""
    return copy.deepcopy(SAMPLE_PLAN)


@pytest.fixture
def plan_file(tmp_path, sample_plan):
    """
    Write the sample plan to a temporary file and return its path.

    Usage:
        def test_something(plan_file):
            parser = TerraformPlanParser(str(plan_file))
    """
    path = tmp_path / "tfplan.json"
    path.write_text(json.dumps(sample_plan), encoding="utf-8")
    return path


@pytest.fixture
def deep_plan_file(tmp_path):
    """A syntactically valid plan nested far past any decoder recursion limit."""
    depth = 100_000
    path = tmp_path / "deep.json"
    path.write_text('{"a":' * depth + '{"b": 1}' + "}" * depth, encoding="utf-8")
    return path

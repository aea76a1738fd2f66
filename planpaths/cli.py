"""
Command-line key search for Terraform plan JSON.

Usage:
    # Produce the plan JSON first
    terraform plan -out tfplan.binary
    terraform show -json tfplan.binary > tfplan.json

    # Find every occurrence of a key
    python scripts/find_key.py --plan tfplan.json --key encrypted
    python scripts/find_key.py -p tfplan.json -k encrypted --section configuration --unwrap

Exit codes:
    0  key found
    1  key not found
    2  input or usage error
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from planpaths.config import LOG_LEVELS, OutputConfig, PlanPathsConfig, get_config
from planpaths.search.key_search import search_plan_result
from planpaths.search.models import KeySearchResult
from planpaths.search.path_format import PATH_STYLES

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130

LOG_LEVEL_ENV_VAR = "PLANPATHS_LOG_LEVEL"


def write_json(path: str, payload: dict) -> None:
    """Write a JSON payload to a path, creating parent dirs."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)


def configure_logging(level: Optional[str], config: PlanPathsConfig) -> None:
    resolved = (level or os.getenv(LOG_LEVEL_ENV_VAR) or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every occurrence of a key in Terraform plan JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # All occurrences, jq-style paths with values
  python scripts/find_key.py -p tfplan.json -k encrypted

  # Only the configuration section, with constant_value wrappers unwrapped
  python scripts/find_key.py -p tfplan.json -k encrypted --section configuration --unwrap

  # Machine-readable output
  python scripts/find_key.py -p tfplan.json -k tags --json --output-json out/tags.json
        '''
    )
    parser.add_argument('-p', '--plan', required=True, help='Path to plan JSON (terraform show -json)')
    parser.add_argument('-k', '--key', required=True, help='Key to search for (case-sensitive)')
    parser.add_argument('--section', help='Restrict the search to a top-level plan section')
    parser.add_argument('--style', choices=PATH_STYLES, help='Path notation for printed results')
    parser.add_argument('--no-values', action='store_true', help='Print paths only')
    parser.add_argument('--unwrap', action='store_true', help='Show constant_value wrappers unwrapped')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--output-json', help='Also write the JSON result to this path')
    parser.add_argument('--config', help='Path to planpaths.yaml')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging level (default from config)')
    return parser


def render_result(result: KeySearchResult, output: OutputConfig) -> str:
    lines = result.describe(
        style=output.style,
        show_values=output.show_values,
        unwrap=output.unwrap_constants,
    )
    if lines:
        lines.append("")
    lines.append(result.summary())
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(args.config)
    except (OSError, ValueError) as e:
        print(f"❌ Error: could not load config: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(args.log_level, config)

    output = replace(
        config.output,
        style=args.style or config.output.style,
        show_values=config.output.show_values and not args.no_values,
        unwrap_constants=config.output.unwrap_constants or args.unwrap,
    )
    section = args.section or config.search.section

    result = search_plan_result(args.plan, args.key, section=section)

    if args.output_json:
        write_json(args.output_json, result.to_dict())

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_result(result, output))

    if result.errors:
        return EXIT_ERROR
    return EXIT_FOUND if result.found else EXIT_NOT_FOUND


def run() -> None:
    """Console entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting...")
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    run()

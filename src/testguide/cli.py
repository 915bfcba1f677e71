# SPDX-License-Identifier: MIT
"""testguide command-line entry point — load catalog, evaluate facts, apply gate.

Usage:
    python -m testguide facts.json [more.json ...]
    python -m testguide --list-rules

Environment variables:
    TESTGUIDE_PROFILE   — gate profile: lenient, standard, strict (default: standard)
    TESTGUIDE_CATALOG   — path to a JSON rule catalog (default: built-in rules)

Exit codes: 0 gate passed, 1 gate failed, 2 configuration or input error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from testguide.report import findings_to_json, format_annotations, format_findings
from testguide.rules import (
    Catalog,
    CatalogError,
    Category,
    Evaluator,
    Finding,
    GuideError,
    default_catalog,
    load,
    load_facts,
    load_profile,
)
from testguide.rules.config import PROFILES, resolve_catalog_path

EXIT_OK = 0
EXIT_GATE_FAILED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testguide",
        description="Check UI component test facts against the testing guide rules",
    )
    parser.add_argument("facts", nargs="*", type=Path, help="JSON facts documents from a front end")
    parser.add_argument(
        "--catalog",
        default=None,
        help="Path to a JSON rule catalog (overrides TESTGUIDE_CATALOG env var)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help="Gate profile (overrides TESTGUIDE_PROFILE env var)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "github"],
        default="text",
        help="Output format for findings",
    )
    parser.add_argument("--list-rules", action="store_true", help="Print the catalog and exit")
    parser.add_argument(
        "--category",
        choices=[c.value for c in Category],
        default=None,
        help="Only show rules in this category (requires --list-rules)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _load_catalog(cli_path: str | None) -> Catalog:
    path = resolve_catalog_path(cli_path)
    if path is None:
        return default_catalog()
    return load(path)


def _list_rules(catalog: Catalog, category: str | None) -> None:
    rules = catalog.by_category(category) if category else catalog.rules
    for rule in rules:
        print(
            f"{rule.id} [{rule.severity.value}] ({rule.category.value})"
            f" <- {rule.anti_pattern.value}"
        )
        print(f"    {rule.recommendation}")
    print(f"{len(rules)} rule(s), catalog v{catalog.version}")


def main(argv: list[str] | None = None) -> int:
    """Run the checker and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.category and not args.list_rules:
        parser.error("--category only applies with --list-rules")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        profile = load_profile(cli_profile=args.profile)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        catalog = _load_catalog(args.catalog)
    except CatalogError as exc:
        print(f"error: invalid rule catalog: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.list_rules:
        _list_rules(catalog, args.category)
        return EXIT_OK

    if not args.facts:
        print("error: no facts files given", file=sys.stderr)
        return EXIT_ERROR

    evaluator = Evaluator(catalog)
    findings: list[Finding] = []
    for path in args.facts:
        try:
            findings.extend(evaluator.evaluate(load_facts(path)))
        except FileNotFoundError:
            print(f"error: facts file not found: {path}", file=sys.stderr)
            return EXIT_ERROR
        except GuideError as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            return EXIT_ERROR

    # Per-file results are already ordered; re-sort so the combined report is too
    findings.sort(key=lambda f: -f.severity.rank)

    if args.format == "json":
        print(findings_to_json(findings))
    elif args.format == "github":
        if findings:
            print(format_annotations(findings))
    else:
        print(format_findings(findings))

    if evaluator.check_gate(findings, profile):
        print(f"Gate FAILED (profile={profile.name})", file=sys.stderr)
        return EXIT_GATE_FAILED
    return EXIT_OK

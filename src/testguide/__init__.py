"""testguide — enforceable rules for UI component tests. Front ends classify, rules decide."""

from testguide.report import findings_to_json, format_annotations, format_findings, summarize
from testguide.rules import (
    CallSiteFact,
    Catalog,
    Category,
    Evaluator,
    FactKind,
    Finding,
    Rule,
    Severity,
    check_gate,
    default_catalog,
    evaluate,
    load,
    load_facts,
    load_profile,
    parse_facts,
)

__all__ = [
    "CallSiteFact",
    "Catalog",
    "Category",
    "Evaluator",
    "FactKind",
    "Finding",
    "Rule",
    "Severity",
    "check_gate",
    "default_catalog",
    "evaluate",
    "findings_to_json",
    "format_annotations",
    "format_findings",
    "load",
    "load_facts",
    "load_profile",
    "parse_facts",
    "summarize",
]

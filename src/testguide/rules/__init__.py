# SPDX-License-Identifier: MIT
"""Rule catalog and violation evaluator — front ends classify, rules decide."""

from testguide.rules.base import Category, FactKind, Finding, Rule, RuleExample, Severity
from testguide.rules.catalog import Catalog, load
from testguide.rules.config import ProfileConfig, load_profile
from testguide.rules.engine import Evaluator, check_gate, evaluate
from testguide.rules.errors import (
    CatalogError,
    DuplicateRuleIdError,
    EvaluationError,
    GuideError,
    MalformedFactError,
    MalformedRuleError,
    UnknownFactKindError,
    UnmappedAntiPatternError,
)
from testguide.rules.facts import CallSiteFact, load_facts, parse_facts
from testguide.rules.registry import default_catalog

__all__ = [
    "CallSiteFact",
    "Catalog",
    "CatalogError",
    "Category",
    "DuplicateRuleIdError",
    "EvaluationError",
    "Evaluator",
    "FactKind",
    "Finding",
    "GuideError",
    "MalformedFactError",
    "MalformedRuleError",
    "ProfileConfig",
    "Rule",
    "RuleExample",
    "Severity",
    "UnknownFactKindError",
    "UnmappedAntiPatternError",
    "check_gate",
    "default_catalog",
    "evaluate",
    "load",
    "load_facts",
    "load_profile",
    "parse_facts",
]


def run_rules(facts: list[CallSiteFact], catalog: Catalog | None = None) -> list[Finding]:
    """Convenience: evaluate facts against *catalog* (built-in rules by default)."""
    return evaluate(catalog if catalog is not None else default_catalog(), facts)

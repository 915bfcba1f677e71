# SPDX-License-Identifier: MIT
"""Property-based tests for the evaluator, catalog loader, and fact parser.

Uses hypothesis to generate random fact sequences and documents, and checks
that ordering and counting invariants hold and that parsers only ever fail
with their own error types.
"""

from __future__ import annotations

import os
import string
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from testguide.rules.base import FactKind
from testguide.rules.catalog import Catalog, load
from testguide.rules.engine import evaluate
from testguide.rules.errors import CatalogError, MalformedFactError, UnknownFactKindError
from testguide.rules.facts import CallSiteFact, parse_facts
from testguide.rules.registry import DEFAULT_RULES, default_catalog

# CI runs 1k examples; set FUZZ_SLOW=1 for 10k (local deep run)
_MAX_EXAMPLES = 10_000 if os.environ.get("FUZZ_SLOW") else 1_000

_KNOWN_KIND = st.sampled_from([k.value for k in FactKind])
_LOCATION = st.text(alphabet=string.ascii_letters + string.digits + ":/._", min_size=1, max_size=30)

_FACT = st.builds(lambda kind, loc: CallSiteFact(kind=kind, location=loc), _KNOWN_KIND, _LOCATION)
_FACTS = st.lists(_FACT, max_size=60)

# Random subset of the built-in rules, so some kinds stay unmapped
_CATALOG = st.lists(st.sampled_from(DEFAULT_RULES), unique_by=lambda r: r["id"]).map(load)


# ---------------------------------------------------------------------------
# Evaluator invariants
# ---------------------------------------------------------------------------


@given(catalog=_CATALOG, facts=_FACTS)
@settings(max_examples=_MAX_EXAMPLES)
def test_finding_count_matches_mapped_facts(catalog: Catalog, facts: list[CallSiteFact]) -> None:
    """Exactly one finding per fact whose kind some rule claims."""
    findings = evaluate(catalog, facts)
    expected = sum(1 for f in facts if catalog.rule_for_kind(f.kind) is not None)
    assert len(findings) == expected


@given(catalog=_CATALOG, facts=_FACTS)
@settings(max_examples=_MAX_EXAMPLES)
def test_findings_sorted_with_stable_ties(catalog: Catalog, facts: list[CallSiteFact]) -> None:
    """Severity never increases along the output; ties keep input order."""
    findings = evaluate(catalog, facts)
    ranks = [f.severity.rank for f in findings]
    assert ranks == sorted(ranks, reverse=True)

    matched = [f for f in facts if catalog.rule_for_kind(f.kind) is not None]
    for rank in {3, 2, 1}:
        in_output = [f.location for f in findings if f.severity.rank == rank]
        in_input = [
            f.location for f in matched if catalog.rule_for_kind(f.kind).severity.rank == rank
        ]
        assert in_output == in_input


@given(facts=_FACTS)
@settings(max_examples=_MAX_EXAMPLES)
def test_evaluation_is_deterministic(facts: list[CallSiteFact]) -> None:
    catalog = default_catalog()
    assert evaluate(catalog, facts) == evaluate(catalog, facts)


@given(
    before=_FACTS,
    bad_kind=st.text(alphabet=string.ascii_lowercase + "-", min_size=1, max_size=30),
    after=_FACTS,
)
@settings(max_examples=_MAX_EXAMPLES)
def test_unknown_kind_always_raises(
    before: list[CallSiteFact], bad_kind: str, after: list[CallSiteFact]
) -> None:
    if FactKind.is_known(bad_kind):
        return
    facts = [*before, CallSiteFact(kind=bad_kind, location="bad:1"), *after]
    with pytest.raises(UnknownFactKindError) as exc_info:
        evaluate(default_catalog(), facts)
    assert exc_info.value.index == len(before)
    assert exc_info.value.location == "bad:1"


# ---------------------------------------------------------------------------
# Parsers only raise their own error types
# ---------------------------------------------------------------------------

_JSON_SCALAR = st.one_of(
    st.none(), st.booleans(), st.integers(), st.text(max_size=20), st.floats(allow_nan=False)
)
_JSON = st.recursive(
    _JSON_SCALAR,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=12), children, max_size=5),
    ),
    max_leaves=20,
)

_RULE_KEYS = st.sampled_from(
    ["id", "category", "severity", "antiPattern", "recommendation", "examples", "extra"]
)
_RULE_ISH = st.dictionaries(_RULE_KEYS, _JSON, max_size=7)


@given(document=_JSON)
@settings(max_examples=_MAX_EXAMPLES)
def test_fuzz_load_arbitrary(document: Any) -> None:
    """load() either succeeds or raises a CatalogError."""
    try:
        load(document)
    except CatalogError:
        pass
    except TypeError:
        assert not isinstance(document, dict | list | str)


@given(entries=st.lists(_RULE_ISH, max_size=5))
@settings(max_examples=_MAX_EXAMPLES)
def test_fuzz_load_rule_shaped(entries: list[dict[str, Any]]) -> None:
    try:
        catalog = load(entries)
    except CatalogError:
        return
    assert len(catalog) == len(entries)


@given(document=_JSON)
@settings(max_examples=_MAX_EXAMPLES)
def test_fuzz_parse_facts_arbitrary(document: Any) -> None:
    """parse_facts() either returns facts or raises MalformedFactError."""
    try:
        facts = parse_facts(document)
    except MalformedFactError:
        return
    for fact in facts:
        assert isinstance(fact.kind, str)
        assert isinstance(fact.location, str)

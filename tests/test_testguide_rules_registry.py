# SPDX-License-Identifier: MIT
"""Tests for testguide.rules.registry — the built-in rule set."""

from __future__ import annotations

from testguide.rules.base import Category, FactKind, Severity
from testguide.rules.catalog import load
from testguide.rules.registry import DEFAULT_RULES, default_catalog


class TestDefaultCatalog:
    def test_loads_every_rule(self) -> None:
        catalog = default_catalog()
        assert len(catalog) == len(DEFAULT_RULES)
        for entry in DEFAULT_RULES:
            assert entry["id"] in catalog

    def test_cached(self) -> None:
        assert default_catalog() is default_catalog()

    def test_every_category_covered(self) -> None:
        catalog = default_catalog()
        for category in Category:
            assert catalog.by_category(category), category

    def test_every_fact_kind_claimed(self) -> None:
        catalog = default_catalog()
        for kind in FactKind:
            assert catalog.rule_for_kind(kind) is not None, kind

    def test_query_priority_rule(self) -> None:
        rule = default_catalog().lookup("prefer-get-by-role")
        assert rule is not None
        assert rule.severity is Severity.HIGH
        assert rule.anti_pattern is FactKind.DIRECT_DOM_QUERY
        assert rule.examples

    def test_document_roundtrip(self) -> None:
        catalog = default_catalog()
        assert load(catalog.to_document()).rules == catalog.rules

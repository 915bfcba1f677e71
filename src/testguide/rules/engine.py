# SPDX-License-Identifier: MIT
"""Violation evaluator — matches call-site facts to catalog rules in one pass."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from testguide.rules.base import FactKind, Finding
from testguide.rules.errors import UnknownFactKindError

if TYPE_CHECKING:
    from testguide.rules.catalog import Catalog
    from testguide.rules.config import ProfileConfig
    from testguide.rules.facts import CallSiteFact

log = logging.getLogger(__name__)


class Evaluator:
    """Runs facts from one test file against a read-only catalog.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def evaluate(self, facts: Iterable[CallSiteFact]) -> list[Finding]:
        """Return findings ordered by descending severity, then input order.

        Facts whose kind is known but not claimed by any rule produce nothing.

        Raises:
            UnknownFactKindError: A fact's kind is outside the vocabulary. No
                findings are returned for the call.
        """
        findings: list[Finding] = []
        count = 0
        for index, fact in enumerate(facts):
            count += 1
            if not FactKind.is_known(fact.kind):
                raise UnknownFactKindError(fact.kind, fact.location, index=index)
            rule = self._catalog.rule_for_kind(fact.kind)
            if rule is None:
                continue
            findings.append(
                Finding(
                    rule_id=rule.id,
                    location=fact.location,
                    severity=rule.severity,
                    message=rule.recommendation,
                    evidence=fact.snippet,
                )
            )

        # sorted() is stable, so equal severities keep input order
        findings = sorted(findings, key=lambda f: -f.severity.rank)
        log.debug("Evaluated %d facts, %d findings", count, len(findings))
        return findings

    def check_gate(self, findings: Iterable[Finding], config: ProfileConfig) -> bool:
        """Return True if any finding meets or exceeds the profile's fail_on threshold."""
        return check_gate(findings, config)


def check_gate(findings: Iterable[Finding], config: ProfileConfig) -> bool:
    """Return True if any finding meets or exceeds the profile's fail_on threshold."""
    return any(f.severity.rank >= config.fail_on.rank for f in findings)


def evaluate(catalog: Catalog, facts: Iterable[CallSiteFact]) -> list[Finding]:
    """Convenience: evaluate *facts* against *catalog*."""
    return Evaluator(catalog).evaluate(facts)

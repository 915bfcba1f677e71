# SPDX-License-Identifier: MIT
"""Closed vocabularies, Rule model, and Finding dataclass for the rule catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Category(StrEnum):
    """Guide sections a rule can belong to."""

    QUERY_PRIORITY = "query-priority"
    INTERACTION = "interaction"
    ASSERTION = "assertion"
    ASYNC = "async"
    MOCKING = "mocking"
    ACCESSIBILITY = "accessibility"
    STRUCTURE = "structure"


_SEVERITY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


class Severity(StrEnum):
    """Severity levels for findings, ranked for ordering and gate comparison."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self.value]


class FactKind(StrEnum):
    """Call-site shapes a front end may report.

    This is the stable contract between a language front end and the
    evaluator. Front ends must classify every reported call site into one of
    these values; anything else is rejected at evaluation time.
    """

    DIRECT_DOM_QUERY = "direct-dom-query"
    TEST_ID_QUERY = "test-id-query"
    FIRE_EVENT_CALL = "fire-event-call"
    MISSING_USER_EVENT_SETUP = "missing-user-event-setup"
    EMPTY_WAIT_FOR = "empty-wait-for"
    SIDE_EFFECT_IN_WAIT_FOR = "side-effect-in-wait-for"
    WAIT_FOR_INSTEAD_OF_FIND = "wait-for-instead-of-find"
    MANUAL_ACT_WRAP = "manual-act-wrap"
    QUERY_BY_PRESENCE_ASSERTION = "query-by-presence-assertion"
    SNAPSHOT_ONLY_ASSERTION = "snapshot-only-assertion"
    IMPLEMENTATION_DETAIL_ASSERTION = "implementation-detail-assertion"
    MOCK_CHILD_COMPONENT = "mock-child-component"
    UNRESTORED_MOCK = "unrestored-mock"
    MISSING_ACCESSIBILITY_CHECK = "missing-accessibility-check"
    RENDER_IN_DESCRIBE_BLOCK = "render-in-describe-block"
    SHARED_RENDER_ACROSS_TESTS = "shared-render-across-tests"
    MANUAL_CLEANUP_CALL = "manual-cleanup-call"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls._value2member_map_


class RuleExample(BaseModel):
    """Paired bad/good snippets. Documentation only, never executed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bad: str
    good: str


class Rule(BaseModel):
    """A single guidance entry with a detectable anti-pattern."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(min_length=1)
    category: Category
    severity: Severity
    anti_pattern: FactKind = Field(alias="antiPattern")
    recommendation: str = Field(min_length=1)
    examples: tuple[RuleExample, ...] = ()


@dataclass(frozen=True)
class Finding:
    """A single violation produced by matching a call-site fact to a rule."""

    rule_id: str
    location: str
    severity: Severity
    message: str
    evidence: str | None = None

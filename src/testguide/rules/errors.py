# SPDX-License-Identifier: MIT
"""Error taxonomy for catalog loading, fact parsing, and evaluation."""

from __future__ import annotations


class GuideError(Exception):
    """Base class for all testguide errors."""


class CatalogError(GuideError):
    """Raised when a rule catalog cannot be constructed. Never partially applied."""

    def __init__(self, message: str, *, rule_id: str | None = None) -> None:
        self.rule_id = rule_id
        super().__init__(message)


class MalformedRuleError(CatalogError):
    """A rule entry (or the document holding it) does not match the schema."""

    def __init__(self, detail: str, *, rule_id: str | None = None, field: str | None = None) -> None:
        self.field = field
        where = f"rule {rule_id!r}" if rule_id else "catalog"
        if field:
            where += f", field {field!r}"
        super().__init__(f"Malformed {where}: {detail}", rule_id=rule_id)


class DuplicateRuleIdError(CatalogError):
    """Two rules in one catalog share an id."""

    def __init__(self, rule_id: str, *, index: int) -> None:
        self.index = index
        super().__init__(f"Duplicate rule id {rule_id!r} at entry {index}", rule_id=rule_id)


class UnmappedAntiPatternError(CatalogError):
    """A rule's anti-pattern cannot be tied to exactly one known fact kind."""

    def __init__(self, rule_id: str, anti_pattern: str, *, claimed_by: str | None = None) -> None:
        self.anti_pattern = anti_pattern
        self.claimed_by = claimed_by
        if claimed_by:
            detail = f"fact kind {anti_pattern!r} is already detected by rule {claimed_by!r}"
        else:
            detail = f"{anti_pattern!r} is not a known fact kind"
        super().__init__(f"Rule {rule_id!r}: {detail}", rule_id=rule_id)


class MalformedFactError(GuideError):
    """A front-end fact document is missing fields or has the wrong shape."""

    def __init__(self, detail: str, *, index: int | None = None) -> None:
        self.index = index
        where = f"fact {index}" if index is not None else "facts document"
        super().__init__(f"Malformed {where}: {detail}")


class EvaluationError(GuideError):
    """Raised when a single evaluation call cannot complete."""


class UnknownFactKindError(EvaluationError):
    """A fact carries a kind outside the fixed vocabulary."""

    def __init__(self, kind: str, location: str, *, index: int) -> None:
        self.kind = kind
        self.location = location
        self.index = index
        super().__init__(f"Unknown fact kind {kind!r} at {location} (fact {index})")

# SPDX-License-Identifier: MIT
"""Rule catalog — load, validate, and index rule definitions.

A catalog document is either a bare JSON list of rule objects or an object
``{"version": 1, "rules": [...]}``. Each rule object has the keys ``id``,
``category``, ``severity``, ``antiPattern``, ``recommendation`` and an
optional ``examples`` list of ``{"bad", "good"}`` pairs.

Loading is all-or-nothing: :func:`load` either returns a fully validated
:class:`Catalog` or raises a :class:`CatalogError` subclass.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from testguide.rules.base import Category, FactKind, Rule
from testguide.rules.errors import (
    DuplicateRuleIdError,
    MalformedRuleError,
    UnmappedAntiPatternError,
)

log = logging.getLogger(__name__)

_ANTI_PATTERN_KEYS = ("antiPattern", "anti_pattern")
_DOCUMENT_KEYS = frozenset({"version", "rules"})


class Catalog:
    """Ordered, immutable collection of rules indexed by id and fact kind."""

    def __init__(self, rules: Iterable[Rule], *, version: int = 1) -> None:
        ordered = tuple(rules)
        by_id: dict[str, Rule] = {}
        by_kind: dict[FactKind, Rule] = {}
        for index, rule in enumerate(ordered):
            if rule.id in by_id:
                raise DuplicateRuleIdError(rule.id, index=index)
            owner = by_kind.get(rule.anti_pattern)
            if owner is not None:
                raise UnmappedAntiPatternError(
                    rule.id, rule.anti_pattern.value, claimed_by=owner.id
                )
            by_id[rule.id] = rule
            by_kind[rule.anti_pattern] = rule

        self._version = version
        self._rules = ordered
        self._by_id = MappingProxyType(by_id)
        self._by_kind = MappingProxyType(by_kind)

    @property
    def version(self) -> int:
        return self._version

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog(version={self._version}, rules={len(self._rules)})"

    def lookup(self, rule_id: str) -> Rule | None:
        """Return the rule with this id, or None if the catalog has none."""
        return self._by_id.get(rule_id)

    def by_category(self, category: Category | str) -> tuple[Rule, ...]:
        """Return rules in *category*, in declaration order.

        Raises:
            ValueError: If *category* is not a known category value.
        """
        wanted = Category(category)
        return tuple(r for r in self._rules if r.category == wanted)

    def rule_for_kind(self, kind: FactKind | str) -> Rule | None:
        """Return the rule that detects *kind*, or None if no rule claims it."""
        if not isinstance(kind, FactKind):
            if not FactKind.is_known(kind):
                return None
            kind = FactKind(kind)
        return self._by_kind.get(kind)

    def to_document(self) -> dict[str, Any]:
        """Serialise back to the catalog document schema (camelCase keys)."""
        entries: list[dict[str, Any]] = []
        for rule in self._rules:
            entry = rule.model_dump(by_alias=True, mode="json")
            if not entry["examples"]:
                del entry["examples"]
            entries.append(entry)
        return {"version": self._version, "rules": entries}


def _safe_error_summary(e: ValidationError) -> str:
    """Reduce a ValidationError to field paths and error type codes."""
    parts: list[str] = []
    for err in e.errors():
        loc = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{loc}: {err['type']}")
    return "; ".join(parts)


def _read_source(source: Any) -> Any:
    """Turn a path or JSON text into a decoded document; pass structures through."""
    if isinstance(source, Path):
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"cannot read {source}: {getattr(exc, 'strerror', None) or exc}"
            raise MalformedRuleError(msg) from exc
        return _decode_json(text, origin=str(source))
    if isinstance(source, str):
        return _decode_json(source, origin="<string>")
    if isinstance(source, Mapping | list | tuple):
        return source
    msg = f"Unsupported catalog source type: {type(source).__name__}"
    raise TypeError(msg)


def _decode_json(text: str, *, origin: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON in {origin} (line {exc.lineno}, column {exc.colno})"
        raise MalformedRuleError(msg) from exc


def _split_document(document: Any) -> tuple[int, list[Any]]:
    """Return (version, rule entries) from a decoded catalog document."""
    if isinstance(document, list | tuple):
        return 1, list(document)
    if not isinstance(document, Mapping):
        msg = f"expected a list of rules or an object, got {type(document).__name__}"
        raise MalformedRuleError(msg)

    unknown = sorted(str(k) for k in document if k not in _DOCUMENT_KEYS)
    if unknown:
        msg = f"unexpected top-level keys: {unknown}"
        raise MalformedRuleError(msg)

    version = document.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        raise MalformedRuleError("must be a positive integer", field="version")

    if "rules" not in document:
        raise MalformedRuleError("missing required key", field="rules")
    entries = document["rules"]
    if not isinstance(entries, list | tuple):
        raise MalformedRuleError("must be a list of rule objects", field="rules")
    return version, list(entries)


def _parse_rule(entry: Any, index: int) -> Rule:
    if not isinstance(entry, Mapping):
        msg = f"entry {index} is {type(entry).__name__}, expected an object"
        raise MalformedRuleError(msg)

    raw_id = entry.get("id")
    rule_id = raw_id if isinstance(raw_id, str) and raw_id else None

    try:
        return Rule.model_validate(dict(entry))
    except ValidationError as exc:
        errors = exc.errors()
        anti_pattern_errors = [
            err
            for err in errors
            if err["loc"] and err["loc"][0] in _ANTI_PATTERN_KEYS and err["type"] == "enum"
        ]
        if rule_id is not None and anti_pattern_errors and len(anti_pattern_errors) == len(errors):
            raw = next((entry[k] for k in _ANTI_PATTERN_KEYS if k in entry), None)
            raise UnmappedAntiPatternError(rule_id, str(raw)) from exc

        first = errors[0]["loc"]
        field = str(first[0]) if first else None
        detail = _safe_error_summary(exc)
        if rule_id is None:
            detail = f"entry {index}: {detail}"
        raise MalformedRuleError(detail, rule_id=rule_id, field=field) from exc


def load(source: Any) -> Catalog:
    """Parse and validate a rule definition set into a Catalog.

    Args:
        source: A ``Path`` to a JSON document, JSON text, a list of rule
            mappings, or a ``{"version", "rules"}`` mapping.

    Returns:
        A fully validated, immutable Catalog.

    Raises:
        MalformedRuleError: A required field is missing, a field has the wrong
            type or an out-of-vocabulary category/severity, or the document
            itself is unreadable or mis-shaped.
        DuplicateRuleIdError: Two rules share an id.
        UnmappedAntiPatternError: A rule's anti-pattern is not a known fact
            kind, or names a kind another rule already detects.
        TypeError: *source* is not one of the supported types.
    """
    document = _read_source(source)
    version, entries = _split_document(document)
    rules = [_parse_rule(entry, index) for index, entry in enumerate(entries)]
    catalog = Catalog(rules, version=version)
    log.info("Loaded rule catalog v%d with %d rules", catalog.version, len(catalog))
    return catalog

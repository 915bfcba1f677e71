# SPDX-License-Identifier: MIT
"""Call-site facts — the structured input a language front end hands to the evaluator."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from testguide.rules.errors import MalformedFactError


@dataclass(frozen=True)
class CallSiteFact:
    """One classified call site from a test file."""

    kind: str  # Raw kind string as emitted by the front end
    location: str  # Opaque reference, usually "file:line"
    snippet: str | None = None


def _render_location(raw: Any, file: str | None, index: int) -> str:
    if isinstance(raw, str) and raw:
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        if file is None:
            raise MalformedFactError("integer location needs a top-level 'file'", index=index)
        return f"{file}:{raw}"
    if isinstance(raw, Mapping):
        path = raw.get("file", file)
        line = raw.get("line")
        if not isinstance(path, str) or not path:
            raise MalformedFactError("location.file must be a non-empty string", index=index)
        if isinstance(line, bool) or not isinstance(line, int):
            raise MalformedFactError("location.line must be an integer", index=index)
        column = raw.get("column")
        if column is None:
            return f"{path}:{line}"
        if isinstance(column, bool) or not isinstance(column, int):
            raise MalformedFactError("location.column must be an integer", index=index)
        return f"{path}:{line}:{column}"
    raise MalformedFactError("missing or empty 'location'", index=index)


def parse_facts(document: Any) -> list[CallSiteFact]:
    """Parse a front-end facts document into CallSiteFact objects.

    Accepts a list of fact objects, or ``{"file": "...", "facts": [...]}``.
    Kinds are not checked against the vocabulary here; the evaluator does
    that so it can report the offending location.

    Raises:
        MalformedFactError: If the document or any fact has the wrong shape.
    """
    file: str | None = None
    if isinstance(document, Mapping):
        file = document.get("file")
        if file is not None and not isinstance(file, str):
            raise MalformedFactError("'file' must be a string")
        if "facts" not in document:
            raise MalformedFactError("missing 'facts' list")
        entries = document["facts"]
    else:
        entries = document
    if not isinstance(entries, list | tuple):
        raise MalformedFactError(f"expected a list of facts, got {type(entries).__name__}")

    facts: list[CallSiteFact] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise MalformedFactError(f"expected an object, got {type(entry).__name__}", index=index)
        kind = entry.get("kind")
        if not isinstance(kind, str) or not kind:
            raise MalformedFactError("missing or empty 'kind'", index=index)
        location = _render_location(entry.get("location"), file, index)
        snippet = entry.get("snippet")
        if snippet is not None and not isinstance(snippet, str):
            raise MalformedFactError("'snippet' must be a string", index=index)
        facts.append(CallSiteFact(kind=kind, location=location, snippet=snippet))
    return facts


def load_facts(path: Path) -> list[CallSiteFact]:
    """Read and parse a JSON facts document from disk.

    Raises:
        FileNotFoundError: If *path* doesn't exist.
        MalformedFactError: If the file cannot be read, is not valid UTF-8 JSON,
            or has the wrong shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read {path}: {getattr(exc, 'strerror', None) or exc}"
        raise MalformedFactError(msg) from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON in {path} (line {exc.lineno}, column {exc.colno})"
        raise MalformedFactError(msg) from exc
    return parse_facts(document)

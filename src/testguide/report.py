# SPDX-License-Identifier: MIT
"""Finding formatters — plain text, JSON, and GitHub Actions annotations."""

from __future__ import annotations

import json
from collections import Counter

from testguide.rules import Finding, Severity

_ANNOTATION_LEVEL: dict[Severity, str] = {
    Severity.HIGH: "error",
    Severity.MEDIUM: "warning",
    Severity.LOW: "notice",
}


def summarize(findings: list[Finding]) -> dict[str, int]:
    """Count findings per severity, every severity present (zero if none)."""
    counts = Counter(f.severity for f in findings)
    return {sev.value: counts.get(sev, 0) for sev in Severity}


def format_findings(findings: list[Finding]) -> str:
    """Format findings as one line each plus a summary line."""
    lines: list[str] = []
    for f in findings:
        line = f"{f.location}: [{f.severity.value.upper()}] {f.rule_id}: {f.message}"
        if f.evidence:
            line += f" | evidence: {f.evidence}"
        lines.append(line)
    counts = summarize(findings)
    lines.append(
        f"{len(findings)} finding(s): "
        + ", ".join(f"{counts[sev.value]} {sev.value}" for sev in Severity)
    )
    return "\n".join(lines)


def findings_to_json(findings: list[Finding]) -> str:
    """Serialise findings (already ordered) as a JSON document."""
    payload = {
        "findings": [
            {
                "ruleId": f.rule_id,
                "location": f.location,
                "severity": f.severity.value,
                "message": f.message,
                "evidence": f.evidence,
            }
            for f in findings
        ],
        "summary": summarize(findings),
    }
    return json.dumps(payload, indent=2)


def _escape_annotation(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(text: str) -> str:
    return _escape_annotation(text).replace(":", "%3A").replace(",", "%2C")


def _split_location(location: str) -> tuple[str, int | None]:
    """Split "file:line[:column]" into (file, line); opaque locations pass through."""
    parts = location.split(":")
    for cut in (2, 1):
        if len(parts) > cut and all(p.isdigit() for p in parts[-cut:]):
            return ":".join(parts[:-cut]), int(parts[-cut])
    return location, None


def format_annotations(findings: list[Finding]) -> str:
    """Format findings as GitHub Actions workflow commands."""
    lines: list[str] = []
    for f in findings:
        file, line = _split_location(f.location)
        props = f"file={_escape_property(file)}"
        if line is not None:
            props += f",line={line}"
        props += f",title={_escape_property(f.rule_id)}"
        level = _ANNOTATION_LEVEL[f.severity]
        lines.append(f"::{level} {props}::{_escape_annotation(f.message)}")
    return "\n".join(lines)

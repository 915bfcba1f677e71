# SPDX-License-Identifier: MIT
"""Built-in rule set — the UI component testing guide as catalog data."""

from __future__ import annotations

from functools import cache
from typing import Any

from testguide.rules.catalog import Catalog, load

DEFAULT_RULES: list[dict[str, Any]] = [
    # --- Query priority ---
    {
        "id": "prefer-get-by-role",
        "category": "query-priority",
        "severity": "high",
        "antiPattern": "direct-dom-query",
        "recommendation": (
            "Query by accessible role (getByRole) instead of reaching into the DOM "
            "with querySelector or getElementById."
        ),
        "examples": [
            {
                "bad": "container.querySelector('.submit-btn')",
                "good": "screen.getByRole('button', { name: /submit/i })",
            }
        ],
    },
    {
        "id": "avoid-test-id-queries",
        "category": "query-priority",
        "severity": "medium",
        "antiPattern": "test-id-query",
        "recommendation": (
            "Use getByRole, getByLabelText or getByText before falling back to getByTestId."
        ),
        "examples": [
            {
                "bad": "screen.getByTestId('email-input')",
                "good": "screen.getByLabelText(/email/i)",
            }
        ],
    },
    # --- Interaction ---
    {
        "id": "prefer-user-event",
        "category": "interaction",
        "severity": "medium",
        "antiPattern": "fire-event-call",
        "recommendation": "Simulate interactions with userEvent, which fires the full event sequence.",
        "examples": [
            {
                "bad": "fireEvent.click(button)",
                "good": "await user.click(button)",
            }
        ],
    },
    {
        "id": "user-event-setup",
        "category": "interaction",
        "severity": "low",
        "antiPattern": "missing-user-event-setup",
        "recommendation": "Create a user instance with userEvent.setup() before interacting.",
    },
    # --- Async ---
    {
        "id": "no-empty-wait-for",
        "category": "async",
        "severity": "high",
        "antiPattern": "empty-wait-for",
        "recommendation": "Give waitFor a callback that asserts the condition you are waiting on.",
        "examples": [
            {
                "bad": "await waitFor(() => {})",
                "good": "await waitFor(() => expect(spy).toHaveBeenCalled())",
            }
        ],
    },
    {
        "id": "no-side-effects-in-wait-for",
        "category": "async",
        "severity": "high",
        "antiPattern": "side-effect-in-wait-for",
        "recommendation": (
            "Keep waitFor callbacks free of interactions; perform the action first, "
            "then wait for the result."
        ),
    },
    {
        "id": "prefer-find-by",
        "category": "async",
        "severity": "medium",
        "antiPattern": "wait-for-instead-of-find",
        "recommendation": "Use findBy* queries for elements that appear asynchronously.",
        "examples": [
            {
                "bad": "await waitFor(() => screen.getByText('Saved'))",
                "good": "await screen.findByText('Saved')",
            }
        ],
    },
    {
        "id": "no-unnecessary-act",
        "category": "async",
        "severity": "low",
        "antiPattern": "manual-act-wrap",
        "recommendation": "Drop explicit act() around render and userEvent; they already wrap it.",
    },
    # --- Assertion ---
    {
        "id": "prefer-get-by-for-presence",
        "category": "assertion",
        "severity": "medium",
        "antiPattern": "query-by-presence-assertion",
        "recommendation": "Use getBy* to assert presence; reserve queryBy* for asserting absence.",
    },
    {
        "id": "no-snapshot-only-tests",
        "category": "assertion",
        "severity": "low",
        "antiPattern": "snapshot-only-assertion",
        "recommendation": "Assert on visible behaviour instead of relying on a snapshot alone.",
    },
    {
        "id": "no-implementation-details",
        "category": "assertion",
        "severity": "high",
        "antiPattern": "implementation-detail-assertion",
        "recommendation": "Assert on what the user sees, not on component state, props or instances.",
    },
    # --- Mocking ---
    {
        "id": "no-mocking-own-components",
        "category": "mocking",
        "severity": "high",
        "antiPattern": "mock-child-component",
        "recommendation": (
            "Mock at the network or module boundary, not the component under test or its children."
        ),
    },
    {
        "id": "restore-mocks",
        "category": "mocking",
        "severity": "medium",
        "antiPattern": "unrestored-mock",
        "recommendation": "Restore global mocks and spies after each test.",
    },
    # --- Accessibility ---
    {
        "id": "check-accessibility",
        "category": "accessibility",
        "severity": "medium",
        "antiPattern": "missing-accessibility-check",
        "recommendation": "Add an accessibility assertion (e.g. axe) for rendered components.",
    },
    # --- Structure ---
    {
        "id": "render-inside-test",
        "category": "structure",
        "severity": "medium",
        "antiPattern": "render-in-describe-block",
        "recommendation": "Call render() inside each test or a setup helper, not at describe scope.",
    },
    {
        "id": "isolate-renders",
        "category": "structure",
        "severity": "medium",
        "antiPattern": "shared-render-across-tests",
        "recommendation": "Render fresh in every test; do not share a render result between tests.",
    },
    {
        "id": "no-manual-cleanup",
        "category": "structure",
        "severity": "low",
        "antiPattern": "manual-cleanup-call",
        "recommendation": "Remove explicit cleanup(); the test runner integration does it automatically.",
    },
]


@cache
def default_catalog() -> Catalog:
    """Return the built-in catalog, validated once per process."""
    return load(DEFAULT_RULES)

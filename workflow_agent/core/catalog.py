# workflow_agent/core/catalog.py
from __future__ import annotations

"""Static content the generator draws from: integrations, canned step text,
metric and guardrail libraries, and the seed steps used for empty briefs."""

from workflow_agent.core.models import (
    Complexity,
    Severity,
    StepKind,
    WorkflowGuardrail,
    WorkflowMetric,
)


INTEGRATION_KEYWORDS: tuple[str, ...] = (
    "slack",
    "teams",
    "notion",
    "airtable",
    "jira",
    "asana",
    "linear",
    "zapier",
    "hubspot",
    "salesforce",
    "zendesk",
    "stripe",
    "github",
    "gitlab",
    "email",
    "google sheets",
)

CHANNEL_INTEGRATIONS = frozenset({"slack", "teams"})

FALLBACK_OWNER = "Automation Partner"
FALLBACK_TITLE = "Intelligent Workflow Blueprint"
INTAKE_INPUT = "Structured intake data"


# ---------- Per-kind step text ----------

STEP_TITLES: dict[StepKind, str] = {
    StepKind.trigger: "Activate Flow",
    StepKind.analysis: "Structured Assessment",
    StepKind.decision: "Smart Routing Decision",
    StepKind.handoff: "Targeted Handoff",
    StepKind.measurement: "Insights + QA",
}

SUCCESS_CRITERIA: dict[StepKind, str] = {
    StepKind.trigger: "Signal captured with required metadata before downstream steps begin.",
    StepKind.decision: "Routing decision logged with justification and path metadata.",
    StepKind.measurement: "Key metrics updated and alerts resolved or escalated.",
}
DEFAULT_SUCCESS_CRITERIA = "Step completes without errors and produces expected artifact."

AUTOMATION_HINTS: dict[StepKind, str] = {
    StepKind.trigger: "Use event subscriptions or polling adapters to capture the initiating signal.",
    StepKind.analysis: "Combine heuristic scoring with LLM classification for resilient triage.",
    StepKind.decision: "Model routing logic as declarative rules to test and evolve safely.",
}


# ---------- Durations ----------

BASE_MINUTES: dict[Complexity, int] = {
    Complexity.enterprise: 30,
    Complexity.balanced: 15,
    Complexity.lean: 5,
}

# base minutes are divided by these; anything unlisted uses DEFAULT_DURATION_DIVISOR
DURATION_DIVISORS: dict[StepKind, float] = {
    StepKind.decision: 3,
    StepKind.analysis: 1,
    StepKind.measurement: 2,
}
DEFAULT_DURATION_DIVISOR = 1.5
INSTANT = "Instant"


# ---------- Metrics ----------

METRICS_LIBRARY: tuple[WorkflowMetric, ...] = (
    WorkflowMetric(
        name="Cycle Time",
        target="< 4 hours per workflow run",
        rationale="Keeps automated flows feeling responsive and actionable.",
    ),
    WorkflowMetric(
        name="Automation Coverage",
        target="≥ 80% of steps automated",
        rationale="Ensures the assistant shoulders the repetitive orchestration.",
    ),
    WorkflowMetric(
        name="Human Touchpoints",
        target="≤ 2 manual approvals per run",
        rationale="Protects operator focus by only involving people when judgment is required.",
    ),
    WorkflowMetric(
        name="Data Confidence",
        target="100% field validation prior to sync",
        rationale="Prevents downstream system drift and data quality regressions.",
    ),
    WorkflowMetric(
        name="Alert Resolution Time",
        target="< 30 minutes",
        rationale="Keeps exceptions in check with swift human follow-up.",
    ),
)

METRIC_COUNTS: dict[Complexity, int] = {
    Complexity.lean: 2,
    Complexity.balanced: 3,
    Complexity.enterprise: len(METRICS_LIBRARY),
}


# ---------- Guardrails ----------

BASE_GUARDRAILS: tuple[WorkflowGuardrail, ...] = (
    WorkflowGuardrail(
        label="Data Validation",
        detail="Validate structured fields before syncing to systems of record.",
        severity=Severity.high,
    ),
    WorkflowGuardrail(
        label="Exception Routing",
        detail="Surface anomalies to the right owner via the escalation matrix within 15 minutes.",
        severity=Severity.medium,
    ),
)

AUTONOMY_GUARDRAIL = WorkflowGuardrail(
    label="Autonomy Safeguard",
    detail="Require human acknowledgment before executing irreversible actions.",
    severity=Severity.high,
)

COMPLIANCE_GUARDRAIL = WorkflowGuardrail(
    label="Compliance Review",
    detail="Embed audit-ready logging for every decision branch impacting regulated data.",
    severity=Severity.high,
)

CHANNEL_GUARDRAIL = WorkflowGuardrail(
    label="Channel Hygiene",
    detail="Throttle notifications to avoid channel fatigue; bundle updates when possible.",
    severity=Severity.medium,
)


# ---------- Seed steps for empty briefs ----------

SEED_STEPS: tuple[tuple[str, StepKind], ...] = (
    ("Capture trigger signal and structured payload.", StepKind.trigger),
    ("Classify request, enrich context, and check guardrails.", StepKind.analysis),
    ("Execute primary automation, update systems, notify owners.", StepKind.action),
    ("Validate outputs, collect metrics, close the loop.", StepKind.measurement),
)

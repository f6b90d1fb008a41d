# workflow_agent/core/matchers.py
from __future__ import annotations

"""Keyword rule tables
---------------------
Every heuristic classifier in the generator is an ordered list of
(pattern, result) rules evaluated first-match-wins. Table order is the
tie-break: a sentence matching several rules resolves to the earliest one,
not to whichever keyword appears first in the text.
"""

import re
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Sequence, TypeVar

from workflow_agent.core.models import StepKind

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    pattern: re.Pattern[str]
    result: T

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def rule(pattern: str, result: T) -> Rule[T]:
    return Rule(re.compile(pattern, re.IGNORECASE | re.ASCII), result)


def first_match(rules: Iterable[Rule[T]], text: str, default: Optional[T] = None) -> Optional[T]:
    for r in rules:
        if r.matches(text):
            return r.result
    return default


def keyword(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.ASCII)


# ---------- Step kind ----------

STEP_KIND_RULES: Sequence[Rule[StepKind]] = (
    rule(r"\b(trigger|when|incoming|intake|request)\b", StepKind.trigger),
    rule(r"\b(assess|diagnose|classify|analy[sz]e|score|triage)\b", StepKind.analysis),
    rule(r"\b(send|update|build|configure|provision|generate|create|launch)\b", StepKind.action),
    rule(r"\b(sync|automate|schedule|script|api|webhook)\b", StepKind.automation),
    rule(r"\b(if|else|decide|route|branch|approval|fallback)\b", StepKind.decision),
    rule(r"\b(handoff|notify|assign|escalate|handover)\b", StepKind.handoff),
    rule(r"\b(track|measure|report|validate|qa|monitor)\b", StepKind.measurement),
)


def infer_kind(sentence: str) -> StepKind:
    return first_match(STEP_KIND_RULES, sentence, StepKind.action)


# ---------- Step owner ----------

OWNER_RULES: Sequence[Rule[str]] = (
    rule(r"\b(sales|deal|crm|pipeline|lead)\b", "Revenue Ops Automation"),
    rule(r"\b(marketing|campaign|content|seo|brand)\b", "Marketing Automation Pod"),
    rule(r"\b(support|ticket|case|customer|csat)\b", "Support Automation Agent"),
    rule(r"\b(product|release|feature|roadmap|pm)\b", "Product Ops Companion"),
    rule(r"\b(data|analytics|metric|dashboard)\b", "Insights Copilot"),
    rule(r"\b(engineer|deployment|ci|code|dev)\b", "DevOps Automation Runner"),
    rule(r"\b(hr|people|talent|candidate|onboarding)\b", "People Ops Assistant"),
    rule(r"\b(finance|invoice|billing|spend|budget)\b", "Finance Automation Bot"),
)


# ---------- Step outputs ----------

OUTPUT_RULES: Sequence[Rule[str]] = (
    rule(r"\b(report|dashboard|analysis)\b", "Insight packet ready for stakeholders"),
    rule(r"\b(email|notification|message|alert)\b", "Notification delivered to subscribers"),
    rule(r"\b(update|sync|crm|record|database)\b", "Record synchronized across systems"),
)


# ---------- Success criteria (non-canned kinds) ----------

# The notify pattern is an alternation of `\bnotify`, `alert` and `email\b`.
SUCCESS_RULES: Sequence[Rule[str]] = (
    rule(r"\b(sync|update|write)\b", "Target system reflects new state within agreed SLA."),
    rule(r"\bnotify|alert|email\b", "Audience receives contextual notification with actionable summary."),
)


# ---------- Plan-level inference ----------

PERSONA_RULES: Sequence[Rule[str]] = (
    rule(r"\b(governance|compliance|audit)\b", "Governance Workflow Architect"),
    rule(r"\b(customer|support|ticket)\b", "Customer Experience Flow Builder"),
    rule(r"\b(product|release|feature)\b", "Product Launch Orchestrator"),
    rule(r"\b(revenue|sales|deal|crm)\b", "Revenue Workflow Strategist"),
)

TRIGGER_RULES: Sequence[Rule[str]] = (
    rule(r"\b(inbound|incoming|new)\b", "When a new inbound request is detected in the primary channel."),
    rule(r"\b(schedule|daily|weekly)\b", "On a scheduled cadence defined by the operations calendar."),
    rule(r"\b(threshold|breach|alert)\b", "Whenever a monitored signal crosses a critical threshold."),
)

COMPLIANCE_KEYWORDS = keyword(r"\b(compliance|gdpr|pii|audit)\b")


__all__ = [
    "Rule",
    "rule",
    "first_match",
    "keyword",
    "infer_kind",
    "STEP_KIND_RULES",
    "OWNER_RULES",
    "OUTPUT_RULES",
    "SUCCESS_RULES",
    "PERSONA_RULES",
    "TRIGGER_RULES",
    "COMPLIANCE_KEYWORDS",
]

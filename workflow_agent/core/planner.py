# workflow_agent/core/planner.py
from __future__ import annotations

"""Plan generator
-----------------
Turns a free-text brief into a WorkflowPlan: resolves options once, builds the
steps, then derives the plan-level fields (title, persona, trigger, guardrails,
metrics). Pure apart from the clock used for the plan id.
"""

from typing import Callable, Optional, Sequence

from workflow_agent.core import catalog
from workflow_agent.core.matchers import COMPLIANCE_KEYWORDS, PERSONA_RULES, TRIGGER_RULES, first_match
from workflow_agent.core.models import (
    DEFAULT_OPTIONS,
    AgentInput,
    AutomationLevel,
    Complexity,
    WorkflowAgentOptions,
    WorkflowGuardrail,
    WorkflowMetric,
    WorkflowPlan,
    WorkflowStep,
)
from workflow_agent.core.steps import create_step, find_integrations, seed_default_steps, stitch_dependencies
from workflow_agent.core.text import (
    MIN_SENTENCE_LENGTH,
    extract_sentences,
    first_raw_sentence,
    sanitize_brief,
    text_length,
    title_case,
)
from workflow_agent.utils.logger import get_logger
from workflow_agent.utils.timing import Stopwatch, epoch_ms

log = get_logger(__name__)


_FALLBACK_PERSONAS: dict[AutomationLevel, str] = {
    AutomationLevel.autonomous: "Autonomous Runbook Engineer",
    AutomationLevel.orchestration: "Human-in-the-loop Workflow Partner",
    AutomationLevel.co_pilot: "Automation Copilot",
}

_SUMMARY_VERBS: dict[AutomationLevel, str] = {
    AutomationLevel.autonomous: "executes",
    AutomationLevel.co_pilot: "collaborates on",
    AutomationLevel.orchestration: "orchestrates",
}

_FALLBACK_TRIGGER = "When the initiating signal aligned with the workflow goal is observed."


# ---------- Plan-level inference ----------


def extract_integrations(brief: str, existing_systems: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(find_integrations(brief) + list(existing_systems)))


def infer_title(brief: str) -> str:
    candidate = first_raw_sentence(brief)
    if text_length(candidate) > MIN_SENTENCE_LENGTH:
        return title_case(candidate)
    return catalog.FALLBACK_TITLE


def infer_persona(brief: str, level: AutomationLevel) -> str:
    return first_match(PERSONA_RULES, brief) or _FALLBACK_PERSONAS[level]


def build_summary(title: str, persona: str, steps: Sequence[WorkflowStep], level: AutomationLevel) -> str:
    return (
        f'{persona} {_SUMMARY_VERBS[level]} the "{title}" flow with {len(steps)} modular steps '
        "covering intake, enrichment, execution, and validation so the team can stay focused "
        "on high-impact work."
    )


def infer_trigger(brief: str) -> str:
    return first_match(TRIGGER_RULES, brief, _FALLBACK_TRIGGER)


def build_completion_criteria(steps: Sequence[WorkflowStep]) -> list[str]:
    final = steps[-1]
    deliverable = final.outputs[0] if final.outputs else final.title
    return [
        f"All mandatory steps ({len(steps)}) complete without unresolved blockers.",
        f'Final deliverable "{deliverable}" confirmed as delivered.',
        "Guardrails and validation checkpoints executed with no high-severity exceptions.",
    ]


def build_guardrails(brief: str, level: AutomationLevel, integrations: Sequence[str]) -> list[WorkflowGuardrail]:
    guardrails = list(catalog.BASE_GUARDRAILS)
    if level is AutomationLevel.autonomous:
        guardrails.append(catalog.AUTONOMY_GUARDRAIL)
    if COMPLIANCE_KEYWORDS.search(brief):
        guardrails.append(catalog.COMPLIANCE_GUARDRAIL)
    if any(name.lower() in catalog.CHANNEL_INTEGRATIONS for name in integrations):
        guardrails.append(catalog.CHANNEL_GUARDRAIL)
    return guardrails


def pick_metrics(complexity: Complexity) -> list[WorkflowMetric]:
    return list(catalog.METRICS_LIBRARY[: catalog.METRIC_COUNTS[complexity]])


# ---------- Public API ----------


def generate_workflow_plan(
    agent_input: AgentInput,
    defaults: WorkflowAgentOptions = DEFAULT_OPTIONS,
    clock: Callable[[], int] = epoch_ms,
) -> WorkflowPlan:
    """
    Generate a plan for `agent_input`.

    `defaults` supplies every option the input leaves unset; it is merged once
    here and the resolved options are what the step and plan builders see.
    Any brief, including an empty one, yields a complete plan.
    """
    with Stopwatch() as sw:
        options = agent_input.options.merge_into(defaults)
        brief = sanitize_brief(agent_input.brief)
        sentences = extract_sentences(brief)

        if sentences:
            steps = [create_step(sentence, index, options) for index, sentence in enumerate(sentences)]
        else:
            log.debug("No usable sentences in brief; using seed steps")
            steps = seed_default_steps(options)
        steps = stitch_dependencies(steps)

        integrations = extract_integrations(brief, options.existing_systems)
        name = agent_input.workflow_name
        title = name if name and name.strip() else infer_title(brief)
        persona = infer_persona(brief, options.automation_level)

        plan = WorkflowPlan(
            id=f"workflow-{clock()}",
            title=title,
            summary=build_summary(title, persona, steps, options.automation_level),
            persona=persona,
            trigger_statement=infer_trigger(brief),
            completion_criteria=build_completion_criteria(steps),
            steps=steps,
            metrics=pick_metrics(options.complexity),
            guardrails=build_guardrails(brief, options.automation_level, integrations),
            automation_level=options.automation_level,
            integrations=integrations,
        )

    log.info(f"Generated '{plan.title}' ({len(plan.steps)} steps) in {sw.elapsed_ms()} ms")
    return plan


def generate(
    brief: str,
    workflow_name: Optional[str] = None,
    defaults: WorkflowAgentOptions = DEFAULT_OPTIONS,
    **overrides,
) -> WorkflowPlan:
    """Keyword shortcut: generate("...", complexity="lean", existing_systems=["Slack"])."""
    return generate_workflow_plan(
        AgentInput(brief=brief, workflow_name=workflow_name, options=overrides),
        defaults=defaults,
    )

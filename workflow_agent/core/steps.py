# workflow_agent/core/steps.py
from __future__ import annotations

"""Step synthesizer
-------------------
Maps one brief sentence to a WorkflowStep and stitches the finished steps
into a linear chain.
"""

from typing import Optional, Sequence

from workflow_agent.core import catalog
from workflow_agent.core.matchers import (
    OUTPUT_RULES,
    OWNER_RULES,
    SUCCESS_RULES,
    first_match,
    infer_kind,
)
from workflow_agent.core.models import Complexity, StepKind, WorkflowAgentOptions, WorkflowStep
from workflow_agent.core.text import format_minutes, sentence_case, strip_first_number, title_case
from workflow_agent.utils.logger import get_logger

log = get_logger(__name__)


def step_id(index: int) -> str:
    return f"step-{index + 1}"


def output_reference(previous_id: str) -> str:
    return f"Output from {previous_id}"


# ---------- Field builders ----------


def infer_step_title(sentence: str, kind: StepKind, index: int) -> str:
    canned = catalog.STEP_TITLES.get(kind)
    if canned:
        return canned
    words = " ".join(sentence.split()[:6])
    return title_case(words or f"Step {index + 1}")


def infer_owner(sentence: str, options: WorkflowAgentOptions, index: int) -> str:
    owner = first_match(OWNER_RULES, sentence)
    if owner:
        return owner
    owners = options.preferred_owners
    if owners:
        return owners[index % len(owners)]
    return catalog.FALLBACK_OWNER


def expand_description(sentence: str, kind: StepKind, owner: str) -> str:
    core = sentence or "Execute the required action."
    verb = "listens for" if kind is StepKind.trigger else "handles"
    return f"{owner} {verb}: {sentence_case(core)}."


def build_outputs(sentence: str, index: int) -> list[str]:
    base = strip_first_number(sentence)
    if not base:
        return [f"Artifact from step {index + 1}"]
    phrase = first_match(OUTPUT_RULES, base)
    return [phrase or title_case(base)]


def find_integrations(text: str) -> list[str]:
    """Integration keywords present in `text` (case-insensitive substring), title-cased."""
    lower = text.lower()
    return [title_case(name) for name in catalog.INTEGRATION_KEYWORDS if name in lower]


def infer_tools(sentence: str, options: WorkflowAgentOptions) -> list[str]:
    tools = find_integrations(sentence) + [title_case(s) for s in options.existing_systems]
    return list(dict.fromkeys(tools))


def infer_duration(kind: StepKind, complexity: Complexity) -> str:
    if kind is StepKind.trigger:
        return catalog.INSTANT
    base = catalog.BASE_MINUTES[complexity]
    divisor = catalog.DURATION_DIVISORS.get(kind, catalog.DEFAULT_DURATION_DIVISOR)
    return format_minutes(base / divisor)


def build_success_criteria(sentence: str, kind: StepKind) -> str:
    canned = catalog.SUCCESS_CRITERIA.get(kind)
    if canned:
        return canned
    return first_match(SUCCESS_RULES, sentence, catalog.DEFAULT_SUCCESS_CRITERIA)


def build_automation_hint(kind: StepKind, tools: Sequence[str]) -> Optional[str]:
    canned = catalog.AUTOMATION_HINTS.get(kind)
    if canned:
        return canned
    if tools:
        return f"Leverage native APIs for {', '.join(tools)} to keep the flow scriptless."
    return None


# ---------- Step factory ----------


def create_step(
    sentence: str,
    index: int,
    options: WorkflowAgentOptions,
    kind: Optional[StepKind] = None,
) -> WorkflowStep:
    """
    Build the step for `sentence` at 0-based position `index`.
    `kind` pins the category instead of classifying the sentence (seed steps use it).
    """
    kind = kind or infer_kind(sentence)
    owner = infer_owner(sentence, options, index)
    tools = infer_tools(sentence, options)
    log.debug(f"{step_id(index)}: {kind.value} -> {owner}")

    return WorkflowStep(
        id=step_id(index),
        title=infer_step_title(sentence, kind, index),
        description=expand_description(sentence, kind, owner),
        kind=kind,
        owner=owner,
        inputs=[catalog.INTAKE_INPUT] if index == 0 else [output_reference(step_id(index - 1))],
        outputs=build_outputs(sentence, index),
        tools=tools,
        depends_on=[] if index == 0 else [step_id(index - 1)],
        duration=infer_duration(kind, options.complexity),
        success_criteria=build_success_criteria(sentence, kind),
        automation_hint=build_automation_hint(kind, tools),
    )


def seed_default_steps(options: WorkflowAgentOptions) -> list[WorkflowStep]:
    return [
        create_step(sentence, index, options, kind=kind)
        for index, (sentence, kind) in enumerate(catalog.SEED_STEPS)
    ]


def stitch_dependencies(steps: Sequence[WorkflowStep]) -> list[WorkflowStep]:
    """
    Return a new list where every step after the first depends on its
    predecessor and has at least one input. The given steps are not modified.
    """
    stitched: list[WorkflowStep] = []
    for index, current in enumerate(steps):
        if index == 0:
            stitched.append(current)
            continue
        previous_id = steps[index - 1].id
        depends_on = list(current.depends_on)
        if previous_id not in depends_on:
            depends_on.append(previous_id)
        inputs = list(current.inputs) or [output_reference(previous_id)]
        stitched.append(current.model_copy(update={"depends_on": depends_on, "inputs": inputs}))
    return stitched

import pytest

from workflow_agent.core.models import (
    DEFAULT_OPTIONS,
    Complexity,
    StepKind,
    WorkflowAgentOptions,
    WorkflowStep,
)
from workflow_agent.core.steps import (
    build_outputs,
    build_success_criteria,
    create_step,
    infer_duration,
    infer_owner,
    seed_default_steps,
    stitch_dependencies,
)


def _bare_step(step_id: str, **kw) -> WorkflowStep:
    data = dict(
        id=step_id,
        title="T",
        description="D",
        kind=StepKind.action,
        owner="O",
        duration="1 min",
        success_criteria="S",
    )
    data.update(kw)
    return WorkflowStep(**data)


def test_create_step_for_plain_action_sentence():
    step = create_step("Send a welcome email to new signups", 0, DEFAULT_OPTIONS)

    assert step.id == "step-1"
    assert step.kind is StepKind.action
    assert step.title == "Send A Welcome Email To New"
    assert step.owner == "Automation Orchestrator"
    assert step.description == "Automation Orchestrator handles: Send a welcome email to new signups."
    assert step.inputs == ["Structured intake data"]
    assert step.outputs == ["Notification delivered to subscribers"]
    assert step.tools == ["Email"]
    assert step.depends_on == []
    assert step.duration == "10 min"
    assert step.success_criteria == "Audience receives contextual notification with actionable summary."
    assert step.automation_hint == "Leverage native APIs for Email to keep the flow scriptless."


def test_create_step_for_trigger_sentence_uses_canned_text():
    step = create_step("When a ticket arrives, capture it", 2, DEFAULT_OPTIONS)

    assert step.id == "step-3"
    assert step.kind is StepKind.trigger
    assert step.title == "Activate Flow"
    assert step.owner == "Support Automation Agent"
    assert step.description == "Support Automation Agent listens for: When a ticket arrives, capture it."
    assert step.inputs == ["Output from step-2"]
    assert step.depends_on == ["step-2"]
    assert step.duration == "Instant"
    assert step.success_criteria == "Signal captured with required metadata before downstream steps begin."
    assert step.automation_hint == (
        "Use event subscriptions or polling adapters to capture the initiating signal."
    )


def test_step_without_tools_has_no_automation_hint():
    step = create_step("Celebrate the win together", 0, DEFAULT_OPTIONS)
    assert step.tools == []
    assert step.automation_hint is None


def test_tools_merge_keywords_and_existing_systems_in_first_seen_order():
    options = WorkflowAgentOptions(existing_systems=["slack", "airtable base"])
    step = create_step("Post the summary to SLACK and Google Sheets", 0, options)
    assert step.tools == ["Slack", "Google Sheets", "Airtable Base"]


def test_owner_cycles_through_preferred_owners():
    options = WorkflowAgentOptions(preferred_owners=["Ops Lead", "QA Reviewer"])
    owners = [infer_owner("Review the notes", options, i) for i in range(4)]
    assert owners == ["Ops Lead", "QA Reviewer", "Ops Lead", "QA Reviewer"]


def test_owner_without_any_preferred_owner_falls_back():
    options = WorkflowAgentOptions(preferred_owners=[])
    assert infer_owner("Review the notes", options, 0) == "Automation Partner"


def test_domain_owner_wins_over_preferred_owners():
    options = WorkflowAgentOptions(preferred_owners=["Ops Lead"])
    assert infer_owner("Refresh the campaign brief", options, 0) == "Marketing Automation Pod"


@pytest.mark.parametrize(
    "kind, complexity, expected",
    [
        (StepKind.trigger, Complexity.enterprise, "Instant"),
        (StepKind.analysis, Complexity.enterprise, "30 min"),
        (StepKind.decision, Complexity.enterprise, "10 min"),
        (StepKind.measurement, Complexity.balanced, "7.5 min"),
        (StepKind.handoff, Complexity.balanced, "10 min"),
        (StepKind.action, Complexity.lean, "3.3333333333333335 min"),
        (StepKind.decision, Complexity.lean, "1.6666666666666667 min"),
    ],
)
def test_infer_duration(kind, complexity, expected):
    assert infer_duration(kind, complexity) == expected


def test_build_outputs_phrases_and_fallback():
    assert build_outputs("Email the weekly report", 0) == ["Insight packet ready for stakeholders"]
    assert build_outputs("Post an alert in the channel", 0) == ["Notification delivered to subscribers"]
    assert build_outputs("Refresh the database", 0) == ["Record synchronized across systems"]
    assert build_outputs("Ship 3 boxes to the warehouse", 0) == ["Ship  Boxes To The Warehouse"]
    assert build_outputs("42", 4) == ["Artifact from step 5"]


def test_build_success_criteria():
    assert build_success_criteria("Write the summary to the wiki", StepKind.action) == (
        "Target system reflects new state within agreed SLA."
    )
    assert build_success_criteria("Raise alerts for late orders", StepKind.action) == (
        "Audience receives contextual notification with actionable summary."
    )
    assert build_success_criteria("Anything", StepKind.measurement) == (
        "Key metrics updated and alerts resolved or escalated."
    )
    assert build_success_criteria("Tidy up", StepKind.action) == (
        "Step completes without errors and produces expected artifact."
    )


def test_seed_steps_follow_stage_order():
    steps = seed_default_steps(DEFAULT_OPTIONS)
    assert [s.kind for s in steps] == [
        StepKind.trigger,
        StepKind.analysis,
        StepKind.action,
        StepKind.measurement,
    ]
    assert [s.id for s in steps] == ["step-1", "step-2", "step-3", "step-4"]


def test_stitch_dependencies_returns_new_steps_and_leaves_input_untouched():
    original = [
        _bare_step("step-1", inputs=["Structured intake data"]),
        _bare_step("step-2"),
        _bare_step("step-3", depends_on=["step-2"], inputs=["Output from step-2"]),
    ]

    stitched = stitch_dependencies(original)

    assert stitched is not original
    assert stitched[0] is original[0]
    assert stitched[1].depends_on == ["step-1"]
    assert stitched[1].inputs == ["Output from step-1"]
    assert stitched[2].depends_on == ["step-2"]
    assert stitched[2].inputs == ["Output from step-2"]
    # originals unchanged
    assert original[1].depends_on == []
    assert original[1].inputs == []


def test_stitch_dependencies_keeps_existing_dependencies():
    steps = [_bare_step("step-1"), _bare_step("step-2", depends_on=["external"], inputs=["x"])]
    stitched = stitch_dependencies(steps)
    assert stitched[1].depends_on == ["external", "step-1"]
    assert stitched[1].inputs == ["x"]

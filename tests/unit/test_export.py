import json
from pathlib import Path
import textwrap

import pytest

from workflow_agent.core.export import (
    PlanLoadError,
    dump_plan,
    load_plan,
    load_plans_file,
    parse_plan,
    plan_to_dict,
    write_plan,
)
from workflow_agent.core.models import AgentInput
from workflow_agent.core.planner import generate_workflow_plan


BRIEF = (
    "When a new ticket arrives in Zendesk, capture it. Triage severity and score 2 risks. "
    "Notify the on-call squad in Slack. Track resolution time on the dashboard."
)


@pytest.fixture
def plan():
    agent_input = AgentInput(
        brief=BRIEF,
        workflow_name="Ticket Escalation",
        options={"complexity": "enterprise", "existing_systems": ["PagerDuty"]},
    )
    return generate_workflow_plan(agent_input, clock=lambda: 1700000000000)


def test_export_uses_camel_case_keys(plan):
    data = plan_to_dict(plan)

    assert list(data) == [
        "id",
        "title",
        "summary",
        "persona",
        "triggerStatement",
        "completionCriteria",
        "steps",
        "metrics",
        "guardrails",
        "automationLevel",
        "integrations",
    ]
    step = data["steps"][1]
    assert {"dependsOn", "successCriteria", "automationHint"} <= set(step)
    assert step["kind"] == "analysis"
    assert data["automationLevel"] == "co-pilot"
    assert data["guardrails"][0]["severity"] == "high"


def test_absent_automation_hint_is_omitted():
    plan = generate_workflow_plan(AgentInput(brief="Celebrate the win together"))
    step = plan_to_dict(plan)["steps"][0]
    assert "automationHint" not in step


def test_json_round_trip(plan):
    text = dump_plan(plan, "json")
    assert json.loads(text)["metrics"][1]["target"] == "≥ 80% of steps automated"
    assert parse_plan(text) == plan


def test_yaml_round_trip_through_file(tmp_path: Path, plan):
    out = write_plan(plan, tmp_path / "plans" / "ticket.yaml")
    assert out.read_text(encoding="utf-8").startswith("id: workflow-1700000000000")
    assert load_plan(out) == plan


def test_unknown_format_rejected(plan):
    with pytest.raises(ValueError):
        dump_plan(plan, "xml")


def test_load_plans_file_multiple_docs(tmp_path: Path, plan):
    other = generate_workflow_plan(AgentInput(brief=""), clock=lambda: 1)
    f = tmp_path / "multi.yaml"
    f.write_text(dump_plan(plan, "yaml") + "---\n" + dump_plan(other, "yaml"), encoding="utf-8")

    plans = load_plans_file(f)
    assert [p.id for p in plans] == ["workflow-1700000000000", "workflow-1"]
    with pytest.raises(PlanLoadError):
        load_plan(f)


def test_invalid_plan_lists_failing_fields(tmp_path: Path, plan):
    data = plan_to_dict(plan)
    data["automationLevel"] = "hands-off"
    del data["steps"][0]["owner"]
    f = tmp_path / "broken.json"
    f.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(PlanLoadError) as exc:
        load_plan(f)
    message = str(exc.value)
    assert "automationLevel" in message
    assert "steps.0.owner" in message


def test_non_mapping_and_missing_files(tmp_path: Path):
    with pytest.raises(PlanLoadError):
        parse_plan("- just\n- a list\n")
    with pytest.raises(PlanLoadError):
        parse_plan(textwrap.dedent("title: [unclosed"))
    with pytest.raises(FileNotFoundError):
        load_plan(tmp_path / "nope.json")


def test_json_round_trip_keeps_control_characters():
    plan = generate_workflow_plan(AgentInput(brief="Review the open\x7f items weekly"), clock=lambda: 1)
    text = dump_plan(plan, "json")
    assert "\x7f" in text
    assert parse_plan(text) == plan

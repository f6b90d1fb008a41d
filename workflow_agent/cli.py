# workflow_agent/cli.py
from __future__ import annotations

"""Command-line interface
------------------------
Generate plans from briefs, inspect exported plans, and view effective config.
Thin wrapper around the planner and the export module.
"""
import json
import sys
from pathlib import Path
from typing import List, Optional

import click

from workflow_agent.core.export import FORMATS, dump_plan, load_plan, load_plans_file, write_plan
from workflow_agent.core.models import AgentInput, AutomationLevel, Complexity, WorkflowPlan, WorkflowStep
from workflow_agent.core.planner import generate_workflow_plan
from workflow_agent.utils.config import get_settings, split_list_field
from workflow_agent.utils.logger import bind, get_logger, set_log_level, unbind
from workflow_agent.utils.timing import sleep_ms


DEMO_BRIEF = """We need an automated workflow to triage incoming product feedback from multiple channels.
Group related feedback, tag urgency levels, push action items to the right squad, and keep leadership updated.
Integrate with Slack, Linear, and Notion.
Escalate blockers automatically when they appear more than twice in a week."""

DEMO_NAME = "Feedback Intelligence Orchestrator"
DEMO_OWNERS = "Automation Orchestrator, Product Steward, Insight Analyst"
DEMO_SYSTEMS = "Slack, Linear, Notion"


# -------- helpers --------


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _read_brief(brief: Optional[str], brief_file: Optional[str]) -> Optional[str]:
    if brief_file:
        return Path(brief_file).read_text(encoding="utf-8")
    if brief == "-":
        return click.get_text_stream("stdin").read()
    return brief


def _emit(plan: WorkflowPlan, fmt: str, out: Optional[str]) -> None:
    if out:
        path = write_plan(plan, Path(out).resolve(), fmt)
        click.echo(f"Wrote plan: {path}")
    else:
        click.echo(dump_plan(plan, fmt))


def _run_generate(
    brief: str,
    name: Optional[str],
    automation_level: Optional[str],
    complexity: Optional[str],
    owners: Optional[str],
    systems: Optional[str],
) -> WorkflowPlan:
    settings = get_settings()
    log = get_logger(__name__)

    overrides = {
        "automation_level": automation_level,
        "complexity": complexity,
        "preferred_owners": split_list_field(owners) if owners is not None else None,
        "existing_systems": split_list_field(systems) if systems is not None else None,
    }
    agent_input = AgentInput(brief=brief, workflow_name=name, options=overrides)

    if settings.SIMULATED_DELAY_MS:
        log.info("Synthesizing...")
        sleep_ms(settings.SIMULATED_DELAY_MS)

    plan = generate_workflow_plan(agent_input, defaults=settings.default_options())
    bind(plan_id=plan.id)
    log.debug(f"Integrations: {', '.join(plan.integrations) or '-'}")
    unbind("plan_id")
    return plan


def _render_outline(plan: WorkflowPlan) -> None:
    click.echo(f"{plan.title}  [{plan.automation_level.value}]")
    click.echo(f"Persona: {plan.persona}")
    click.echo(plan.summary)
    click.echo(f"\nTrigger: {plan.trigger_statement}\n")
    click.echo(f"Steps ({len(plan.steps)}):")
    for step in plan.steps:
        click.echo(f" - {step.id}  {step.title}  ({step.kind.value}, {step.owner}, {step.duration})")
    click.echo("\nCompletion criteria:")
    for criterion in plan.completion_criteria:
        click.echo(f" - {criterion}")
    click.echo("\nGuardrails:")
    for g in plan.guardrails:
        click.echo(f" - [{g.severity.value}] {g.label}: {g.detail}")
    click.echo("\nMetrics:")
    for m in plan.metrics:
        click.echo(f" - {m.name}: {m.target}")
    if plan.integrations:
        click.echo(f"\nIntegrations: {', '.join(plan.integrations)}")


def _render_step(step: WorkflowStep) -> None:
    click.echo(f"{step.id}  {step.title}")
    click.echo(f"Kind: {step.kind.value}")
    click.echo(f"Owner: {step.owner}")
    click.echo(f"Duration: {step.duration}")
    click.echo(step.description)
    click.echo(f"Inputs: {'; '.join(step.inputs) or '-'}")
    click.echo(f"Outputs: {'; '.join(step.outputs) or '-'}")
    click.echo(f"Tools: {', '.join(step.tools) or '-'}")
    click.echo(f"Depends on: {', '.join(step.depends_on) or '-'}")
    click.echo(f"Success: {step.success_criteria}")
    if step.automation_hint:
        click.echo(f"Hint: {step.automation_hint}")


_generation_options = [
    click.option("--name", "name", type=str, default=None, help="Workflow name (defaults to the brief's first sentence)"),
    click.option(
        "--automation-level",
        type=click.Choice([a.value for a in AutomationLevel]),
        default=None,
        help="Override DEFAULT_AUTOMATION_LEVEL from settings",
    ),
    click.option(
        "--complexity",
        type=click.Choice([c.value for c in Complexity]),
        default=None,
        help="Override DEFAULT_COMPLEXITY from settings",
    ),
    click.option("--owners", type=str, default=None, help="Preferred owners, e.g. 'Ops Lead, QA Reviewer'"),
    click.option("--systems", type=str, default=None, help="Existing systems, e.g. 'Slack; Notion'"),
    click.option(
        "--format", "fmt",
        type=click.Choice(FORMATS),
        default=lambda: get_settings().EXPORT_FORMAT.value,
        show_default="EXPORT_FORMAT",
    ),
    click.option("--out", type=click.Path(dir_okay=False), default=None, help="Write the plan to this file"),
]


def generation_options(fn):
    for opt in reversed(_generation_options):
        fn = opt(fn)
    return fn


# -------- CLI root --------


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from settings",
)
@click.version_option(package_name="workflow-agent")
def cli(log_level: Optional[str]):
    _ = get_settings()
    if log_level:
        set_log_level(log_level.upper())


# -------- commands --------


@cli.command("config")
def cmd_config():
    """Print effective configuration (after .env & env vars)."""
    s = get_settings()
    _echo_json(s.model_dump(mode="json"))


@cli.command("generate")
@click.argument("brief", required=False)
@click.option("--file", "brief_file", type=click.Path(dir_okay=False, exists=True), help="Read the brief from a file")
@generation_options
def cmd_generate(
    brief: Optional[str],
    brief_file: Optional[str],
    name: Optional[str],
    automation_level: Optional[str],
    complexity: Optional[str],
    owners: Optional[str],
    systems: Optional[str],
    fmt: str,
    out: Optional[str],
):
    """
    Generate a workflow plan from a brief.

    Examples:
      workflow-agent generate "Route incoming tickets to the right squad."
      workflow-agent generate --file brief.txt --complexity enterprise --out plan.yaml
      cat brief.txt | workflow-agent generate - --format yaml
    """
    text = _read_brief(brief, brief_file)
    if text is None:
        click.echo("Provide a brief, --file, or '-' to read stdin.")
        sys.exit(2)

    plan = _run_generate(text, name, automation_level, complexity, owners, systems)
    _emit(plan, fmt, out)


@cli.command("demo")
@generation_options
def cmd_demo(
    name: Optional[str],
    automation_level: Optional[str],
    complexity: Optional[str],
    owners: Optional[str],
    systems: Optional[str],
    fmt: str,
    out: Optional[str],
):
    """Generate the sample feedback-triage plan."""
    plan = _run_generate(
        DEMO_BRIEF,
        name or DEMO_NAME,
        automation_level,
        complexity,
        DEMO_OWNERS if owners is None else owners,
        DEMO_SYSTEMS if systems is None else systems,
    )
    _emit(plan, fmt, out)


@cli.command("show")
@click.argument("plan_file", type=click.Path(dir_okay=False, exists=True))
@click.option("--step", "step_id", type=str, default=None, help="Show one step in detail, e.g. step-2")
def cmd_show(plan_file: str, step_id: Optional[str]):
    """Print an exported plan as an outline, or one step's detail."""
    try:
        plan = load_plan(plan_file)
    except ValueError as e:
        click.echo(f"ERR {plan_file}  ->  {e}")
        sys.exit(1)

    if step_id is None:
        _render_outline(plan)
        return

    step = plan.step(step_id)
    if step is None:
        known = ", ".join(s.id for s in plan.steps)
        click.echo(f"ERR unknown step '{step_id}' (have: {known})")
        sys.exit(1)
    _render_step(step)


@cli.command("validate")
@click.argument("targets", nargs=-1, required=False)
def cmd_validate(targets: List[str]):
    """Validate exported plan files (JSON or multi-doc YAML)."""
    if not targets:
        click.echo("Provide plan file(s) to validate.")
        sys.exit(2)

    ok = True
    for target in targets:
        fp = Path(target).resolve()
        try:
            for plan in load_plans_file(fp):
                click.echo(f"OK  {fp}  ->  {plan.title} ({len(plan.steps)} steps)")
        except (ValueError, FileNotFoundError) as e:
            ok = False
            click.echo(f"ERR {fp}  ->  {e}")

    sys.exit(0 if ok else 1)


def main() -> None:
    cli(prog_name="workflow-agent")


if __name__ == "__main__":
    main()

"""
Core package for the workflow agent.
Lightweight package init to avoid import cycles.

Consumers should import submodules directly, e.g.:
  from workflow_agent.core.models import WorkflowPlan, AgentInput
  from workflow_agent.core.planner import generate_workflow_plan
  from workflow_agent.core.export import dump_plan, load_plan
"""

__all__: list[str] = []

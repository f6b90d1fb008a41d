"""
Workflow Agent.
Turns a free-text workflow brief into an automation blueprint.

Consumers should import submodules directly, e.g.:
  from workflow_agent.core.planner import generate_workflow_plan
  from workflow_agent.core.export import dump_plan, load_plan
"""

__version__ = "0.1.0"

# workflow_agent/core/models.py
from __future__ import annotations

"""Plan schema
--------------
Pydantic models for generated workflow plans and the options that shape them.
Attributes are snake_case; the camelCase aliases are the export key names.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------- Core enums ----------


class StepKind(str, Enum):
    trigger = "trigger"
    analysis = "analysis"
    action = "action"
    automation = "automation"
    decision = "decision"
    handoff = "handoff"
    measurement = "measurement"


class AutomationLevel(str, Enum):
    orchestration = "orchestration"
    co_pilot = "co-pilot"
    autonomous = "autonomous"


class Complexity(str, Enum):
    lean = "lean"
    balanced = "balanced"
    enterprise = "enterprise"


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class PlanModel(BaseModel):
    """Frozen base with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


# ---------- Plan parts ----------


class WorkflowStep(PlanModel):
    id: str = Field(..., description="step-N, 1-based")
    title: str
    description: str
    kind: StepKind
    owner: str
    inputs: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)
    duration: str
    success_criteria: str
    automation_hint: Optional[str] = None


class WorkflowMetric(PlanModel):
    name: str
    target: str
    rationale: str


class WorkflowGuardrail(PlanModel):
    label: str
    detail: str
    severity: Severity


class WorkflowPlan(PlanModel):
    id: str
    title: str
    summary: str
    persona: str
    trigger_statement: str
    completion_criteria: list[str]
    steps: list[WorkflowStep]
    metrics: list[WorkflowMetric]
    guardrails: list[WorkflowGuardrail]
    automation_level: AutomationLevel
    integrations: list[str]

    def step(self, step_id: str) -> Optional[WorkflowStep]:
        return next((s for s in self.steps if s.id == step_id), None)


# ---------- Generator inputs ----------


DEFAULT_OWNERS = ["Automation Orchestrator", "Domain Specialist", "QA Reviewer"]


class WorkflowAgentOptions(PlanModel):
    automation_level: AutomationLevel = AutomationLevel.co_pilot
    complexity: Complexity = Complexity.balanced
    preferred_owners: list[str] = Field(default_factory=lambda: list(DEFAULT_OWNERS))
    existing_systems: list[str] = Field(default_factory=list)


class OptionOverrides(PlanModel):
    """Partial options; unset fields fall back to the defaults handed to the generator."""

    automation_level: Optional[AutomationLevel] = None
    complexity: Optional[Complexity] = None
    preferred_owners: Optional[list[str]] = None
    existing_systems: Optional[list[str]] = None

    def merge_into(self, defaults: WorkflowAgentOptions) -> WorkflowAgentOptions:
        return WorkflowAgentOptions(
            automation_level=self.automation_level or defaults.automation_level,
            complexity=self.complexity or defaults.complexity,
            preferred_owners=list(self.preferred_owners or defaults.preferred_owners),
            existing_systems=list(
                self.existing_systems if self.existing_systems is not None else defaults.existing_systems
            ),
        )


class AgentInput(PlanModel):
    brief: str
    workflow_name: Optional[str] = None
    options: OptionOverrides = Field(default_factory=OptionOverrides)

    @field_validator("options", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return OptionOverrides() if v is None else v


DEFAULT_OPTIONS = WorkflowAgentOptions()


__all__ = [
    "StepKind",
    "AutomationLevel",
    "Complexity",
    "Severity",
    "WorkflowStep",
    "WorkflowMetric",
    "WorkflowGuardrail",
    "WorkflowPlan",
    "WorkflowAgentOptions",
    "OptionOverrides",
    "AgentInput",
    "DEFAULT_OWNERS",
    "DEFAULT_OPTIONS",
]

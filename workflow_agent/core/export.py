# workflow_agent/core/export.py
from __future__ import annotations

"""Plan export and loading
-------------------------
Dumps plans as JSON or YAML using the camelCase export keys, and loads them
back (JSON parsed as JSON, anything else as multi-document YAML).
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from workflow_agent.core.models import WorkflowPlan


class PlanLoadError(ValueError):
    pass


FORMATS = ("json", "yaml")


def plan_to_dict(plan: WorkflowPlan) -> dict[str, Any]:
    """Export mapping; an absent automationHint is left out rather than written as null."""
    return plan.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_plan(plan: WorkflowPlan, fmt: str = "json") -> str:
    data = plan_to_dict(plan)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    raise ValueError(f"Unknown export format '{fmt}'. Must be one of: {', '.join(FORMATS)}")


def write_plan(plan: WorkflowPlan, path: Path | str, fmt: str | None = None) -> Path:
    """Write `plan` to `path`; the format defaults to the file suffix (json unless .yaml/.yml)."""
    out = Path(path)
    if fmt is None:
        fmt = "yaml" if out.suffix.lower() in (".yaml", ".yml") else "json"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dump_plan(plan, fmt) + ("\n" if fmt == "json" else ""), encoding="utf-8")
    return out


def _validate(data: Any, source: str) -> WorkflowPlan:
    if not isinstance(data, dict):
        raise PlanLoadError(f"{source} must define a mapping/object at the top level.")
    try:
        return WorkflowPlan.model_validate(data)
    except ValidationError as ve:
        lines = [f"Invalid plan {source}:"]
        for e in ve.errors():
            loc = ".".join(str(p) for p in e.get("loc", []))
            msg = e.get("msg", "invalid value")
            lines.append(f"  - {loc}: {msg}")
        raise PlanLoadError("\n".join(lines)) from ve


def _load_documents(text: str, source: str) -> list[Any]:
    # JSON first: the YAML reader rejects control characters JSON allows
    try:
        return [json.loads(text)]
    except json.JSONDecodeError:
        pass
    try:
        return list(yaml.safe_load_all(text))
    except yaml.YAMLError as ye:
        raise PlanLoadError(f"Parse error in {source}: {ye}") from ye


def parse_plans(text: str, source: str = "<text>") -> list[WorkflowPlan]:
    docs = _load_documents(text, source)

    plans: list[WorkflowPlan] = []
    for idx, data in enumerate(docs, start=1):
        if data is None:
            continue
        label = source if len(docs) == 1 else f"{source} (document {idx})"
        plans.append(_validate(data, label))
    if not plans:
        raise PlanLoadError(f"No plan documents found in {source}")
    return plans


def parse_plan(text: str, source: str = "<text>") -> WorkflowPlan:
    plans = parse_plans(text, source)
    if len(plans) > 1:
        raise PlanLoadError(f"{source} holds {len(plans)} plans; expected one")
    return plans[0]


def load_plans_file(path: Path | str) -> list[WorkflowPlan]:
    """Load one or more plans from a JSON or (multi-document) YAML file."""
    plan_path = Path(path)
    if not plan_path.exists():
        raise FileNotFoundError(f"Plan file not found: {plan_path}")
    return parse_plans(plan_path.read_text(encoding="utf-8"), f"'{plan_path}'")


def load_plan(path: Path | str) -> WorkflowPlan:
    plan_path = Path(path)
    if not plan_path.exists():
        raise FileNotFoundError(f"Plan file not found: {plan_path}")
    return parse_plan(plan_path.read_text(encoding="utf-8"), f"'{plan_path}'")


__all__ = [
    "PlanLoadError",
    "FORMATS",
    "plan_to_dict",
    "dump_plan",
    "write_plan",
    "parse_plan",
    "parse_plans",
    "load_plan",
    "load_plans_file",
]

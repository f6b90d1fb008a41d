# workflow_agent/utils/config.py
from __future__ import annotations

import functools
import re
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workflow_agent.core.models import AutomationLevel, Complexity, WorkflowAgentOptions


# ---------- Enums ----------

class ExportFormat(str, Enum):
    json = "json"
    yaml = "yaml"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_LIST_SPLIT = re.compile(r"[,;\n]")


def split_list_field(value: Optional[str]) -> list[str]:
    """Split a comma/semicolon/newline separated field, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in _LIST_SPLIT.split(value) if part.strip()]


# ---------- Settings ----------

class Settings(BaseSettings):
    """
    Central configuration for the workflow agent.

    Values load in this order of precedence:
      1) Environment variables
      2) .env file in project root
      3) Defaults below
    """

    # ---- Generator defaults ----
    DEFAULT_AUTOMATION_LEVEL: AutomationLevel = Field(default=AutomationLevel.co_pilot)
    DEFAULT_COMPLEXITY: Complexity = Field(default=Complexity.balanced)
    DEFAULT_OWNERS: str = Field(
        default="Automation Orchestrator, Domain Specialist, QA Reviewer",
        description="Fallback owners, cycled when no domain owner matches",
    )
    DEFAULT_SYSTEMS: str = Field(default="", description="Systems already in place, e.g. 'Slack, Notion'")

    # ---- Output ----
    EXPORT_FORMAT: ExportFormat = Field(default=ExportFormat.json)
    SIMULATED_DELAY_MS: int = Field(default=0, ge=0, description="Cosmetic pause before generation (ms)")

    # ---- Logging ----
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_TO_FILE: bool = Field(default=False)
    LOG_FILE: Path = Field(default=Path("./workflow-agent.log"))
    COLORIZED_OUTPUT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_FILE", mode="after")
    @classmethod
    def _absolutize(cls, v: Path):
        return v if v.is_absolute() else Path.cwd() / v

    @field_validator("DEFAULT_AUTOMATION_LEVEL", "DEFAULT_COMPLEXITY", "EXPORT_FORMAT", "LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_choice(cls, v):
        return v.strip() if isinstance(v, str) else v

    def ensure_dirs(self) -> None:
        """Create the log directory when file logging is on (idempotent)."""
        if self.LOG_TO_FILE:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @property
    def owners(self) -> list[str]:
        return split_list_field(self.DEFAULT_OWNERS)

    @property
    def systems(self) -> list[str]:
        return split_list_field(self.DEFAULT_SYSTEMS)

    def default_options(self) -> WorkflowAgentOptions:
        """Generator defaults as configured; an empty owner list keeps the built-in trio."""
        base = WorkflowAgentOptions()
        return WorkflowAgentOptions(
            automation_level=self.DEFAULT_AUTOMATION_LEVEL,
            complexity=self.DEFAULT_COMPLEXITY,
            preferred_owners=self.owners or base.preferred_owners,
            existing_systems=self.systems,
        )


# --------- Public accessor (memoized) ---------

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings once per process.
    Call `get_settings.cache_clear()` if you need to reload after changing env.
    """
    s = Settings()
    s.ensure_dirs()
    return s

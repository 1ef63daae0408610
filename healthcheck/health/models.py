"""Pydantic models for integration policy and the health response."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Status(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class OverallStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DOWN = "down"


# ── Policy ───────────────────────────────────────────────────────────────────

NEVER = -1  # threshold sentinel: this rule never fires


class IntegrationConfig(BaseModel):
    """Sliding-window error policy for one integration.

    Thresholds count errors inside the trailing window. ``0`` means any
    error in the window triggers the state, ``-1`` means never.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    error_per_interval_to_fail_state: int = Field(5, alias="errorPerIntervalToFailState")
    error_per_interval_to_warn_state: int = Field(0, alias="errorPerIntervalToWarnState")
    error_minute_interval: int = Field(5, alias="errorMinuteInterval")

    @field_validator("error_per_interval_to_fail_state", "error_per_interval_to_warn_state")
    @classmethod
    def _check_threshold(cls, v: int) -> int:
        if v < NEVER:
            raise ValueError(f"threshold must be >= {NEVER}, got {v}")
        return v

    @field_validator("error_minute_interval")
    @classmethod
    def _check_interval(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"errorMinuteInterval must be >= 1, got {v}")
        return v

    @property
    def window_seconds(self) -> int:
        return self.error_minute_interval * 60


# ── Response ─────────────────────────────────────────────────────────────────


class IntegrationReport(BaseModel):
    name: str
    kind: str
    optional: bool
    status: Status
    errors_length: int


class HealthResponse(BaseModel):
    status: OverallStatus
    integrations: list[IntegrationReport]

"""Integration registry — records dependency errors and derives health status.

Callers register each outbound dependency (database, external API, ...) once
at startup and report an error every time an operation against it fails.
On demand the registry evaluates every integration against its
sliding-window policy and aggregates the verdicts into one process status:

  any required integration failing  -> down
  any required integration warning  -> unhealthy
  otherwise                         -> healthy

Optional integrations are reported with their own status but never affect
the aggregate.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .models import (
    NEVER,
    HealthResponse,
    IntegrationConfig,
    IntegrationReport,
    OverallStatus,
    Status,
)

logger = logging.getLogger(__name__)


@dataclass
class Integration:
    """A tracked dependency. Owned by the registry, never handed out."""

    name: str
    kind: str
    config: IntegrationConfig
    optional: bool = False
    status: Status = Status.PASS
    errors: deque[float] = field(default_factory=deque)  # timestamps, oldest first


# ── Policy ───────────────────────────────────────────────────────────────────


def prune_errors(errors: deque[float], now: float, window_seconds: float) -> None:
    """Drop timestamps that fall outside the trailing window (in place)."""
    window_start = now - window_seconds
    while errors and errors[0] <= window_start:
        errors.popleft()


def count_recent(errors: Iterable[float], now: float, window_seconds: float) -> int:
    """Count timestamps strictly newer than ``now - window_seconds``."""
    window_start = now - window_seconds
    return sum(1 for ts in errors if ts > window_start)


def _threshold_reached(count: int, threshold: int) -> bool:
    if threshold == NEVER:
        return False
    return count >= threshold or (threshold == 0 and count > 0)


def evaluate_status(config: IntegrationConfig, errors: Iterable[float], now: float) -> Status:
    """Apply the windowed error policy to one integration's history.

    Fail is checked before warn, so a history that satisfies both thresholds
    resolves to fail. No error inside the window is always a pass.
    """
    recent = count_recent(errors, now, config.window_seconds)
    if recent == 0:
        return Status.PASS
    if _threshold_reached(recent, config.error_per_interval_to_fail_state):
        return Status.FAIL
    if _threshold_reached(recent, config.error_per_interval_to_warn_state):
        return Status.WARN
    return Status.PASS


def aggregate_status(integrations: Iterable[Integration]) -> OverallStatus:
    """Fold required integrations' statuses into the process status."""
    required = [i.status for i in integrations if not i.optional]
    if Status.FAIL in required:
        return OverallStatus.DOWN
    if Status.WARN in required:
        return OverallStatus.UNHEALTHY
    return OverallStatus.HEALTHY


# ── Registry ─────────────────────────────────────────────────────────────────


class IntegrationRegistry:
    """In-memory registry of integrations and their recent errors.

    Construct one per process and pass it to whatever reports errors or
    serves the health endpoint. Nothing on the reporting path raises: an
    error reported for an unknown name is ignored.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._integrations: dict[str, Integration] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._integrations

    def __len__(self) -> int:
        return len(self._integrations)

    def names(self) -> list[str]:
        return list(self._integrations)

    def register_integration(
        self,
        name: str,
        kind: str,
        config: IntegrationConfig | Mapping[str, Any] | None = None,
        optional: bool = False,
    ) -> None:
        """Register (or replace) an integration.

        ``config`` is a partial override of the default policy; missing keys
        keep their defaults. Re-registering a name starts it over with an
        empty history and status ``pass``.

        Raises ``ValueError`` for an empty name or an invalid policy.
        """
        if not name or not name.strip():
            raise ValueError("Integration 'name' is required")
        kind = str(kind)
        optional = bool(optional)

        if not isinstance(config, IntegrationConfig):
            config = IntegrationConfig.model_validate(dict(config or {}))

        replaced = name in self._integrations
        self._integrations[name] = Integration(
            name=name, kind=kind, config=config, optional=optional,
        )
        logger.info(
            "%s integration '%s' (kind=%s optional=%s fail=%d warn=%d window=%dm)",
            "Re-registered" if replaced else "Registered",
            name, kind, optional,
            config.error_per_interval_to_fail_state,
            config.error_per_interval_to_warn_state,
            config.error_minute_interval,
        )

    def report_error(self, name: str) -> None:
        """Record one failed operation against ``name`` at the current time."""
        integration = self._integrations.get(name)
        if integration is None:
            logger.debug("Ignoring error report for unknown integration '%s'", name)
            return

        now = self._clock()
        integration.errors.append(now)
        prune_errors(integration.errors, now, integration.config.window_seconds)
        logger.debug(
            "Error reported for '%s' (%d in window)", name, len(integration.errors),
        )

    def reset_all_errors(self) -> None:
        """Clear every integration's error history. Status updates on next check."""
        for integration in self._integrations.values():
            integration.errors.clear()
        logger.info("Cleared error history for %d integrations", len(self._integrations))

    async def get_health_response(self) -> HealthResponse:
        """Re-evaluate all integrations and build the health snapshot."""
        integrations = list(self._integrations.values())
        now = self._clock()

        counts = await asyncio.gather(
            *(self._check_integration(i, now) for i in integrations)
        )

        return HealthResponse(
            status=aggregate_status(integrations),
            integrations=[
                IntegrationReport(
                    name=i.name,
                    kind=i.kind,
                    optional=i.optional,
                    status=i.status,
                    errors_length=count,
                )
                for i, count in zip(integrations, counts)
            ],
        )

    async def _check_integration(self, integration: Integration, now: float) -> int:
        """Evaluate one integration, update its status, return its window count."""
        window = integration.config.window_seconds
        prune_errors(integration.errors, now, window)

        previous = integration.status
        integration.status = evaluate_status(integration.config, integration.errors, now)

        if integration.status != previous:
            if integration.status == Status.PASS:
                logger.info(
                    "Integration '%s' recovered: %s -> pass",
                    integration.name, previous.value,
                )
            else:
                logger.warning(
                    "Integration '%s' status changed: %s -> %s",
                    integration.name, previous.value, integration.status.value,
                )

        return count_recent(integration.errors, now, window)

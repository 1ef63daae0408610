"""Declarative integrations — loads integrations.yaml into a registry.

Example:

    integrations:
      - name: bookstore
        kind: database
      - name: pokemon
        kind: api
        optional: true
        config:
          errorPerIntervalToFailState: 1
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .engine import IntegrationRegistry
from .models import IntegrationConfig

logger = logging.getLogger(__name__)

INTEGRATIONS_PATH = Path(__file__).parent.parent.parent / "integrations.yaml"


@dataclass
class IntegrationDef:
    """One integration entry from the YAML file."""

    name: str
    kind: str
    optional: bool = False
    config: IntegrationConfig = field(default_factory=IntegrationConfig)


def load_integration_defs(path: Path | None = None) -> list[IntegrationDef]:
    """Parse integrations.yaml. Malformed entries are skipped."""
    path = path or INTEGRATIONS_PATH
    if not path.exists():
        logger.warning("Integrations file not found: %s", path)
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        logger.error("Failed to parse %s: %s", path, e)
        return []

    if not isinstance(raw, dict):
        logger.error("Expected a mapping at the top of %s, got %s", path, type(raw).__name__)
        return []

    defs: list[IntegrationDef] = []
    for entry in raw.get("integrations", []) or []:
        try:
            defs.append(_parse_def(entry))
        except Exception as e:
            logger.warning("Skipping malformed integration entry: %s", e)

    logger.info("Loaded %d integrations from %s", len(defs), path)
    return defs


def register_from_file(registry: IntegrationRegistry, path: Path | None = None) -> int:
    """Register every integration declared in the file. Returns the count."""
    defs = load_integration_defs(path)
    for d in defs:
        registry.register_integration(d.name, d.kind, d.config, optional=d.optional)
    return len(defs)


def _parse_def(raw: dict[str, Any]) -> IntegrationDef:
    name = str(raw.get("name", "")).strip()
    if not name:
        raise ValueError("integration 'name' is required")
    return IntegrationDef(
        name=name,
        kind=str(raw.get("kind", "unknown")),
        optional=bool(raw.get("optional", False)),
        config=IntegrationConfig.model_validate(raw.get("config") or {}),
    )

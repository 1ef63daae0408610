"""Health subsystem — integration registry and its YAML loader."""

from .engine import Integration, IntegrationRegistry, aggregate_status, evaluate_status
from .loader import IntegrationDef, load_integration_defs, register_from_file
from .models import HealthResponse, IntegrationConfig, IntegrationReport, OverallStatus, Status

"""
Health Layer - Dependency Probes and Composite Status
"""

from workflow_builder.health.aggregator import HealthAggregator
from workflow_builder.health.models import (
    ConnectionStatus,
    OverallStatus,
    ServiceHealth,
    SystemStatus,
)
from workflow_builder.health.probes import HealthProbes, ServiceHealthProbes

__all__ = [
    "ConnectionStatus",
    "HealthAggregator",
    "HealthProbes",
    "OverallStatus",
    "ServiceHealth",
    "ServiceHealthProbes",
    "SystemStatus",
]

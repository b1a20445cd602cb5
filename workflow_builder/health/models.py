"""
Health Layer - Status Models

Point-in-time reachability of the orchestrator API, the workflow store and
the LLM provider, and the tiered status derived from them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

ORCHESTRATOR = "orchestrator"
STORE = "store"
LLM = "llm"


class ConnectionStatus(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class OverallStatus(str, Enum):
    """
    HEALTHY: Orchestrator, store and LLM provider all reachable.
    DEGRADED: Orchestrator reachable, store or LLM provider not.
    UNHEALTHY: Orchestrator unreachable.
    """
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ServiceHealth(BaseModel):
    name: str
    status: ConnectionStatus
    message: Optional[str] = None
    url: Optional[str] = None

    @property
    def connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED

    @classmethod
    def up(cls, name: str, message: Optional[str] = None, url: Optional[str] = None) -> "ServiceHealth":
        return cls(name=name, status=ConnectionStatus.CONNECTED, message=message, url=url)

    @classmethod
    def down(cls, name: str, message: Optional[str] = None, url: Optional[str] = None) -> "ServiceHealth":
        return cls(name=name, status=ConnectionStatus.DISCONNECTED, message=message, url=url)


class SystemStatus(BaseModel):
    status: OverallStatus
    services: Dict[str, ServiceHealth] = Field(default_factory=dict)
    checked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

"""
Health Aggregator - Composite System Status

Combines the three probes into one tiered status:

| orchestrator | store        | llm          | overall   |
|--------------|--------------|--------------|-----------|
| unreachable  | (not probed) | (not probed) | unhealthy |
| reachable    | connected    | connected    | healthy   |
| reachable    | disconnected | either       | degraded  |
| reachable    | either       | disconnected | degraded  |

The store and the LLM provider are reached through the orchestrator, so the
orchestrator probe gates the other two. Once it passes, the store and LLM
probes run concurrently, each under its own timeout. A probe that fails,
raises or times out is reported as disconnected; check() itself never raises.

The aggregator keeps no state between calls and never retries: every
check() is a fresh snapshot.
"""

import asyncio
import logging
from typing import Awaitable, Optional

from .models import (
    LLM,
    ORCHESTRATOR,
    STORE,
    OverallStatus,
    ServiceHealth,
    SystemStatus,
)
from .probes import HealthProbes

logger = logging.getLogger(__name__)

NOT_CHECKED = "Not checked: orchestrator unreachable"


class HealthAggregator:
    def __init__(self, probes: HealthProbes, probe_timeout: float = 5.0):
        self.probes = probes
        self.probe_timeout = probe_timeout

    async def check(self) -> SystemStatus:
        orchestrator = await self._check_orchestrator()

        if not orchestrator.connected:
            return SystemStatus(
                status=OverallStatus.UNHEALTHY,
                services={
                    ORCHESTRATOR: orchestrator,
                    STORE: ServiceHealth.down(STORE, message=NOT_CHECKED),
                    LLM: ServiceHealth.down(LLM, message=NOT_CHECKED),
                },
            )

        store, llm = await asyncio.gather(
            self._settle(STORE, self.probes.ping_store()),
            self._settle(LLM, self.probes.ping_llm_provider()),
        )

        overall = (
            OverallStatus.HEALTHY
            if store.connected and llm.connected
            else OverallStatus.DEGRADED
        )
        return SystemStatus(
            status=overall,
            services={ORCHESTRATOR: orchestrator, STORE: store, LLM: llm},
        )

    async def _check_orchestrator(self) -> ServiceHealth:
        url = self.probes.orchestrator_url
        try:
            reachable = await asyncio.wait_for(
                self.probes.ping_orchestrator(), timeout=self.probe_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Orchestrator probe timed out after {self.probe_timeout}s")
            return ServiceHealth.down(ORCHESTRATOR, message="Timed out", url=url)
        except Exception as e:
            logger.warning(f"Orchestrator probe failed: {e}")
            return ServiceHealth.down(ORCHESTRATOR, message=str(e), url=url)

        if not reachable:
            return ServiceHealth.down(ORCHESTRATOR, message="Unreachable", url=url)
        return ServiceHealth.up(ORCHESTRATOR, url=url)

    async def _settle(
        self, name: str, probe: Awaitable[ServiceHealth]
    ) -> ServiceHealth:
        """Awaits one probe and folds every failure mode into a ServiceHealth."""
        try:
            result: Optional[ServiceHealth] = await asyncio.wait_for(
                probe, timeout=self.probe_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"{name} probe timed out after {self.probe_timeout}s")
            return ServiceHealth.down(name, message="Timed out")
        except Exception as e:
            # ConnectivityError is the expected case; anything else is still a
            # failed probe, not a failed status check.
            logger.warning(f"{name} probe failed: {e}")
            return ServiceHealth.down(name, message=str(e))

        if result is None:
            return ServiceHealth.down(name, message="Probe returned no result")
        return result

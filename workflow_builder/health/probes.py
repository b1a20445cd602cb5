"""
Health Probes.

Each probe checks one dependency and nothing else. Probes do not apply
timeouts or decide the overall status; that is the HealthAggregator's job.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import OpenAIError
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import ConnectivityError
from ..llm.interface import LLMProvider
from .models import LLM, STORE, ServiceHealth

logger = logging.getLogger(__name__)


class HealthProbes(ABC):
    """
    The three reachability checks behind the system status.
    """

    @abstractmethod
    async def ping_orchestrator(self) -> bool:
        """True if the orchestrator API answers."""
        pass

    @abstractmethod
    async def ping_store(self) -> ServiceHealth:
        """Health of the workflow store. May raise ConnectivityError."""
        pass

    @abstractmethod
    async def ping_llm_provider(self) -> ServiceHealth:
        """Health of the LLM provider. May raise ConnectivityError."""
        pass

    @property
    def orchestrator_url(self) -> Optional[str]:
        return None


class ServiceHealthProbes(HealthProbes):
    """
    Probes the real dependencies:
    - orchestrator: GET {orchestrator_url}/health over HTTP
    - store: SELECT 1 on the SQL engine
    - llm: LLMProvider.check_connection()
    """

    def __init__(
        self,
        orchestrator_url: str,
        engine: Engine,
        llm_provider: LLMProvider,
        http_timeout: float = 5.0,
    ):
        self._orchestrator_url = orchestrator_url.rstrip("/")
        self.engine = engine
        self.llm_provider = llm_provider
        self.http_timeout = http_timeout

    @property
    def orchestrator_url(self) -> str:
        return self._orchestrator_url

    async def ping_orchestrator(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.http_timeout) as client:
                resp = await client.get(f"{self._orchestrator_url}/health")
        except httpx.HTTPError as e:
            logger.warning(f"Orchestrator unreachable at {self._orchestrator_url}: {e}")
            return False

        # Any answer below 500 means the process is up and serving
        return resp.status_code < 500

    async def ping_store(self) -> ServiceHealth:
        try:
            await asyncio.to_thread(self._select_one)
        except SQLAlchemyError as e:
            raise ConnectivityError(STORE, str(e)) from e
        return ServiceHealth.up(STORE, message="Database connection OK")

    def _select_one(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    async def ping_llm_provider(self) -> ServiceHealth:
        try:
            await self.llm_provider.check_connection()
        except OpenAIError as e:
            raise ConnectivityError(LLM, str(e)) from e
        return ServiceHealth.up(LLM, message="LLM provider reachable")

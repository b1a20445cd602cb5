"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repository, LLM Adapter,
   Executor, Health Aggregator).
2. Wiring them together (e.g., injecting the Transformer into the Executor).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Tests replace get_workflow_service through app.dependency_overrides.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..llm.interface import LLMProvider
from ..llm.adapters.openai_adapter import OpenAIAdapter
from ..repositories.workflow import WorkflowRepository, PostgresWorkflowRepository
from ..execution.transformer import StepTransformer, LLMStepTransformer
from ..execution.executor import WorkflowExecutor
from ..health.probes import HealthProbes, ServiceHealthProbes
from ..health.aggregator import HealthAggregator
from ..services.workflows import WorkflowService

from ..infrastructure.database.connection import engine

# LLM Provider (Singleton)
@lru_cache()
def get_llm_provider() -> LLMProvider:
    return OpenAIAdapter(
        api_key=settings.OPENAI_API_KEY,
        model_name=settings.OPENAI_MODEL
    )

# Workflow Repository (Singleton)
@lru_cache()
def get_workflow_repository() -> WorkflowRepository:
    # return InMemoryWorkflowRepository()
    return PostgresWorkflowRepository(engine)

# Step Transformer (Singleton)
@lru_cache()
def get_step_transformer(
    llm: LLMProvider = Depends(get_llm_provider),
) -> StepTransformer:
    return LLMStepTransformer(llm, temperature=settings.LLM_TEMPERATURE)

# The Executor (Singleton; keeps no per-run state)
@lru_cache()
def get_workflow_executor(
    transformer: StepTransformer = Depends(get_step_transformer),
) -> WorkflowExecutor:
    return WorkflowExecutor(transformer, step_timeout=settings.STEP_TIMEOUT_SECONDS)

# Health Probes (Singleton)
@lru_cache()
def get_health_probes(
    llm: LLMProvider = Depends(get_llm_provider),
) -> HealthProbes:
    return ServiceHealthProbes(
        orchestrator_url=settings.ORCHESTRATOR_URL,
        engine=engine,
        llm_provider=llm,
        http_timeout=settings.PROBE_TIMEOUT_SECONDS,
    )

# Health Aggregator (Singleton; every check() is a fresh snapshot)
@lru_cache()
def get_health_aggregator(
    probes: HealthProbes = Depends(get_health_probes),
) -> HealthAggregator:
    return HealthAggregator(probes, probe_timeout=settings.PROBE_TIMEOUT_SECONDS)

# The Workflow Service (Singleton Service)
@lru_cache()
def get_workflow_service(
    repo: WorkflowRepository = Depends(get_workflow_repository),
    executor: WorkflowExecutor = Depends(get_workflow_executor),
    health: HealthAggregator = Depends(get_health_aggregator),
) -> WorkflowService:
    """
    Injects all necessary components into the WorkflowService.
    """
    return WorkflowService(
        workflow_repository=repo,
        executor=executor,
        health=health,
    )

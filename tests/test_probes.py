import httpx
import openai
import pytest
from sqlmodel import create_engine

from workflow_builder.exceptions import ConnectivityError
from workflow_builder.health.models import ConnectionStatus
from workflow_builder.health.probes import ServiceHealthProbes
from workflow_builder.llm.interface import LLMProvider


class StubLLM(LLMProvider):
    def __init__(self, error=None):
        self.error = error

    async def generate_structured_output(self, messages, response_model, temperature=0.0):
        raise NotImplementedError

    async def check_connection(self):
        if self.error:
            raise self.error


def make_probes(engine, llm=None, url="http://127.0.0.1:1"):
    return ServiceHealthProbes(
        orchestrator_url=url,
        engine=engine,
        llm_provider=llm or StubLLM(),
        http_timeout=1.0,
    )


@pytest.mark.asyncio
async def test_store_probe_connected(sqlite_engine):
    health = await make_probes(sqlite_engine).ping_store()

    assert health.name == "store"
    assert health.status == ConnectionStatus.CONNECTED


@pytest.mark.asyncio
async def test_store_probe_raises_connectivity_error(tmp_path):
    broken = create_engine(f"sqlite:///{tmp_path}/missing/dir/db.sqlite")

    with pytest.raises(ConnectivityError) as exc_info:
        await make_probes(broken).ping_store()

    assert exc_info.value.service == "store"


@pytest.mark.asyncio
async def test_llm_probe_connected(sqlite_engine):
    health = await make_probes(sqlite_engine).ping_llm_provider()
    assert health.connected


@pytest.mark.asyncio
async def test_llm_probe_wraps_openai_errors(sqlite_engine):
    error = openai.APIConnectionError(request=httpx.Request("GET", "https://api.openai.com/v1/models"))
    probes = make_probes(sqlite_engine, llm=StubLLM(error=error))

    with pytest.raises(ConnectivityError) as exc_info:
        await probes.ping_llm_provider()

    assert exc_info.value.service == "llm"


@pytest.mark.asyncio
async def test_orchestrator_probe_refused_connection_is_false(sqlite_engine):
    # Nothing listens on port 1
    assert await make_probes(sqlite_engine).ping_orchestrator() is False


def test_orchestrator_url_is_normalized(sqlite_engine):
    probes = make_probes(sqlite_engine, url="http://localhost:8000/")
    assert probes.orchestrator_url == "http://localhost:8000"

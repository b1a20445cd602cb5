import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings() is instantiated at import time; these must be set first.
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import create_engine  # noqa: E402

from workflow_builder.domain.models import Step, Workflow  # noqa: E402
from workflow_builder.exceptions import TransformError  # noqa: E402
from workflow_builder.execution.transformer import StepTransformer  # noqa: E402
from workflow_builder.infrastructure.database.connection import init_db  # noqa: E402


class RecordingTransformer(StepTransformer):
    """
    Deterministic transformer: returns "<kind>(<text>)" and records every call.
    Kinds listed in `fail_on` raise TransformError.
    """

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    async def transform(self, kind, text):
        self.calls.append((kind, text))
        if kind in self.fail_on:
            raise TransformError("model unavailable", kind=kind.value)
        return f"{kind.value}({text})"


@pytest.fixture
def transformer():
    return RecordingTransformer()


@pytest.fixture
def failing_transformer():
    def _make(*kinds):
        return RecordingTransformer(fail_on=kinds)
    return _make


@pytest.fixture
def make_workflow():
    def _make(*kinds, name="Test Workflow", workflow_id="wf-1"):
        return Workflow(
            id=workflow_id,
            name=name,
            steps=tuple(Step(kind) for kind in kinds),
        )
    return _make


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()

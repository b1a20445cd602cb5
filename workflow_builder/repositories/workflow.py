import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from dataclasses import replace
from typing import Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from ..domain.models import Step, StepKind, Workflow
from ..exceptions import NotFoundError
from ..infrastructure.database.tables import WorkflowDBModel
from ..infrastructure.database.connection import engine as default_engine


# The Interface
class WorkflowRepository(ABC):
    """
    Defines how the application accesses Workflow definitions.
    This allows us change how data is accessed (Memory -> SQL -> API) later
    without changing the WorkflowService or the executor.
    """

    @abstractmethod
    def list(self) -> List[Workflow]:
        """Returns all workflows, newest first."""
        pass

    @abstractmethod
    def create(self, workflow: Workflow) -> Workflow:
        """
        Stores a validated workflow.
        Returns a copy carrying the assigned id and created_at.
        """
        pass

    @abstractmethod
    def get(self, workflow_id: str) -> Workflow:
        """
        Retrieves a workflow by ID.
        Raises NotFoundError if not found.
        """
        pass

    @abstractmethod
    def delete(self, workflow_id: str) -> None:
        """
        Deletes a workflow by ID.
        Raises NotFoundError if not found.
        """
        pass


class InMemoryWorkflowRepository(WorkflowRepository):
    """
    Uses in-memory dictionary for workflow storage for testing/dev purposes.
    """

    def __init__(self):
        self._store: Dict[str, Workflow] = {}

    def list(self) -> List[Workflow]:
        # dicts keep insertion order, so reversing gives newest first
        return list(reversed(self._store.values()))

    def create(self, workflow: Workflow) -> Workflow:
        stored = replace(
            workflow,
            id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
        )
        self._store[stored.id] = stored
        return stored

    def get(self, workflow_id: str) -> Workflow:
        if workflow_id not in self._store:
            raise NotFoundError(workflow_id)
        return self._store[workflow_id]

    def delete(self, workflow_id: str) -> None:
        if workflow_id not in self._store:
            raise NotFoundError(workflow_id)
        del self._store[workflow_id]


class PostgresWorkflowRepository(WorkflowRepository):
    """
    Reads from and writes to the 'workflows' table (steps stored as JSONB).
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or default_engine

    def list(self) -> List[Workflow]:
        with Session(self.engine) as db:
            statement = select(WorkflowDBModel).order_by(WorkflowDBModel.created_at.desc())
            return [self._to_domain(row) for row in db.exec(statement).all()]

    def create(self, workflow: Workflow) -> Workflow:
        db_model = WorkflowDBModel(
            name=workflow.name,
            description=workflow.description,
            steps=[kind.value for kind in workflow.kinds],
        )

        with Session(self.engine) as db:
            db.add(db_model)
            db.commit()
            db.refresh(db_model)
            return self._to_domain(db_model)

    def get(self, workflow_id: str) -> Workflow:
        with Session(self.engine) as db:
            result = db.get(WorkflowDBModel, workflow_id)

            if not result:
                raise NotFoundError(workflow_id)

            return self._to_domain(result)

    def delete(self, workflow_id: str) -> None:
        with Session(self.engine) as db:
            result = db.get(WorkflowDBModel, workflow_id)

            if not result:
                raise NotFoundError(workflow_id)

            db.delete(result)
            db.commit()

    @staticmethod
    def _to_domain(row: WorkflowDBModel) -> Workflow:
        # Deserialize JSONB -> domain dataclass
        return Workflow(
            id=row.workflow_id,
            name=row.name,
            description=row.description,
            steps=tuple(Step(kind=StepKind(value)) for value in row.steps),
            created_at=row.created_at,
        )

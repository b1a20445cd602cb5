"""
Database Table Definitions.

This module defines the SQL schema using SQLModel.
We use the 'DBModel' suffix to distinguish these persistence models
from the domain dataclasses (Workflow, Step).
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONVariant = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkflowDBModel(SQLModel, table=True):
    """
    Persistence model for Workflows.
    Maps 1-to-1 with the 'workflows' table in Postgres.
    """

    __tablename__ = "workflows"

    workflow_id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None

    # Ordered list of step kind values, e.g. ["clean-text", "summarize"].
    steps: List[str] = Field(sa_column=Column(JSONVariant, nullable=False))

    created_at: datetime = Field(default_factory=_utcnow, index=True)

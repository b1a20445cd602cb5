"""
Database Seeder.

Run this script to populate the database with the sample workflows
defined in data/sample_workflows.py.

Usage:
    python -m workflow_builder.scripts.db_seed_workflows

Workflows are matched by name: a sample whose name already exists in the
store is skipped, so running the script twice creates nothing new.
"""

from typing import List

from workflow_builder.data.sample_workflows import SAMPLE_WORKFLOWS
from workflow_builder.domain.models import Workflow
from workflow_builder.domain.validation import WorkflowValidator
from workflow_builder.infrastructure.database.connection import init_db
from workflow_builder.repositories.workflow import (
    PostgresWorkflowRepository,
    WorkflowRepository,
)


def seed_workflows(repository: WorkflowRepository) -> List[Workflow]:
    """Inserts missing sample workflows. Returns the ones created."""
    existing = {wf.name for wf in repository.list()}
    validator = WorkflowValidator()
    created = []

    print(f"Found {len(SAMPLE_WORKFLOWS)} workflows to seed.")

    for name, workflow in SAMPLE_WORKFLOWS.items():
        if name in existing:
            print(f"--> Skipping '{name}': already exists.")
            continue

        # Samples go through the same validation as API input
        validated = validator.validate(workflow.name, workflow.description, workflow.steps)
        created.append(repository.create(validated))
        print(f"--> Created '{name}'.")

    print("Workflows seeding complete.")
    return created


if __name__ == "__main__":
    print("Initializing Database Connection...")
    init_db()
    seed_workflows(PostgresWorkflowRepository())

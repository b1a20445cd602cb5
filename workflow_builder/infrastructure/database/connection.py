"""
Database Connection Manager.

This module handles the low-level details of connecting to the database.
It exposes the SQLModel engine which will be used by the Repositories
and by the store health probe.
"""

from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel
from ...config import settings

# Registers the table models on SQLModel.metadata
from . import tables  # noqa: F401

# echo=False in production to avoid leaking sensitive data in logs
# pool_pre_ping so a dropped connection surfaces as an error, not a hang
engine = create_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)


def init_db(bind: Optional[Engine] = None):
    """
    Idempotent initialization.
    Creates tables if they do not exist.
    Useful for local dev or simple deployments.
    """
    SQLModel.metadata.create_all(bind or engine)

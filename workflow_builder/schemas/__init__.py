"""
Schemas - Structured Output Models for LLM Responses

Defines Pydantic models used for structured LLM outputs, ensuring
predictable and parseable results from the step transformer.
"""

from workflow_builder.schemas.outputs import TransformOutput

__all__ = [
    "TransformOutput",
]

"""
Schemas - Structured Output Models for LLM Responses

This module defines Pydantic models used for structured LLM outputs.
These schemas enforce strict JSON formatting on LLM responses, so a step's
output can be handed to the next step without any free-text parsing.
"""
from pydantic import BaseModel, Field

class TransformOutput(BaseModel):
    """
    The strict JSON structure the LLM must generate for every step.
    """
    output: str = Field(
        ...,
        description="The transformed text only. No preamble, no commentary about the task."
    )

"""
Transformer - Single Step Text Transformation

A StepTransformer turns one text into another according to a StepKind.
The pipeline treats it as an opaque, possibly slow, possibly failing
external call. LLMStepTransformer is the production implementation: it
renders the kind's prompt template and asks the LLM for a structured
TransformOutput.
"""

import logging
from abc import ABC, abstractmethod

from ..config import settings
from ..domain.models import StepKind
from ..exceptions import TransformError
from ..llm.interface import LLMProvider
from ..schemas.outputs import TransformOutput
from .prompts import Template, render, render_step_instructions

logger = logging.getLogger(__name__)


class StepTransformer(ABC):
    @abstractmethod
    async def transform(self, kind: StepKind, text: str) -> str:
        """
        Applies the transformation named by `kind` to `text`.

        Raises:
            TransformError: the transformation could not be performed.
        """
        pass


class LLMStepTransformer(StepTransformer):
    # 1. DEPENDENCY INJECTION: We ask for the generic Provider
    def __init__(self, llm_provider: LLMProvider, temperature: float = settings.LLM_TEMPERATURE):
        self.llm = llm_provider
        self.temperature = temperature

    async def transform(self, kind: StepKind, text: str) -> str:
        messages = [
            {"role": "system", "content": render(Template.SYSTEM)},
            {"role": "user", "content": render_step_instructions(kind, text)},
        ]

        try:
            result = await self.llm.generate_structured_output(
                messages=messages,
                response_model=TransformOutput,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"LLM call failed for step '{kind.value}': {e}")
            raise TransformError(f"LLM call failed: {e}", kind=kind.value) from e

        output = result.output.strip()
        if not output:
            raise TransformError("LLM returned empty output", kind=kind.value)
        return output

from typing import List, Type, TypeVar
from openai import AsyncOpenAI
from pydantic import BaseModel

from ..interface import LLMProvider
from ...config import settings

T = TypeVar("T", bound=BaseModel)

class OpenAIAdapter(LLMProvider):
    def __init__(self, api_key: str, model_name: str = settings.OPENAI_MODEL):
        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def generate_structured_output(
        self,
        messages: List[dict],
        response_model: Type[T],
        temperature: float = 0.0
    ) -> T:
        completion = await self.client.beta.chat.completions.parse(
            model=self.model_name,
            messages=messages,
            response_format=response_model,
            temperature=temperature,
        )

        message = completion.choices[0].message
        if message.parsed is None:
            # The model refused or produced output that does not match the schema
            raise ValueError(message.refusal or "LLM returned no parsable output")
        return message.parsed

    async def check_connection(self) -> None:
        # Retrieving the configured model checks the key and the model name in one call
        await self.client.models.retrieve(self.model_name)

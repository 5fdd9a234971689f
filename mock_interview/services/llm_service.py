import logging
from typing import Optional, Protocol, Type, TypeVar

from openai import OpenAI
from pydantic import BaseModel

from mock_interview.core.config import settings

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class TextGenerator(Protocol):
    """Black-box text generation: one synchronous call, full result, no retries."""

    def generate_text(self, prompt: str, model: Optional[str] = None) -> str:
        ...

    def generate_structured(
        self,
        prompt: str,
        system: str,
        schema: Type[SchemaT],
        model: Optional[str] = None,
    ) -> SchemaT:
        ...


class OpenAIService:
    def __init__(self, client: Optional[OpenAI] = None):
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not settings.openai_api_key:
                raise RuntimeError("OPENAI_API_KEY is not configured. Set it in deployment environment variables.")
            self._client = OpenAI(api_key=settings.openai_api_key)
        return self._client

    def generate_text(self, prompt: str, model: Optional[str] = None) -> str:
        response = self.client.chat.completions.create(
            model=model or settings.openai_model,
            messages=[{"role": "user", "content": prompt}],
        )
        text = response.choices[0].message.content or ""
        logger.debug(f"Raw response from model: {text[:500]}")
        return text

    def generate_structured(
        self,
        prompt: str,
        system: str,
        schema: Type[SchemaT],
        model: Optional[str] = None,
    ) -> SchemaT:
        completion = self.client.chat.completions.parse(
            model=model or settings.openai_feedback_model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            response_format=schema,
        )
        message = completion.choices[0].message
        if message.parsed is None:
            raise ValueError(f"Model returned no {schema.__name__}: {message.refusal or 'empty response'}")
        return message.parsed


def get_text_generator() -> TextGenerator:
    return OpenAIService()

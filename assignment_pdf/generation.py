"""
Text-generation clients for drafting assignment answers.

Each provider client is constructed explicitly with its credentials and
passed to whoever needs it. FallbackGenerator tries providers in order.

License: MIT
"""

import logging
from typing import Any, List, Optional, Protocol, Sequence

import google.generativeai as genai
import openai
from google.api_core import exceptions as google_exceptions
from openai import OpenAI

from assignment_pdf.config import Settings
from assignment_pdf.errors import GenerationError
from assignment_pdf.models import GeneratedResponse

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful academic assistant. Provide detailed, well-structured "
    "responses with academic citations where relevant. Format your response "
    "in markdown for better readability."
)


class TextGenerator(Protocol):
    name: str

    def generate(self, prompt: str) -> str:
        ...


class OpenAIGenerator:
    """Chat-completions client."""
    name = "openai"

    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo",
                 temperature: float = 0.7, max_tokens: int = 2000, timeout: float = 60.0,
                 client: Optional[Any] = None):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = client or OpenAI(api_key=api_key, timeout=timeout)

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            raise GenerationError(f"openai returned HTTP {e.status_code}", self.name) from e
        except openai.OpenAIError as e:
            raise GenerationError(f"openai request failed: {e}", self.name) from e

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise GenerationError("No response from OpenAI", self.name)
        return text


class GeminiGenerator:
    """generateContent client."""
    name = "gemini"

    def __init__(self, api_key: str, model: str = "gemini-pro",
                 temperature: float = 0.7, max_tokens: int = 2000, timeout: float = 60.0,
                 client: Optional[Any] = None):
        self.model = model
        self.timeout = timeout
        if client is None:
            genai.configure(api_key=api_key)
            client = genai.GenerativeModel(
                model,
                generation_config={
                    "temperature": temperature,
                    "max_output_tokens": max_tokens,
                },
            )
        self.client = client

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.generate_content(
                f"{SYSTEM_PROMPT}\n\n{prompt}",
                request_options={"timeout": self.timeout},
            )
            # .text raises ValueError when the candidate was blocked or empty
            text = response.text
        except google_exceptions.GoogleAPICallError as e:
            raise GenerationError(f"gemini returned HTTP {e.code}", self.name) from e
        except (google_exceptions.GoogleAPIError, ValueError) as e:
            raise GenerationError(f"gemini request failed: {e}", self.name) from e

        if not text or not text.strip():
            raise GenerationError("No response from Gemini", self.name)
        return text


class FallbackGenerator:
    """Tries each generator in order and returns the first answer."""

    def __init__(self, generators: Sequence[TextGenerator]):
        if not generators:
            raise ValueError("FallbackGenerator needs at least one generator")
        self.generators = list(generators)

    def generate_response(self, prompt: str) -> GeneratedResponse:
        """
        Generate an answer, falling back to the next provider on failure.

        Raises:
            GenerationError: When every provider fails
        """
        failures: List[str] = []
        for generator in self.generators:
            try:
                text = generator.generate(prompt)
            except GenerationError as e:
                logger.warning(f"{generator.name} failed, trying next provider: {e}")
                failures.append(f"{generator.name}: {e}")
                continue
            logger.info(f"Generated {len(text)} characters with {generator.name}")
            return GeneratedResponse(provider=generator.name, prompt=prompt, text=text)

        raise GenerationError("All providers failed (" + "; ".join(failures) + ")")


def build_generator(settings: Settings) -> FallbackGenerator:
    """
    Wire the provider chain from configured API keys, OpenAI first.

    Raises:
        GenerationError: When no provider key is configured
    """
    generators: List[TextGenerator] = []
    if settings.openai_api_key:
        generators.append(OpenAIGenerator(
            settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.generation_timeout,
        ))
    if settings.gemini_api_key:
        generators.append(GeminiGenerator(
            settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.generation_timeout,
        ))
    if not generators:
        raise GenerationError("No text-generation provider is configured")
    return FallbackGenerator(generators)

import os
import logging
from typing import Optional
import openai
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class TextGenerationUnavailable(RuntimeError):
    """No API key configured; generation is disabled."""


class TextGenerationError(RuntimeError):
    """The upstream model call failed or returned nothing."""


class TextGenerator:
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.client = None
        if self.api_key:
            self.client = openai.OpenAI(
                api_key=self.api_key,
                timeout=float(os.getenv("OPENAI_TIMEOUT", "30")),
                max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
            )

        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.max_tokens = 1200
        self.temperature = 0.4

    @property
    def available(self) -> bool:
        return self.client is not None

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Sends a prompt to the model and returns the text of the first choice.
        Raises TextGenerationUnavailable when no client is configured and
        TextGenerationError when the call fails.
        """
        if not self.client:
            raise TextGenerationUnavailable("Text generation service is not configured")

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            logger.error(f"Text generation failed: {e}")
            raise TextGenerationError(str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise TextGenerationError("Empty response from model")
        return content

# Singleton instance
generator = TextGenerator()

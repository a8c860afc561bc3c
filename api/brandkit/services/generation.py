"""Brand kit generation pipeline.

`GenerationService.generate` runs one request/response cycle:

1. refuse to run without a provider credential
2. build the prompt from the brief
3. call the provider under the attempt policy (one attempt by default)
4. classify an empty completion
5. decode and check the completion text

Every failure leaves as exactly one `BrandKitException` subclass. The
diagnostic detail goes to the log; the exception's `public_message` is all
the client sees.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.config import Settings
from ..core.retry import RetryConfig, RetryManager
from ..core.structured_logging import LoggerFactory
from ..models.exceptions import (
    BrandKitException,
    ConfigurationError,
    EmptyResponseError,
    UnexpectedError,
)
from ..models.schemas import BrandBrief
from .openai_client import OpenAIChatClient
from .prompts import build_generation_prompt
from .response_validator import ResponseValidator, ValidationMode

logger = LoggerFactory.get_logger(__name__)


class GenerationService:
    """Orchestrates prompt building, the provider call and output validation.

    Args:
        api_key: Provider credential. When empty, `generate` fails before any
            network traffic.
        client: Object with an async ``complete(prompt) -> str`` method.
        validator: Converts completion text into the returned object.
        retry_config: Attempt policy applied around ``client.complete``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        client: Any,
        validator: Optional[ResponseValidator] = None,
        retry_config: Optional[RetryConfig] = None,
    ):
        self.api_key = api_key
        self.client = client
        self.validator = validator or ResponseValidator()
        self.retry = RetryManager(retry_config or RetryConfig.single_attempt())

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationService":
        return cls(
            api_key=settings.openai_api_key,
            client=OpenAIChatClient.from_settings(settings),
            validator=ResponseValidator(ValidationMode.parse(settings.brand_kit_validation)),
            retry_config=RetryConfig(
                max_attempts=settings.generation_max_attempts,
                initial_delay=settings.generation_backoff_ms / 1000.0,
            ),
        )

    async def generate(self, brief: BrandBrief) -> Dict[str, Any]:
        try:
            return await self._generate(brief)
        except BrandKitException as exc:
            logger.error(
                f"Brand kit generation failed: {exc.message}",
                error_type=type(exc).__name__,
                details=exc.details,
            )
            raise
        except Exception as exc:
            logger.exception("Unexpected error during brand kit generation", error_type=type(exc).__name__)
            raise UnexpectedError(message=str(exc)) from exc

    async def _generate(self, brief: BrandBrief) -> Dict[str, Any]:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not set")

        prompt = build_generation_prompt(brief)

        raw_content = await self.retry.execute_with_retry(
            self.client.complete,
            prompt,
            operation_name="openai.chat.completions",
        )

        if not raw_content:
            raise EmptyResponseError("Completion has no message content")

        kit = self.validator.validate(raw_content)
        logger.info(
            "Brand kit generated",
            validation_mode=self.validator.mode.value,
            color_count=len(kit["colors"]) if isinstance(kit.get("colors"), list) else 0,
        )
        return kit

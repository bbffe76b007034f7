"""Single-call GPT vision client for menu analysis."""

import logging
from typing import Any, Dict, List, Optional

from openai import APIStatusError, OpenAI, OpenAIError

from fodmap_menu.config import PipelineConfig
from fodmap_menu.errors import EmptyCompletion, TransportFailure
from fodmap_menu.openai_client import create_openai_client

logger = logging.getLogger(__name__)


class MenuVisionClient:
    """
    Sends a prepared vision request and returns the raw completion text.

    The OpenAI client is created lazily from the config unless one is
    injected (tests pass a fake exposing ``chat.completions.create``).
    """

    def __init__(self, config: PipelineConfig, client: Optional[OpenAI] = None):
        self.config = config
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            try:
                self._client = create_openai_client(self.config)
            except RuntimeError as e:
                logger.error("Cannot create OpenAI client: %s", e)
                raise TransportFailure(str(e)) from e
        return self._client

    def complete(self, messages: List[Dict[str, Any]]) -> str:
        logger.info(
            "Sending menu image to model=%s, max_tokens=%s",
            self.config.model,
            self.config.max_tokens,
        )

        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                max_tokens=self.config.max_tokens,
                temperature=0,
            )
        except APIStatusError as e:
            logger.error("OpenAI returned status %s: %s", e.status_code, e)
            raise TransportFailure(str(e), status_code=e.status_code) from e
        except OpenAIError as e:
            logger.error("OpenAI call failed: %s", e)
            raise TransportFailure(str(e)) from e

        if not response.choices:
            raise TransportFailure("OpenAI response has no choices")

        result_text = response.choices[0].message.content or ""
        logger.info("GPT response received, length: %s", len(result_text))

        if not result_text.strip():
            raise EmptyCompletion("Failed to get response from AI")
        return result_text

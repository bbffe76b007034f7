import logging

from openai import OpenAI

from fodmap_menu.config import PipelineConfig

logger = logging.getLogger(__name__)


def create_openai_client(config: PipelineConfig) -> OpenAI:
    if not config.api_key:
        raise RuntimeError("OPENAI_API_KEY is not set")
    logger.info(
        "Initializing OpenAI client (model=%s, timeout_s=%s)",
        config.model,
        config.timeout_s,
    )
    # Retries are left to the caller.
    return OpenAI(api_key=config.api_key, timeout=config.timeout_s, max_retries=0)

"""Menu analysis pipeline."""

import logging
import time
from typing import List, Optional

from fodmap_menu.config import PipelineConfig
from fodmap_menu.gpt_vision import MenuVisionClient
from fodmap_menu.prompts import build_menu_messages
from fodmap_menu.schema import DishAssessment, normalize_dishes
from fodmap_menu.utils import extract_json

logger = logging.getLogger(__name__)


class MenuAnalysisPipeline:
    """
    Menu photo URL -> list of DishAssessment.

    Steps: build request -> vision call -> extract JSON -> normalize.
    Errors from fodmap_menu.errors propagate unchanged; nothing is retried.
    """

    def __init__(
        self,
        config: PipelineConfig,
        vision_client: Optional[MenuVisionClient] = None,
    ):
        self.config = config
        self.vision_client = vision_client or MenuVisionClient(config)

    @classmethod
    def from_env(cls) -> "MenuAnalysisPipeline":
        return cls(PipelineConfig.from_env())

    def analyze(self, image_url: str) -> List[DishAssessment]:
        total_start = time.time()
        messages = build_menu_messages(image_url)

        logged_url = image_url if not image_url.startswith("data:") else image_url[:32] + "..."
        logger.info("[PIPELINE] Step 1: Starting vision call for image=%s", logged_url)
        vision_start = time.time()
        result_text = self.vision_client.complete(messages)
        vision_ms = round((time.time() - vision_start) * 1000, 2)
        logger.info("[PIPELINE] Step 1: Vision completed in %sms", vision_ms)

        parsed = extract_json(result_text)
        dishes = normalize_dishes(parsed)

        total_ms = round((time.time() - total_start) * 1000, 2)
        logger.info(
            "[PIPELINE] Step 2: Parsed %s dishes, total time: %sms",
            len(dishes),
            total_ms,
        )
        return dishes

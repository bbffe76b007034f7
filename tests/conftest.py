from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from fodmap_menu.config import PipelineConfig
from fodmap_menu.gpt_vision import MenuVisionClient
from fodmap_menu.services import MenuAnalysisPipeline


class FakeCompletions:
    """Stands in for ``client.chat.completions``."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None, choices: bool = True):
        self.content = content
        self.error = error
        self.choices = choices
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig(api_key="fake-key", model="gpt-4o-mini", max_tokens=2000, timeout_s=5.0)


@pytest.fixture
def make_pipeline(config):
    def _make(content: Optional[str] = None, error: Optional[Exception] = None):
        completions = FakeCompletions(content=content, error=error)
        client = MenuVisionClient(config, client=fake_openai(completions))
        return MenuAnalysisPipeline(config, vision_client=client), completions

    return _make

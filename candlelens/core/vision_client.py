# candlelens/core/vision_client.py
from typing import List, Optional, Protocol

from openai import OpenAI

from candlelens.core.exceptions import UpstreamServiceError
from candlelens.core.payload import to_data_url
from candlelens.core.prompts import CHART_ANALYST_PROMPT, USER_INSTRUCTION
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)


class ChartCompleter(Protocol):
    def complete_chart(self, image: bytes, mime_type: Optional[str] = None) -> str:
        ...


class OpenAIChartCompleter:
    """
    Vision completion through the OpenAI chat API.

    Walks the model chain in order and returns the first non-empty answer.
    """

    def __init__(
        self,
        api_key: Optional[str],
        models: List[str],
        max_tokens: int = 1000,
        timeout: float = 45.0,
        client: Optional[OpenAI] = None,
    ):
        if not models:
            raise ValueError("At least one model is required")
        self.models = list(models)
        self.max_tokens = max_tokens
        self._client = client
        if self._client is None and api_key:
            self._client = OpenAI(api_key=api_key, timeout=timeout)

    def _build_messages(self, image_url: str) -> list:
        return [
            {"role": "system", "content": CHART_ANALYST_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": USER_INSTRUCTION},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            },
        ]

    def complete_chart(self, image: bytes, mime_type: Optional[str] = None) -> str:
        if self._client is None:
            raise UpstreamServiceError("Vision provider API key not configured")

        messages = self._build_messages(to_data_url(image, mime_type))
        last_err = None
        answered = False

        for model_name in self.models:
            try:
                response = self._client.chat.completions.create(
                    model=model_name,
                    messages=messages,
                    max_tokens=self.max_tokens,
                )
            except Exception as e:
                last_err = e
                logger.warning(f"Vision model '{model_name}' failed: {e}")
                continue

            answered = True
            content = response.choices[0].message.content if response.choices else None
            text = (content or "").strip()
            if text:
                logger.info(f"Vision model '{model_name}' returned {len(text)} chars")
                return text
            logger.warning(f"Vision model '{model_name}' returned an empty analysis")

        if answered:
            return ""
        raise UpstreamServiceError(f"Vision analysis unavailable: {last_err}")

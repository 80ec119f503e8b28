"""Narrative itinerary generation backed by a LangChain chat model."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_xai import ChatXAI

from trip_planner.core.config import ApiSettings
from trip_planner.core.prompts import itinerary_prompt

logger = logging.getLogger(__name__)

SYNTHESIS_FAILED = "Could not generate itinerary"
STUB_ITINERARY = "Here is a detailed 3-day itinerary ..."


def build_narrative_model(settings: ApiSettings) -> BaseChatModel:
    """Return the chat model used for narration.

    Uses xAI when an API key is configured and a canned offline model otherwise.
    """

    if settings.xai_api_key:
        return ChatXAI(
            model=settings.xai_model,
            temperature=0,
            api_key=settings.xai_api_key,
        )
    logger.warning("XAI_API_KEY is not set; using the offline itinerary stub")
    return FakeListChatModel(responses=[STUB_ITINERARY])


def _message_text(content: Any) -> Optional[str]:
    """Flatten chat message content into plain text."""

    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks: List[str] = []
        for chunk in content:
            if isinstance(chunk, dict) and chunk.get("type") == "text":
                chunks.append(chunk.get("text", ""))
            elif isinstance(chunk, str):
                chunks.append(chunk)
        return "\n".join(chunks)
    return None


class ItinerarySynthesizer:
    """Turns the resolved activity options into a narrative multi-day plan."""

    def __init__(self, llm: BaseChatModel) -> None:
        self.llm = llm

    async def synthesize(
        self,
        city: str,
        weather: Optional[str],
        preferences: Sequence[str],
        activity_options: Sequence[str],
    ) -> str:
        """Return the itinerary text or ``SYNTHESIS_FAILED`` when the model gives nothing."""

        prompt = itinerary_prompt.format(
            city=city,
            weather=weather,
            preferences=", ".join(preferences),
            activity_options=", ".join(activity_options),
        )
        try:
            response = await self.llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Itinerary synthesis failed for {city}: {e}")
            return SYNTHESIS_FAILED

        logger.debug(f"Narrative model response: {response}")
        text = _message_text(getattr(response, "content", None))
        if not text or not text.strip():
            logger.error(f"Itinerary synthesis returned no content for {city}")
            return SYNTHESIS_FAILED
        return text

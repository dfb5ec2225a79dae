"""Generic LLM call helpers."""

import json
import logging
import re
from functools import lru_cache
from typing import Any

from anthropic import AsyncAnthropic, NOT_GIVEN
from dotenv import load_dotenv

from literature_screener.config import get_settings

load_dotenv()

logger = logging.getLogger(__name__)


@lru_cache
def get_client() -> AsyncAnthropic:
    api_key = get_settings().anthropic_api_key
    return AsyncAnthropic(api_key=api_key or None)


def parse_json_object(response: str) -> dict[str, Any] | None:
    # Outermost {...} span in the reply; models sometimes wrap it in prose
    match = re.search(r"\{.*\}", response, re.DOTALL)
    if not match:
        return None
    try:
        return json.loads(match.group())
    except json.JSONDecodeError:
        logger.debug("Reply contained braces but no valid JSON: %s", response[:200])
        return None


def _response_text(response) -> str:
    # Tool use (web search) interleaves non-text blocks; keep the text ones
    return "".join(
        block.text for block in response.content if getattr(block, "type", "") == "text"
    )


async def query_model(
    model: str,
    prompt: str,
    system: str = "",
    tools: list[dict[str, Any]] | None = None,
) -> str:
    response = await get_client().messages.create(
        model=model,
        max_tokens=get_settings().max_tokens,
        system=system or NOT_GIVEN,
        messages=[{"role": "user", "content": prompt}],
        tools=tools or NOT_GIVEN,
    )
    return _response_text(response)


async def query_small_llm(prompt: str, system: str = "") -> str:
    return await query_model(get_settings().small_llm_model, prompt, system)

"""Unit tests for services/screening — no network, no LLM calls."""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from anthropic import APIConnectionError

from literature_screener.config import get_settings
from literature_screener.models.model_screening import (
    Decision,
    ModelVariant,
    ScreeningOptions,
)
from literature_screener.services.screening import (
    ScreeningError,
    build_prompt,
    evaluate,
    parse_decision,
)

VALID_REPLY = json.dumps(
    {
        "decision": "Include",
        "reasoning": "Deep learning on ECG, no exclusion applies.",
        "criteria_scores": [
            {"criterion_text": "Deep learning applied to ECG", "passed": True, "reason": "CNN on ECG"},
            {"criterion_text": "Case reports", "passed": True, "reason": "Cohort study"},
        ],
    }
)


# --- build_prompt ---


def test_prompt_contains_record_and_criteria(sample_record, sample_criteria):
    prompt = build_prompt(sample_record, sample_criteria)

    assert f"TITLE: {sample_record.title}" in prompt
    assert f"DOI: {sample_record.doi}" in prompt
    assert f"PMID: {sample_record.pmid}" in prompt
    assert f"ABSTRACT: {sample_record.abstract}" in prompt
    assert "INCLUSION CRITERIA:\nDeep learning applied to ECG" in prompt
    assert "EXCLUSION CRITERIA:\nCase reports" in prompt
    assert "web search" not in prompt


def test_prompt_placeholders_for_missing_fields(sample_record):
    record = sample_record.model_copy(update={"doi": "", "pmid": "", "abstract": ""})

    prompt = build_prompt(record, [])

    assert "DOI: N/A" in prompt
    assert "PMID: N/A" in prompt
    assert "ABSTRACT: Not provided in text" in prompt
    assert prompt.count("None provided.") == 2


def test_prompt_mentions_web_search_when_enabled(sample_record, sample_criteria):
    prompt = build_prompt(sample_record, sample_criteria, enable_web_search=True)

    assert "Use web search to verify" in prompt


# --- parse_decision ---


def test_parse_decision_from_wrapped_json():
    reply = f"Here is my assessment:\n```json\n{VALID_REPLY}\n```"

    decision = parse_decision("31000001", reply)

    assert decision.decision is Decision.INCLUDE
    assert len(decision.criteria_scores) == 2


def test_parse_decision_without_json_raises():
    with pytest.raises(ScreeningError) as exc_info:
        parse_decision("31000001", "I cannot decide.")

    assert exc_info.value.record_id == "31000001"
    assert "No JSON object" in str(exc_info.value)


def test_parse_decision_with_bad_schema_raises():
    with pytest.raises(ScreeningError) as exc_info:
        parse_decision("tag-0", '{"verdict": "yes"}')

    assert str(exc_info.value).startswith("[tag-0]")
    assert "Invalid screening decision" in str(exc_info.value)


# --- evaluate ---


async def test_evaluate_fast_variant_uses_small_model(sample_record, sample_criteria):
    with patch(
        "literature_screener.services.screening.query_model",
        new=AsyncMock(return_value=VALID_REPLY),
    ) as mock_query:
        decision = await evaluate(sample_record, sample_criteria)

    assert decision.decision is Decision.INCLUDE
    args, kwargs = mock_query.call_args
    assert args[0] == get_settings().small_llm_model
    assert kwargs["tools"] is None


async def test_evaluate_thorough_with_search_attaches_tool(sample_record, sample_criteria):
    options = ScreeningOptions(model_variant=ModelVariant.THOROUGH, enable_web_search=True)

    with patch(
        "literature_screener.services.screening.query_model",
        new=AsyncMock(return_value=VALID_REPLY),
    ) as mock_query:
        await evaluate(sample_record, sample_criteria, options)

    args, kwargs = mock_query.call_args
    assert args[0] == get_settings().llm_model
    assert kwargs["tools"][0]["name"] == "web_search"


async def test_evaluate_fast_with_search_has_no_tool(sample_record, sample_criteria):
    """Web search is only attached for the thorough model; prompt still asks."""
    options = ScreeningOptions(model_variant=ModelVariant.FAST, enable_web_search=True)

    with patch(
        "literature_screener.services.screening.query_model",
        new=AsyncMock(return_value=VALID_REPLY),
    ) as mock_query:
        await evaluate(sample_record, sample_criteria, options)

    args, kwargs = mock_query.call_args
    assert kwargs["tools"] is None
    assert "Use web search to verify" in args[1]


async def test_evaluate_wraps_transport_errors(sample_record, sample_criteria):
    error = APIConnectionError(request=httpx.Request("POST", "https://api.anthropic.com"))

    with patch(
        "literature_screener.services.screening.query_model",
        new=AsyncMock(side_effect=error),
    ):
        with pytest.raises(ScreeningError) as exc_info:
            await evaluate(sample_record, sample_criteria)

    assert exc_info.value.record_id == sample_record.id
    assert "LLM request failed" in str(exc_info.value)

"""
Decision service: screens one record against review criteria.

Strategy: build a prompt from the record and the criteria → ask the LLM
for a JSON verdict → validate it into a ScreeningDecision.

Any failure (transport, missing JSON, schema mismatch) surfaces as a
ScreeningError naming the record, so batch callers can isolate it.
"""

import logging

from anthropic import AnthropicError
from pydantic import ValidationError

from literature_screener.config import get_settings
from literature_screener.constants import WEB_SEARCH_TOOL_TYPE
from literature_screener.models.model_record import BibliographicRecord
from literature_screener.models.model_screening import (
    Criterion,
    ModelVariant,
    ScreeningDecision,
    ScreeningOptions,
    partition_criteria,
)
from literature_screener.services.llm import parse_json_object, query_model

logger = logging.getLogger(__name__)


class ScreeningError(Exception):
    """Raised when a record could not be screened."""

    def __init__(self, record_id: str, message: str):
        self.record_id = record_id
        super().__init__(f"[{record_id}] {message}")


SYSTEM_PROMPT = (
    "You are an expert medical researcher performing a systematic review. "
    "You answer with a single JSON object and nothing else."
)

SCREENING_PROMPT = """Screen the following research paper based on the provided inclusion and exclusion criteria.

--- PROVIDED PAPER DATA ---
TITLE: {title}
DOI: {doi}
PMID: {pmid}
ABSTRACT: {abstract}
--- END DATA ---
{search_note}
INCLUSION CRITERIA:
{inclusion}

EXCLUSION CRITERIA:
{exclusion}

Instructions:
1. Evaluate the paper against EACH criterion individually.
2. Decision must be "Include" ONLY if it meets ALL inclusion criteria AND matches NO exclusion criteria.
3. Use "Unsure" when the data provided is not enough to decide.
4. Provide the verdict and specific reason for EACH criterion.

Return ONLY a JSON object of this shape:
{{"decision": "Include" | "Exclude" | "Unsure",
  "reasoning": "overall summary",
  "criteria_scores": [{{"criterion_text": "...", "passed": true, "reason": "..."}}]}}
"""

SEARCH_NOTE = (
    "\nIMPORTANT: Use web search to verify the paper details using the DOI or "
    "Title if the provided abstract is missing or insufficient to make a "
    "final decision.\n"
)


def build_prompt(
    record: BibliographicRecord,
    criteria: list[Criterion],
    enable_web_search: bool = False,
) -> str:
    """Render the screening prompt for one record."""
    inclusion, exclusion = partition_criteria(criteria)
    return SCREENING_PROMPT.format(
        title=record.title,
        doi=record.doi or "N/A",
        pmid=record.pmid or "N/A",
        abstract=record.abstract or "Not provided in text",
        search_note=SEARCH_NOTE if enable_web_search else "",
        inclusion="\n".join(inclusion) if inclusion else "None provided.",
        exclusion="\n".join(exclusion) if exclusion else "None provided.",
    )


def _model_for(variant: ModelVariant) -> str:
    settings = get_settings()
    if variant == ModelVariant.THOROUGH:
        return settings.llm_model
    return settings.small_llm_model


def _tools_for(options: ScreeningOptions) -> list[dict] | None:
    # Web search is only attached for the large model
    if options.enable_web_search and options.model_variant == ModelVariant.THOROUGH:
        return [
            {
                "type": WEB_SEARCH_TOOL_TYPE,
                "name": "web_search",
                "max_uses": get_settings().web_search_max_uses,
            }
        ]
    return None


def parse_decision(record_id: str, response: str) -> ScreeningDecision:
    """Validate an LLM reply into a ScreeningDecision."""
    payload = parse_json_object(response)
    if payload is None:
        raise ScreeningError(record_id, f"No JSON object in reply: {response[:200]!r}")
    try:
        return ScreeningDecision.model_validate(payload)
    except ValidationError as e:
        raise ScreeningError(record_id, f"Invalid screening decision: {e}") from e


async def evaluate(
    record: BibliographicRecord,
    criteria: list[Criterion],
    options: ScreeningOptions | None = None,
) -> ScreeningDecision:
    """
    Screen one record against the criteria.

    Args:
        record: Parsed record; title, DOI, PMID and abstract go into the prompt
        criteria: Inclusion and exclusion criteria, in display order
        options: Model variant and web search switch

    Returns:
        The validated decision

    Raises:
        ScreeningError: the LLM call failed or its reply was unusable
    """
    options = options or ScreeningOptions()
    prompt = build_prompt(record, criteria, options.enable_web_search)
    model = _model_for(options.model_variant)

    logger.info(
        "Screening record %s (#%s) model=%s web_search=%s",
        record.id,
        record.sequence_index,
        model,
        options.enable_web_search,
    )
    try:
        response = await query_model(
            model, prompt, system=SYSTEM_PROMPT, tools=_tools_for(options)
        )
    except AnthropicError as e:
        raise ScreeningError(record.id, f"LLM request failed: {e}") from e

    decision = parse_decision(record.id, response)
    logger.debug("Record %s → %s", record.id, decision.decision.value)
    return decision

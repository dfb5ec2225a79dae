"""
Screening models.

Criteria go into the decision service, ScreeningDecision comes back out.
ScreenedRecord pairs a parsed record with whatever the service returned.
"""

from collections import Counter
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from literature_screener.models.model_record import BibliographicRecord


class CriterionType(str, Enum):
    INCLUSION = "Inclusion"
    EXCLUSION = "Exclusion"


class Decision(str, Enum):
    INCLUDE = "Include"
    EXCLUDE = "Exclude"
    UNSURE = "Unsure"


class ModelVariant(str, Enum):
    FAST = "fast"  # small LLM model
    THOROUGH = "thorough"  # large LLM model, can use web search


class Criterion(BaseModel):
    """A single inclusion or exclusion criterion."""

    id: str
    text: str
    type: CriterionType


def partition_criteria(criteria: list[Criterion]) -> tuple[list[str], list[str]]:
    """Split criteria into (inclusion texts, exclusion texts), dropping blanks."""
    inclusion: list[str] = []
    exclusion: list[str] = []
    for criterion in criteria:
        text = criterion.text.strip()
        if not text:
            continue
        if criterion.type == CriterionType.INCLUSION:
            inclusion.append(text)
        else:
            exclusion.append(text)
    return inclusion, exclusion


class CriterionScore(BaseModel):
    """Verdict for one criterion."""

    model_config = ConfigDict(populate_by_name=True)

    criterion_text: str = Field(
        validation_alias=AliasChoices("criterion_text", "criterionText", "criterion")
    )
    passed: bool
    reason: str = ""


class ScreeningDecision(BaseModel):
    """Decision service output for one record."""

    model_config = ConfigDict(populate_by_name=True)

    decision: Decision
    reasoning: str
    criteria_scores: list[CriterionScore] = Field(
        default=[],
        validation_alias=AliasChoices("criteria_scores", "criteriaScores"),
    )

    @field_validator("decision", mode="before")
    @classmethod
    def normalize_decision(cls, value):
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


class ScreeningOptions(BaseModel):
    """Per-run knobs for the decision service."""

    model_variant: ModelVariant = ModelVariant.FAST
    enable_web_search: bool = False


class ScreenedRecord(BaseModel):
    """A record and its screening outcome, if any."""

    record: BibliographicRecord
    decision: ScreeningDecision | None = None
    error: str | None = None  # last failure message; record stays pending

    @property
    def is_pending(self) -> bool:
        return self.decision is None


class ScreeningStats(BaseModel):
    """Counts shown after a screening run."""

    total: int = 0
    included: int = 0
    excluded: int = 0
    unsure: int = 0
    pending: int = 0

    @classmethod
    def from_results(cls, results: list[ScreenedRecord]) -> "ScreeningStats":
        counts = Counter(r.decision.decision for r in results if r.decision)
        return cls(
            total=len(results),
            included=counts[Decision.INCLUDE],
            excluded=counts[Decision.EXCLUDE],
            unsure=counts[Decision.UNSURE],
            pending=sum(1 for r in results if r.is_pending),
        )

"""Data models for the literature screener."""

from literature_screener.models.model_record import BibliographicRecord
from literature_screener.models.model_screening import (
    Criterion,
    CriterionScore,
    CriterionType,
    Decision,
    ModelVariant,
    ScreenedRecord,
    ScreeningDecision,
    ScreeningOptions,
    ScreeningStats,
)

__all__ = [
    "BibliographicRecord",
    "Criterion",
    "CriterionScore",
    "CriterionType",
    "Decision",
    "ModelVariant",
    "ScreenedRecord",
    "ScreeningDecision",
    "ScreeningOptions",
    "ScreeningStats",
]

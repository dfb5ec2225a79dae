from literature_screener.constants import DEFAULT_CRITERIA
from literature_screener.models.model_screening import Criterion, CriterionType


def build_criteria(inclusion: list[str], exclusion: list[str]) -> list[Criterion]:
    """Number criteria 1..N, inclusion first, skipping blank texts."""
    criteria: list[Criterion] = []
    for criterion_type, texts in (
        (CriterionType.INCLUSION, inclusion),
        (CriterionType.EXCLUSION, exclusion),
    ):
        for text in texts:
            if not text.strip():
                continue
            criteria.append(
                Criterion(id=str(len(criteria) + 1), text=text.strip(), type=criterion_type)
            )
    return criteria


def default_criteria() -> list[Criterion]:
    return [
        Criterion(id=str(i), text=text, type=CriterionType(type_name))
        for i, (type_name, text) in enumerate(DEFAULT_CRITERIA, start=1)
    ]

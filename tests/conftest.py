"""Pytest configuration and fixtures."""

import pytest

from literature_screener.models.model_record import BibliographicRecord
from literature_screener.models.model_screening import Criterion, CriterionType

TAGGED_EXPORT = """PMID- 31000001
OWN - NLM
STAT- MEDLINE
DP  - 2021 Mar 4
TI  - Deep learning detection of atrial fibrillation from single-lead
      electrocardiograms.
AB  - BACKGROUND: Atrial fibrillation is often undiagnosed. METHODS: We trained
      a convolutional network on 10,000 recordings.
FAU - Smith, John
AU  - Smith J
FAU - Doe, Anne
AU  - Doe A
JT  - Journal of Electrocardiology
AID - S0022-0736(21)00001-1 [pii]
AID - 10.1016/j.jelectrocard.2021.01.001 [doi]

PMID- 31000002
DP  - 2019
TI  - A second article.
AU  - Lee K
JT  - Heart Rhythm
"""

ABSTRACT_EXPORT = """1. J Electrocardiol. 2021 Mar;65:1-8. doi: 10.1016/j.jelectrocard.2021.01.001.

Deep learning detection of atrial fibrillation from single-lead electrocardiograms.

Smith J(1), Doe A(2).

Author information:
(1)Department of Cardiology, Example University.

Atrial fibrillation is often undiagnosed. We trained a convolutional network on 10,000 single-lead recordings.

DOI: 10.1016/j.jelectrocard.2021.01.001
PMID: 31000001


2. Heart Rhythm. 2019;16(2):200-210.

A second article.

Lee K.

PMID: 31000002
"""


@pytest.fixture
def tagged_export() -> str:
    """Two-record tagged (Format: PubMed) export."""
    return TAGGED_EXPORT


@pytest.fixture
def abstract_export() -> str:
    """Two-entry numbered (Format: Abstract) export."""
    return ABSTRACT_EXPORT


@pytest.fixture
def sample_record() -> BibliographicRecord:
    """Sample parsed record for screening tests."""
    return BibliographicRecord(
        id="31000001",
        sequence_index="1",
        title="Deep learning detection of atrial fibrillation",
        authors="Smith J, Doe A",
        journal="Journal of Electrocardiology",
        year="2021",
        abstract="We trained a convolutional network on 10,000 recordings.",
        doi="10.1016/j.jelectrocard.2021.01.001",
        pmid="31000001",
        raw_text="PMID- 31000001",
    )


@pytest.fixture
def sample_criteria() -> list[Criterion]:
    """One inclusion and one exclusion criterion."""
    return [
        Criterion(id="1", text="Deep learning applied to ECG", type=CriterionType.INCLUSION),
        Criterion(id="2", text="Case reports", type=CriterionType.EXCLUSION),
    ]

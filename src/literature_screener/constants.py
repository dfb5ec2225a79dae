"""Project-wide constants."""

# -- Record placeholders ----------------------------------------------------
NO_TITLE: str = "No Title Found"
UNKNOWN_AUTHORS: str = "Unknown Authors"
UNKNOWN_JOURNAL: str = "Unknown Journal"
UNKNOWN_YEAR: str = "Unknown Year"

# -- Format sniffing ----------------------------------------------------------
# Either marker anywhere in the content selects the tagged (MEDLINE) parser.
TAGGED_FORMAT_MARKERS: tuple[str, ...] = ("PMID- ", "TI  - ")

# -- Tagged format ------------------------------------------------------------
CONTINUATION_INDENT: str = " " * 6
DOI_MARKER: str = "[doi]"
TAGGED_ID_PREFIX: str = "tag"

# -- Abstract format ----------------------------------------------------------
ABSTRACT_ID_PREFIX: str = "entry"
MIN_ABSTRACT_PARAGRAPH_LENGTH: int = 50  # paragraphs must be strictly longer
NON_ABSTRACT_PREFIXES: tuple[str, ...] = (
    "pmid:",
    "doi:",
    "author information",
    "conflict of interest",
)

# -- Screening ----------------------------------------------------------------
NOT_SCREENED: str = "Not Screened"
EXPORT_HEADERS: list[str] = [
    "PMID",
    "DOI",
    "Title",
    "Journal",
    "Year",
    "Decision",
    "Reasoning",
]
WEB_SEARCH_TOOL_TYPE: str = "web_search_20250305"

# Starter criteria used when the caller supplies none (type, text).
DEFAULT_CRITERIA: list[tuple[str, str]] = [
    ("Inclusion", "Study focus on deep learning application in ECG"),
    ("Inclusion", "Published after 2015"),
    ("Exclusion", "Case reports or small studies with n < 10"),
]

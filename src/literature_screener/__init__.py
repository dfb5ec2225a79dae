"""Literature screener: parse PubMed text exports and screen the records."""

__version__ = "0.1.0"

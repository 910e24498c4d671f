"""Portfolio document loading: fetching, parsing and the raw schema."""

from .fetcher import DocumentFetcher, FetchResult
from .models import (
    AdditionalLink,
    ContentItem,
    ContentSection,
    ContentValue,
    Empty,
    Items,
    RawPortfolio,
    Text,
)
from .parser import parse

__all__ = [
    "AdditionalLink",
    "ContentItem",
    "ContentSection",
    "ContentValue",
    "DocumentFetcher",
    "Empty",
    "FetchResult",
    "Items",
    "RawPortfolio",
    "Text",
    "parse",
]

"""Text sanitization and display projection."""

from .formatter import (
    DisplayItem,
    DisplayLink,
    DisplayPortfolio,
    DisplaySection,
    SocialEntry,
    project,
)
from .sanitizer import extract_highlights, sanitize

__all__ = [
    "DisplayItem",
    "DisplayLink",
    "DisplayPortfolio",
    "DisplaySection",
    "SocialEntry",
    "extract_highlights",
    "project",
    "sanitize",
]

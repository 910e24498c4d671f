"""Portfolio document models.

The document is hand-edited (usually a Jekyll ``_config.yml``), so every
field is optional and unknown keys are ignored. The one shape-dependent
rule is a section's ``content``, which may be a list of items, a plain
string, or missing altogether.
"""

from dataclasses import dataclass
from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, ConfigDict, PlainValidator


class _DocumentModel(BaseModel):
    """Base for document models: ignore unknown keys, accept numbers as text."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class AdditionalLink(_DocumentModel):
    """An extra link attached to the profile or to a content item."""

    title: str | None = None
    icon: str | None = None
    url: str | None = None


class ContentItem(_DocumentModel):
    """A single entry of a list section. Nothing is guaranteed to be present."""

    title: str | None = None
    sub_title: str | None = None
    caption: str | None = None
    icon: str | None = None
    url: str | None = None
    quote: str | None = None
    description: str | None = None
    link: str | None = None
    additional_links: list[AdditionalLink] | None = None


@dataclass(frozen=True)
class Items:
    """Section content given as a YAML sequence."""

    items: tuple[ContentItem, ...] = ()


@dataclass(frozen=True)
class Text:
    """Section content given as a YAML scalar."""

    text: str


@dataclass(frozen=True)
class Empty:
    """Section without content."""


ContentValue: TypeAlias = Items | Text | Empty

_SCALAR_TYPES = (str, int, float, bool)


def _decode_item(value: Any) -> ContentItem:
    if value is None:
        return ContentItem()
    if isinstance(value, dict):
        return ContentItem.model_validate(value)
    if isinstance(value, _SCALAR_TYPES):
        return ContentItem(description=str(value))
    raise ValueError(f"content items must be mappings or strings, got {type(value).__name__}")


def decode_content_value(value: Any) -> ContentValue:
    """Pick the ContentValue variant matching the shape of the raw YAML value.

    Args:
        value: Whatever ``yaml.safe_load`` produced for the ``content`` key

    Returns:
        Items for a sequence, Text for a scalar, Empty for null

    Raises:
        ValueError: For any other shape (e.g. a mapping)
    """
    if isinstance(value, (Items, Text, Empty)):
        return value
    if value is None:
        return Empty()
    if isinstance(value, list):
        return Items(tuple(_decode_item(element) for element in value))
    if isinstance(value, _SCALAR_TYPES):
        return Text(str(value))
    raise ValueError(f"content must be a list or a string, got {type(value).__name__}")


class ContentSection(_DocumentModel):
    """A named, navigable block of the portfolio."""

    title: str | None = None
    layout: str | None = None
    content: Annotated[ContentValue, PlainValidator(decode_content_value)] = Empty()


class RawPortfolio(_DocumentModel):
    """The portfolio document as written, before any defaulting."""

    name: str | None = None
    title: str | None = None
    email: str | None = None
    website: str | None = None
    about: str | None = None

    github_username: str | None = None
    twitter_username: str | None = None
    linkedin_username: str | None = None
    discord_username: str | None = None

    additional_links: list[AdditionalLink] | None = None
    content: list[ContentSection] | None = None

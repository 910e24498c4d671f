"""Projection of a RawPortfolio into display-ready data.

Everything the renderer reads is resolved here: defaults are filled in,
free text is sanitized and social links are synthesized from the flat
identity fields. Projection is pure and never fails.
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..config import settings
from ..data.models import (
    AdditionalLink,
    ContentItem,
    ContentSection,
    ContentValue,
    Empty,
    Items,
    RawPortfolio,
    Text,
)
from .sanitizer import extract_highlights, sanitize

DEFAULT_NAME = "Anonymous"
DEFAULT_TITLE = "Developer"
DEFAULT_SECTION_TITLE = "Untitled"
DEFAULT_LAYOUT = "default"


@dataclass(frozen=True)
class DisplayLink:
    """A link with every field resolved to a string."""

    title: str = ""
    icon: str = ""
    url: str = ""


@dataclass(frozen=True)
class DisplayItem:
    """A content item ready for rendering. Empty strings mean absent."""

    title: str = ""
    sub_title: str = ""
    caption: str = ""
    icon: str = ""
    url: str = ""
    quote: str = ""
    description: str = ""
    link: str = ""
    additional_links: tuple[DisplayLink, ...] = ()


@dataclass(frozen=True)
class DisplaySection:
    """A navigable section with its items."""

    title: str
    layout: str
    items: tuple[DisplayItem, ...] = ()


@dataclass(frozen=True)
class SocialEntry:
    """A social profile link."""

    platform: str
    url: str
    username: str


@dataclass(frozen=True)
class DisplayPortfolio:
    """Fully resolved portfolio, shared read-only with the renderer."""

    name: str = DEFAULT_NAME
    title: str = DEFAULT_TITLE
    about: str = ""
    highlights: tuple[str, ...] = ()
    content_sections: tuple[DisplaySection, ...] = ()
    social: tuple[SocialEntry, ...] = ()
    additional_links: tuple[DisplayLink, ...] = ()

    @property
    def section_titles(self) -> list[str]:
        """Get section titles in document order."""
        return [section.title for section in self.content_sections]


def _website_url(website: str) -> str:
    return website if "://" in website else f"https://{website}"


# (platform, RawPortfolio attribute, URL builder) in display order
SOCIAL_PLATFORMS: tuple[tuple[str, str, Callable[[str], str]], ...] = (
    ("Email", "email", lambda value: f"mailto:{value}"),
    ("Website", "website", _website_url),
    ("GitHub", "github_username", lambda value: f"https://github.com/{value}"),
    ("Twitter", "twitter_username", lambda value: f"https://twitter.com/{value}"),
    ("LinkedIn", "linkedin_username", lambda value: f"https://www.linkedin.com/in/{value}"),
    ("Discord", "discord_username", lambda value: f"https://discord.com/users/{value}"),
)


def _text(value: str | None) -> str:
    return value.strip() if value else ""


def build_social(raw: RawPortfolio) -> tuple[SocialEntry, ...]:
    """Build social entries from the flat identity fields, in platform order."""
    entries = []
    for platform, attribute, to_url in SOCIAL_PLATFORMS:
        value = _text(getattr(raw, attribute))
        if value:
            entries.append(SocialEntry(platform=platform, url=to_url(value), username=value))
    return tuple(entries)


def _links(links: list[AdditionalLink] | None) -> tuple[DisplayLink, ...]:
    return tuple(
        DisplayLink(title=_text(link.title), icon=_text(link.icon), url=_text(link.url))
        for link in links or []
    )


def _project_item(item: ContentItem, width: int) -> DisplayItem:
    return DisplayItem(
        title=_text(item.title),
        sub_title=_text(item.sub_title),
        caption=_text(item.caption),
        icon=_text(item.icon),
        url=_text(item.url),
        quote=sanitize(item.quote or "", width),
        description=sanitize(item.description or "", width),
        link=_text(item.link),
        additional_links=_links(item.additional_links),
    )


def project_content(content: ContentValue, width: int) -> tuple[DisplayItem, ...]:
    """Turn a section's content value into display items.

    Args:
        content: Items, Text or Empty
        width: Wrap width for free text

    Returns:
        One item per raw item, one description-only item for text, none for empty
    """
    if isinstance(content, Items):
        return tuple(_project_item(item, width) for item in content.items)
    if isinstance(content, Text):
        return (DisplayItem(description=sanitize(content.text, width)),)
    if isinstance(content, Empty):
        return ()
    raise TypeError(f"Unknown content value: {content!r}")


def project_section(section: ContentSection, width: int) -> DisplaySection:
    """Project one raw section."""
    return DisplaySection(
        title=_text(section.title) or DEFAULT_SECTION_TITLE,
        layout=_text(section.layout).lower() or DEFAULT_LAYOUT,
        items=project_content(section.content, width),
    )


def project(raw: RawPortfolio, width: int | None = None) -> DisplayPortfolio:
    """Project a raw portfolio into its display form.

    Args:
        raw: Parsed document
        width: Wrap width for free text (defaults to settings.wrap_width)

    Returns:
        DisplayPortfolio with defaults applied and text sanitized
    """
    width = settings.wrap_width if width is None else width
    about = raw.about or ""
    return DisplayPortfolio(
        name=_text(raw.name) or DEFAULT_NAME,
        title=_text(raw.title) or DEFAULT_TITLE,
        about=sanitize(about, width),
        highlights=tuple(extract_highlights(about)),
        content_sections=tuple(project_section(section, width) for section in raw.content or []),
        social=build_social(raw),
        additional_links=_links(raw.additional_links),
    )

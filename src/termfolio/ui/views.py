"""Rich renderables for the portfolio viewer.

Views only read the session snapshot; they never change navigation state.
"""

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..config import settings
from ..processor.formatter import DisplayItem, DisplayPortfolio, DisplaySection
from ..session import Session
from .ascii_art import get_logo
from .navigation import ContentView, NavigationState

FRAME_TITLE = " Portfolio Viewer "


def _badge(label: str, style: str) -> Text:
    """Create a styled badge like  Python ."""
    return Text(f" {label} ", style=f"bold reverse {style}")


def _key_hint(*parts: tuple[str, str]) -> Text:
    """Build 'Press <k> for X, ...' with highlighted keys."""
    text = Text("Press ")
    for position, (key, label) in enumerate(parts):
        if position:
            text.append(", ")
        text.append(key, style="yellow")
        text.append(f" {label}")
    return text


def digit_for_index(index: int) -> str:
    """Get the digit key that selects a navigation index, or '' if none does."""
    if index < 9:
        return str(index + 1)
    if index == 9:
        return "0"
    return ""


def _footer(session: Session) -> RenderableType:
    hint = _key_hint(
        ("h", "for Home"),
        ("←/→", "to navigate sections"),
        ("0-9", "for direct section access"),
        ("q", "to quit"),
    )
    if session.last_error:
        return Group(Text(f"Error: {session.last_error}", style="bold red"), hint)
    return hint


def render_home(
    portfolio: DisplayPortfolio, navigation: NavigationState, logo: str | None = None
) -> RenderableType:
    """Render the home screen: header, about text, highlights and section index."""
    identity = Text()
    identity.append(portfolio.name, style="bold cyan")
    identity.append(f"\n\n{portfolio.title}\n")
    for entry in portfolio.social:
        identity.append(f"\n{entry.platform}: ", style="blue")
        identity.append(entry.username, style=Style(link=entry.url))

    header = Table.grid(padding=(0, 2))
    header.add_column(ratio=3)
    header.add_column(ratio=7)
    header.add_row(Text(get_logo(logo or settings.logo), style="yellow"), identity)

    parts: list[RenderableType] = [header, Rule(style="bright_black")]

    parts.append(Text("About Me", style="bold cyan"))
    parts.append(Text(portfolio.about or "Nothing here yet.", style="white"))

    if portfolio.highlights:
        line = Text("\nI am most skilled in: ")
        for position, phrase in enumerate(portfolio.highlights):
            if position:
                line.append(" ")
            line.append_text(_badge(phrase, "green"))
        parts.append(line)

    if portfolio.additional_links:
        parts.append(Text("\nLinks", style="bold cyan"))
        for link in portfolio.additional_links:
            parts.append(Text(f"  {link.title or link.url}", style=Style(link=link.url)))

    if len(navigation.sections) > 1:
        parts.append(Text("\nSections", style="bold cyan"))
        index_table = Table.grid(padding=(0, 1))
        for index, title in enumerate(navigation.sections):
            if index == 0:
                continue
            digit = digit_for_index(index)
            index_table.add_row(Text(f"[{digit}]" if digit else "", style="yellow"), Text(title))
        parts.append(index_table)

    return Group(*parts)


def _item_is_blank(item: DisplayItem) -> bool:
    return not (
        item.title or item.sub_title or item.caption or item.description or item.quote or item.url
    )


def render_item(item: DisplayItem) -> RenderableType:
    """Render one list item: title, subtitle/caption, description/quote, links."""
    lines: list[RenderableType] = []
    if item.title:
        lines.append(Text(item.title, style="bold green"))
    subtitle = item.sub_title or item.caption
    if subtitle:
        lines.append(Text(subtitle, style="yellow"))
    if item.description:
        lines.append(Text(item.description, style="white"))
    elif item.quote:
        lines.append(Text(f"> {item.quote}", style="italic white"))
    for url in (item.url, item.link):
        if url:
            lines.append(Text(url, style=Style(color="blue", dim=True, link=url)))
    for link in item.additional_links:
        if link.url:
            label = f"↳ {link.title or link.url}"
            lines.append(Text(label, style=Style(dim=True, link=link.url)))
    return Group(*lines, Text(""))


def render_list(section: DisplaySection) -> RenderableType:
    items = [item for item in section.items if not _item_is_blank(item)]
    if not items:
        return Text("No items to display", style="bright_black")
    return Group(*(render_item(item) for item in items))


def render_text(section: DisplaySection) -> RenderableType:
    if not section.items:
        return Text("No content to display", style="bright_black")
    return Text(section.items[0].description or "No text content available", style="white")


def render_section(section: DisplaySection) -> RenderableType:
    """Render a content section according to its layout hint."""
    body = render_text(section) if section.layout == "text" else render_list(section)
    return Group(
        Text(section.title, style="bold cyan"),
        Rule(style="bright_black"),
        body,
    )


def render(session: Session) -> RenderableType:
    """Render the whole screen for the current session snapshot."""
    snapshot = session.snapshot
    if snapshot is None:
        if session.last_error:
            body: RenderableType = Text(f"Error: {session.last_error}", style="bold red")
        else:
            body = Text("Loading portfolio data...", style="yellow", justify="center")
        return Panel(body, title=FRAME_TITLE, border_style="bright_black", box=box.ROUNDED)

    portfolio, navigation = snapshot.portfolio, snapshot.navigation
    view = navigation.view
    if isinstance(view, ContentView) and view.index < len(portfolio.content_sections):
        body = render_section(portfolio.content_sections[view.index])
    else:
        body = render_home(portfolio, navigation)

    return Panel(
        Group(body, Rule(style="bright_black"), _footer(session)),
        title=f"[bold cyan]{FRAME_TITLE}[/bold cyan]",
        border_style="bright_black",
        box=box.ROUNDED,
    )

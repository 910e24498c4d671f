"""Text cleanup for terminal display.

Free text in portfolio documents is written for a web page: it carries
``<mark>`` highlights, markdown image directives and long unwrapped
paragraphs. ``sanitize`` turns it into plain text wrapped to a column width.

Pipeline order is fixed: highlight strip, image strip, wrap.
"""

import re
import textwrap

# Highlight pair used by the portfolio theme, e.g. "I write <mark>Python</mark>"
HIGHLIGHT_PATTERN = re.compile(r"<mark>(.*?)</mark>", re.DOTALL | re.IGNORECASE)

# ![alt text](path/to/image.png "optional title")
IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\([^)]*\)")

# Any whitespace other than a newline, NBSP and ideographic space included
INLINE_SPACE_PATTERN = re.compile(r"[^\S\n]")


def strip_highlights(text: str) -> str:
    """Remove highlight markers, keeping the highlighted text verbatim."""
    return HIGHLIGHT_PATTERN.sub(r"\1", text)


def strip_images(text: str) -> str:
    """Delete image directives entirely, alt text included."""
    return IMAGE_PATTERN.sub("", text)


def _strip_markup(text: str) -> str:
    # Repeat until stable: removing one directive can expose another
    while True:
        stripped = strip_images(strip_highlights(text))
        if stripped == text:
            return text
        text = stripped


def wrap_text(text: str, max_width: int) -> str:
    """Greedily word-wrap each paragraph of text.

    Paragraphs are separated by single newlines. Other whitespace characters
    are treated as plain spaces, and whitespace-only paragraphs become empty
    lines. Words are never split; a word longer than ``max_width`` sits alone
    on its line.

    Args:
        text: Text to wrap
        max_width: Target column width (values below 1 are treated as 1)

    Returns:
        Wrapped text
    """
    wrapper = textwrap.TextWrapper(
        width=max(1, max_width),
        break_long_words=False,
        break_on_hyphens=False,
    )
    lines: list[str] = []
    for paragraph in INLINE_SPACE_PATTERN.sub(" ", text).split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(wrapper.wrap(paragraph))
    return "\n".join(lines)


def sanitize(raw_text: str, max_width: int) -> str:
    """Clean up free text for display at the given width.

    Never raises; any string is a valid input.

    Args:
        raw_text: Text as written in the portfolio document
        max_width: Column width to wrap at

    Returns:
        Plain text without highlight markup or images, wrapped to max_width
    """
    return wrap_text(_strip_markup(raw_text), max_width)


def extract_highlights(text: str) -> list[str]:
    """Collect highlighted phrases in order of first appearance.

    Args:
        text: Raw text that may contain highlight markup

    Returns:
        Distinct, whitespace-normalized phrases; empty highlights are skipped
    """
    phrases: list[str] = []
    for match in HIGHLIGHT_PATTERN.finditer(text):
        phrase = " ".join(strip_images(match.group(1)).split())
        if phrase and phrase not in phrases:
            phrases.append(phrase)
    return phrases

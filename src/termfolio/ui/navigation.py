"""Section navigation state machine.

The navigable sections are a synthetic "Home" followed by every content
section in document order. Each key press fires at most one transition;
keys that do not apply are silently ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from ..processor.formatter import DisplayPortfolio

HOME_TITLE = "Home"

QUIT_KEY = "q"
HOME_KEY = "h"
PREVIOUS_KEYS = ("left", "j")
NEXT_KEYS = ("right", "l")
DIGIT_KEYS = "0123456789"

# Single characters that never trigger a first-letter jump
RESERVED_KEYS = frozenset({QUIT_KEY, HOME_KEY, "j", "l"})


class Transition(Enum):
    """Which transition a key press fired."""

    QUIT = "quit"
    HOME = "home"
    PREVIOUS = "previous"
    NEXT = "next"
    DIRECT = "direct"
    JUMP = "jump"


@dataclass(frozen=True)
class HomeView:
    """Selector for the home screen."""


@dataclass(frozen=True)
class ContentView:
    """Selector for a content section (index into DisplayPortfolio.content_sections)."""

    index: int


View: TypeAlias = HomeView | ContentView


def digit_target(digit: str) -> int:
    """Map a digit key to a section index: '1' -> 0, ..., '9' -> 8, '0' -> 9."""
    value = int(digit)
    return 9 if value == 0 else value - 1


@dataclass
class NavigationState:
    """Current position within the navigable sections."""

    sections: tuple[str, ...] = ()
    current_index: int = 0
    should_quit: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.current_index < max(1, len(self.sections)):
            raise ValueError(f"current_index {self.current_index} out of range")

    @classmethod
    def from_portfolio(cls, portfolio: DisplayPortfolio) -> "NavigationState":
        """Build the initial state: Home followed by the portfolio's sections."""
        return cls(sections=(HOME_TITLE, *portfolio.section_titles))

    @property
    def view(self) -> View:
        """Get the view selector for the current index.

        Index 0 is Home, so content section i lives at index i + 1.
        """
        if self.current_index == 0:
            return HomeView()
        return ContentView(self.current_index - 1)

    @property
    def current_title(self) -> str:
        """Get the title of the current section, or '' when there are none."""
        return self.sections[self.current_index] if self.sections else ""

    def home(self) -> bool:
        self.current_index = 0
        return True

    def previous_section(self) -> bool:
        if not self.sections:
            return False
        self.current_index = (self.current_index - 1) % len(self.sections)
        return True

    def next_section(self) -> bool:
        if not self.sections:
            return False
        self.current_index = (self.current_index + 1) % len(self.sections)
        return True

    def go_to(self, index: int) -> bool:
        """Select a section by index. Out-of-range indexes are ignored."""
        if not 0 <= index < len(self.sections):
            return False
        self.current_index = index
        return True

    def jump_to_letter(self, char: str) -> bool:
        """Select the first section whose title starts with char (case-insensitive)."""
        prefix = char.lower()
        for index, title in enumerate(self.sections):
            if title and title.lower().startswith(prefix):
                self.current_index = index
                return True
        return False

    def handle_key(self, key: str) -> Transition | None:
        """Apply the transition for a key press.

        Args:
            key: A single character, or a key name such as "left" / "right"

        Returns:
            The transition that fired, or None if the key was ignored
        """
        if self.should_quit:
            return None

        if key == QUIT_KEY:
            self.should_quit = True
            return Transition.QUIT

        if key == HOME_KEY:
            self.home()
            return Transition.HOME

        if key in PREVIOUS_KEYS:
            return Transition.PREVIOUS if self.previous_section() else None

        if key in NEXT_KEYS:
            return Transition.NEXT if self.next_section() else None

        if len(key) != 1:
            return None

        if key in DIGIT_KEYS:
            return Transition.DIRECT if self.go_to(digit_target(key)) else None

        if key.isprintable() and not key.isspace() and key not in RESERVED_KEYS:
            return Transition.JUMP if self.jump_to_letter(key) else None

        return None

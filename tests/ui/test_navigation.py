"""Tests for the navigation state machine."""

import pytest

from termfolio.processor.formatter import DisplayPortfolio, DisplaySection
from termfolio.ui.navigation import (
    ContentView,
    HomeView,
    NavigationState,
    Transition,
    digit_target,
)


def make_state(*titles: str, index: int = 0) -> NavigationState:
    return NavigationState(sections=("Home", *titles), current_index=index)


class TestConstruction:
    """Test building navigation state."""

    def test_from_portfolio_prepends_home(self) -> None:
        portfolio = DisplayPortfolio(
            content_sections=(
                DisplaySection(title="Projects", layout="list"),
                DisplaySection(title="Resume", layout="text"),
            )
        )
        state = NavigationState.from_portfolio(portfolio)
        assert state.sections == ("Home", "Projects", "Resume")
        assert state.current_index == 0
        assert state.view == HomeView()

    def test_from_empty_portfolio(self) -> None:
        state = NavigationState.from_portfolio(DisplayPortfolio())
        assert state.sections == ("Home",)

    def test_invalid_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            NavigationState(sections=("Home",), current_index=1)


class TestCycling:
    """Test previous/next transitions."""

    def test_previous_wraps_around(self) -> None:
        """Test 0 -> 2 -> 1 -> 0 with three sections."""
        state = make_state("A", "B")
        visited = []
        for _ in range(3):
            assert state.handle_key("left") is Transition.PREVIOUS
            visited.append(state.current_index)
        assert visited == [2, 1, 0]

    def test_next_wraps_around(self) -> None:
        state = make_state("A", "B", index=2)
        assert state.handle_key("right") is Transition.NEXT
        assert state.current_index == 0

    @pytest.mark.parametrize(("key", "expected"), [("j", 2), ("l", 1)], ids=["j", "l"])
    def test_letter_aliases(self, key: str, expected: int) -> None:
        state = make_state("A", "B")
        state.handle_key(key)
        assert state.current_index == expected

    @pytest.mark.parametrize("key", ["left", "right", "j", "l", "1", "a"])
    def test_empty_sections_are_noops(self, key: str) -> None:
        state = NavigationState()
        assert state.handle_key(key) is None
        assert state.current_index == 0


class TestHome:
    """Test the home transition."""

    def test_home_resets_index(self) -> None:
        state = make_state("A", "B", index=2)
        assert state.handle_key("h") is Transition.HOME
        assert state.current_index == 0
        assert state.view == HomeView()


class TestDirectIndex:
    """Test digit keys."""

    @pytest.mark.parametrize(
        ("digit", "target"),
        [("1", 0), ("2", 1), ("9", 8), ("0", 9)],
    )
    def test_digit_target(self, digit: str, target: int) -> None:
        assert digit_target(digit) == target

    def test_digit_selects_section(self) -> None:
        state = make_state("A", "B")
        assert state.handle_key("3") is Transition.DIRECT
        assert state.current_index == 2
        assert state.view == ContentView(1)

    def test_out_of_range_digit_ignored(self) -> None:
        """Test digit 5 with two sections leaves the index unchanged."""
        state = make_state("A", index=1)
        assert state.handle_key("5") is None
        assert state.current_index == 1

    def test_zero_selects_tenth_section(self) -> None:
        state = make_state(*"ABCDEFGHI")
        assert state.handle_key("0") is Transition.DIRECT
        assert state.current_index == 9


class TestFirstLetterJump:
    """Test jumping by first letter."""

    def test_jumps_case_insensitively(self) -> None:
        state = make_state("projects", "Resume")
        assert state.handle_key("R") is Transition.JUMP
        assert state.current_index == 2
        assert state.handle_key("P") is Transition.JUMP
        assert state.current_index == 1

    def test_first_match_from_start_wins(self) -> None:
        state = make_state("Alpha", "Beta", "Another", index=3)
        state.handle_key("a")
        assert state.current_index == 1

    def test_no_match_is_noop(self) -> None:
        state = make_state("Alpha", index=1)
        assert state.handle_key("z") is None
        assert state.current_index == 1

    def test_reserved_keys_do_not_jump(self) -> None:
        """Test q/h/j/l keep their own meaning even if a title matches."""
        state = make_state("Jobs", "Links")
        state.handle_key("j")
        assert state.current_index == 2  # previous, not "Jobs"

    @pytest.mark.parametrize("key", [" ", "\t", "escape", "c-x", "f1"])
    def test_non_printable_and_named_keys_ignored(self, key: str) -> None:
        state = make_state(" spaced", "Escape")
        assert state.handle_key(key) is None
        assert state.current_index == 0


class TestQuit:
    """Test the quit transition."""

    def test_quit_sets_flag(self) -> None:
        state = make_state("A")
        assert state.handle_key("q") is Transition.QUIT
        assert state.should_quit is True

    def test_no_transitions_after_quit(self) -> None:
        state = make_state("A")
        state.handle_key("q")
        assert state.handle_key("right") is None
        assert state.current_index == 0


class TestView:
    """Test view selector derivation."""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, HomeView()), (1, ContentView(0)), (3, ContentView(2))],
    )
    def test_view_maps_index(self, index: int, expected: object) -> None:
        state = make_state("A", "B", "C", index=index)
        assert state.view == expected

    def test_current_title(self) -> None:
        assert make_state("A", index=1).current_title == "A"
        assert NavigationState().current_title == ""

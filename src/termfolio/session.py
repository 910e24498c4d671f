"""The viewing session: display data plus navigation, owned in one place.

The renderer only ever reads ``Session.snapshot``. Loading builds a complete
new snapshot and swaps it in with a single assignment, so a failed or
in-progress reload never exposes half-updated state.
"""

from dataclasses import dataclass

from .config import settings
from .data.fetcher import DocumentFetcher
from .data.parser import parse
from .exceptions import TermfolioError
from .processor.formatter import DisplayPortfolio, project
from .ui.navigation import NavigationState, Transition
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Display data and navigation state that belong together."""

    portfolio: DisplayPortfolio
    navigation: NavigationState


class Session:
    """A single portfolio viewing session.

    Attributes:
        source: Where the document was loaded from (URL or path)
        width: Wrap width used for projection
        snapshot: Current display data and navigation, None until first load
        last_error: Message of the most recent failed load, cleared on success
    """

    def __init__(self, source: str, width: int | None = None) -> None:
        self.source = source
        self.width = settings.wrap_width if width is None else width
        self.snapshot: SessionSnapshot | None = None
        self.last_error: str | None = None

    @property
    def should_quit(self) -> bool:
        return self.snapshot is not None and self.snapshot.navigation.should_quit

    def load(self, text: str) -> SessionSnapshot:
        """Parse and project document text, replacing the current snapshot.

        Args:
            text: YAML document text

        Returns:
            The new snapshot

        Raises:
            ParseError: If the text cannot be parsed. The previous snapshot is kept.
        """
        try:
            portfolio = project(parse(text), self.width)
        except TermfolioError as e:
            logger.warning("Failed to load %s: %s", self.source, e)
            self.last_error = str(e)
            raise

        snapshot = SessionSnapshot(
            portfolio=portfolio,
            navigation=NavigationState.from_portfolio(portfolio),
        )
        self.snapshot = snapshot
        self.last_error = None
        logger.info(
            "Loaded %s: %d sections",
            self.source,
            len(portfolio.content_sections),
        )
        return snapshot

    def reload(self, fetcher: DocumentFetcher | None = None) -> SessionSnapshot:
        """Fetch the source again and load it.

        Args:
            fetcher: Open fetcher to reuse; a short-lived one is created otherwise

        Raises:
            FetchError: If the document cannot be retrieved
            ParseError: If it cannot be parsed
        """
        try:
            if fetcher is None:
                with DocumentFetcher() as own_fetcher:
                    result = own_fetcher.fetch(self.source)
            else:
                result = fetcher.fetch(self.source)
        except TermfolioError as e:
            logger.warning("Failed to fetch %s: %s", self.source, e)
            self.last_error = str(e)
            raise
        return self.load(result.content)

    def handle_key(self, key: str) -> Transition | None:
        """Route a key press to the navigation state.

        Does nothing until a document has been loaded.
        """
        if self.snapshot is None:
            return None
        transition = self.snapshot.navigation.handle_key(key)
        if transition is not None:
            logger.debug(
                "%s -> %s (%s)",
                key,
                self.snapshot.navigation.current_title,
                transition.value,
            )
        return transition

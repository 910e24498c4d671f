"""Full-screen terminal loop.

Keys are read in raw mode through prompt_toolkit; the screen is drawn by a
Rich ``Live`` display that re-renders the session on every tick and after
every key press.
"""

import asyncio

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.live import Live

from ..config import settings
from ..data.fetcher import DocumentFetcher
from ..exceptions import TermfolioError
from ..session import Session
from ..utils.console import console as default_console
from ..utils.logging import get_logger
from .navigation import QUIT_KEY
from .views import render

logger = get_logger(__name__)

RELOAD_KEY = Keys.ControlR.value
INTERRUPT_KEY = Keys.ControlC.value


def key_name(key: Keys | str) -> str:
    """Normalize a prompt_toolkit key to a plain string ('left', 'c-r', 'a', ...)."""
    return key.value if isinstance(key, Keys) else key


class PortfolioApp:
    """Drives a Session from terminal key presses.

    Attributes:
        session: The session being viewed
        fetcher: Open fetcher used for the initial load and reloads
        stopped: Set once the user asked to leave
    """

    def __init__(
        self,
        session: Session,
        fetcher: DocumentFetcher,
        console: Console | None = None,
    ) -> None:
        self.session = session
        self.fetcher = fetcher
        self.console = console or default_console
        self.stopped = False
        self.load_task: asyncio.Task[None] | None = None

    def load(self) -> None:
        """Fetch and load the session's source.

        Failures are logged by the session and shown through
        ``session.last_error``; the previous snapshot stays on screen.
        """
        try:
            self.session.reload(self.fetcher)
        except TermfolioError as e:
            logger.debug("Load failed, keeping previous view: %s", e)

    @property
    def loading(self) -> bool:
        return self.load_task is not None and not self.load_task.done()

    def start_load(self) -> asyncio.Task[None] | None:
        """Run ``load`` in a worker thread so key handling never blocks.

        Only one load runs at a time; a request made while one is in flight
        is ignored.

        Returns:
            The new load task, or None if a load was already running
        """
        if self.loading:
            logger.debug("Load already in progress, ignoring request")
            return None
        self.load_task = asyncio.get_running_loop().create_task(asyncio.to_thread(self.load))
        return self.load_task

    def handle_key(self, key: str) -> None:
        """Handle one key press. Must be called on the event loop."""
        if key == INTERRUPT_KEY:
            self.stopped = True
        elif key == RELOAD_KEY:
            self.start_load()
        elif self.session.snapshot is None:
            # Nothing to navigate yet, but quitting must still work
            if key == QUIT_KEY:
                self.stopped = True
        else:
            self.session.handle_key(key)
            self.stopped = self.session.should_quit

    async def run_async(self) -> None:
        """Run until the user quits."""
        done = asyncio.Event()
        terminal_input = create_input()

        with Live(
            console=self.console,
            screen=True,
            refresh_per_second=settings.refresh_per_second,
            get_renderable=lambda: render(self.session),
        ) as live:

            def keys_ready() -> None:
                for key_press in terminal_input.read_keys():
                    self.handle_key(key_name(key_press.key))
                    if self.stopped:
                        done.set()
                        return
                live.refresh()

            with terminal_input.raw_mode(), terminal_input.attach(keys_ready):
                # Quitting must not wait for the first fetch to finish
                self.start_load()
                await done.wait()

    def run(self) -> None:
        """Blocking entry point."""
        asyncio.run(self.run_async())


def run_viewer(source: str, width: int | None = None, console: Console | None = None) -> Session:
    """Open the viewer on a source and block until the user quits.

    Args:
        source: URL or path of the portfolio document
        width: Wrap width; derived from the terminal width when omitted
        console: Console to draw on

    Returns:
        The session as it was when the viewer closed
    """
    console = console or default_console
    if width is None:
        width = settings.content_width(console.width)
    session = Session(source, width=width)
    with DocumentFetcher() as fetcher:
        PortfolioApp(session, fetcher, console=console).run()
    return session

"""Retrieve portfolio documents from a URL or a local file.

Single Responsibility: turn a source string into document text.
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import httpx

from ..config import settings
from ..exceptions import FetchError
from ..utils.logging import get_logger

logger = get_logger(__name__)

REMOTE_SCHEMES = ("http", "https")


@dataclass
class FetchResult:
    """Result of a document fetch."""

    source: str
    content: str
    is_remote: bool


def is_remote(source: str) -> bool:
    """Check whether a source string points at an HTTP(S) resource."""
    return urlparse(source).scheme in REMOTE_SCHEMES


def to_raw_url(url: str) -> str:
    """Rewrite a GitHub file page URL to its raw content URL.

    ``https://github.com/u/r/blob/main/_config.yml`` becomes
    ``https://raw.githubusercontent.com/u/r/main/_config.yml``. Other URLs
    are returned unchanged.
    """
    parsed = urlparse(url)
    if parsed.hostname not in ("github.com", "www.github.com") or "/blob/" not in parsed.path:
        return url
    path = parsed.path.replace("/blob/", "/", 1)
    return parsed._replace(netloc="raw.githubusercontent.com", path=path).geturl()


class DocumentFetcher:
    """Fetches portfolio documents over HTTP or from disk.

    Implements context manager for proper resource cleanup.
    """

    USER_AGENT = "termfolio/1.0 (Terminal Portfolio Viewer)"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: HTTP request timeout in seconds (defaults to settings)
            transport: Optional httpx transport, mainly for tests
        """
        self.timeout = settings.request_timeout if timeout is None else timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "DocumentFetcher":
        """Enter context manager, create HTTP client."""
        self._client = httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=5,
            headers={"User-Agent": self.USER_AGENT},
            transport=self._transport,
        )
        return self

    def __exit__(self, *args) -> None:
        """Exit context manager, close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def fetch(self, source: str) -> FetchResult:
        """Fetch a document.

        Args:
            source: HTTP(S) URL or local file path

        Returns:
            FetchResult with the document text

        Raises:
            RuntimeError: If a URL is fetched outside the context manager
            FetchError: On network, HTTP or file system errors
        """
        if is_remote(source):
            return FetchResult(source=source, content=self._fetch_remote(source), is_remote=True)

        scheme = urlparse(source).scheme
        # Single letters are Windows drive prefixes, not schemes
        if scheme and len(scheme) > 1 and scheme != "file":
            raise FetchError(source, f"unsupported scheme '{scheme}'")
        path = Path(source.removeprefix("file://"))
        return FetchResult(source=source, content=self._fetch_local(path), is_remote=False)

    def _fetch_remote(self, url: str) -> str:
        if not self._client:
            raise RuntimeError("DocumentFetcher must be used as context manager")

        raw_url = to_raw_url(url)
        logger.debug("Fetching: %s", raw_url)
        try:
            response = self._client.get(raw_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        logger.debug("Fetched %d bytes from %s", len(response.text), raw_url)
        return response.text

    def _fetch_local(self, path: Path) -> str:
        logger.debug("Reading: %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FetchError(str(path), "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(str(path), str(e)) from e

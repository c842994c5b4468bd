"""
Base crawler class defining the interface for all crawlers.

Also holds the retrieval layer: a URL becomes a response body, a
``HttpStatusError`` carrying the status code, or a ``TransportError``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import requests

from ...config.settings import Config
from ...retry import RetryPolicy, retry_call

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base class for retrieval failures."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class HttpStatusError(FetchError):
    """The server answered with a non-success status."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"bad HTTP status: {status_code} for {url}")

    @property
    def retriable(self) -> bool:
        return self.status_code >= 500 or self.status_code == 429


class TransportError(FetchError):
    """The request never produced a response (DNS, connection, timeout...)."""

    retriable = True

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(url, f"request to {url} failed: {cause}")


class BaseCrawler(ABC):
    """Abstract base class for all crawlers."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """
        Initialize base crawler.

        Args:
            config: Configuration object
            session: HTTP session to reuse; a new one is created if omitted
        """
        self.config = config
        self.headers = config.headers
        self.timeout = config.timeout
        self.max_retries = config.max_retries

        self.session = session or requests.Session()
        self.session.headers.update(self.headers)

    @abstractmethod
    def crawl(self) -> List[Any]:
        """
        Crawl the target URL and return parsed records.

        Returns:
            Records exposing ``headline`` and ``body``
        """
        pass

    def fetch(self, url: str) -> str:
        """
        Fetch URL body as text, retrying transient failures.

        Args:
            url: URL to fetch

        Returns:
            Response body

        Raises:
            HttpStatusError: On a non-2xx response
            TransportError: If no response could be obtained
        """
        policy = RetryPolicy(
            max_attempts=self.max_retries,
            retriable_errors=[TransportError, HttpStatusError],
        )
        return retry_call(self._fetch_once, url, policy=policy)

    def _fetch_once(self, url: str) -> str:
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, e) from e

        if not 200 <= response.status_code < 300:
            raise HttpStatusError(url, response.status_code)

        # Ensure proper encoding
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding
        return response.text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(target_url={self.config.target_url})"


__all__ = ["BaseCrawler", "FetchError", "HttpStatusError", "TransportError"]

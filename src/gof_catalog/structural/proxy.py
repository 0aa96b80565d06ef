"""
Proxy - a stand-in that controls access to a real subject.

Two flavours over the same book store interface:

- LazyBookStore (virtual proxy) builds the expensive store on first use
- ProtectedBookStore (protection proxy) refuses access until authorized

A refused access is an ordinary AccessResult, not an exception.
"""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    number: int
    text: str


class PageSource(ABC):
    """Subject interface."""

    @abstractmethod
    def get_page(self, number: int) -> Page | None:
        """Return a page, or None if the book has no such page."""


class BookStore(PageSource):
    """Real subject. Loading the pages is the expensive part."""

    def __init__(self, pages: list[str], sink: OutputSink):
        self.sink = sink
        self.sink.emit(f"Loading {len(pages)} pages from storage")
        self._pages = [Page(number, text) for number, text in enumerate(pages, start=1)]

    def get_page(self, number: int) -> Page | None:
        if 1 <= number <= len(self._pages):
            return self._pages[number - 1]
        return None


class LazyBookStore(PageSource):
    """Virtual proxy: nothing is loaded until a page is requested."""

    def __init__(self, pages: list[str], sink: OutputSink):
        self._source_pages = pages
        self._sink = sink
        self._store: BookStore | None = None

    @property
    def is_loaded(self) -> bool:
        return self._store is not None

    def get_page(self, number: int) -> Page | None:
        if self._store is None:
            logger.debug("First page request, creating the real store")
            self._store = BookStore(self._source_pages, self._sink)
        return self._store.get_page(number)


@dataclass(frozen=True)
class AccessResult:
    """Outcome of a guarded request."""

    granted: bool
    page: Page | None = None
    reason: str | None = None


class ProtectedBookStore:
    """Protection proxy: every request is denied until authorize() succeeds."""

    def __init__(self, subject: PageSource, token: str):
        self._subject = subject
        self._token = token
        self._authorized = False

    @property
    def authorized(self) -> bool:
        return self._authorized

    def authorize(self, token: str) -> bool:
        # compare_digest rejects non-ASCII str, so compare the encoded bytes
        self._authorized = hmac.compare_digest(token.encode("utf-8"), self._token.encode("utf-8"))
        return self._authorized

    def get_page(self, number: int) -> AccessResult:
        if not self._authorized:
            return AccessResult(granted=False, reason="not authorized")
        page = self._subject.get_page(number)
        if page is None:
            return AccessResult(granted=True, reason=f"no page {number}")
        return AccessResult(granted=True, page=page)


def run_scenario(sink: OutputSink) -> None:
    """Read through a lazy store, then through a guarded one."""
    pages = ["It was a bright cold day in April.", "The clocks were striking thirteen."]

    lazy = LazyBookStore(pages, sink)
    sink.emit(f"Store loaded: {lazy.is_loaded}")
    first = lazy.get_page(1)
    sink.emit(f"Page 1: {first.text if first else '-'}")
    second = lazy.get_page(2)
    sink.emit(f"Page 2: {second.text if second else '-'}")

    guarded = ProtectedBookStore(lazy, token="s3cret")
    for token in (None, "wrong", "s3cret"):
        if token is not None:
            sink.emit(f"Authorizing with '{token}': {guarded.authorize(token)}")
        result = guarded.get_page(1)
        if result.granted and result.page is not None:
            sink.emit(f"Access granted: {result.page.text}")
        else:
            sink.emit(f"Access denied: {result.reason}")

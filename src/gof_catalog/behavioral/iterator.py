"""
Iterator - walk a collection without knowing how it is stored.

A numerator over a library is finite and single-use: once exhausted it
keeps returning None, and walking again needs a new numerator.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink


@dataclass(frozen=True)
class Book:
    name: str


class LibraryNumerator:
    """Cursor over a library's books."""

    def __init__(self, library: Library):
        self._library = library
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._library)

    def next(self) -> Book | None:
        """Return the next book, or None once every book was returned."""
        if not self.has_next():
            return None
        book = self._library[self._position]
        self._position += 1
        return book


class Library:
    """Aggregate."""

    def __init__(self, books: list[Book] | None = None):
        self._books: list[Book] = list(books or [])

    def add(self, book: Book) -> None:
        self._books.append(book)

    def create_numerator(self) -> LibraryNumerator:
        return LibraryNumerator(self)

    def __len__(self) -> int:
        return len(self._books)

    def __getitem__(self, index: int) -> Book:
        return self._books[index]

    def __iter__(self) -> Iterator[Book]:
        numerator = self.create_numerator()
        while numerator.has_next():
            book = numerator.next()
            if book is not None:
                yield book


class Reader:
    """Client that reads every book through a numerator."""

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def see_books(self, library: Library) -> int:
        """Read all books and return how many were read."""
        numerator = library.create_numerator()
        count = 0
        while (book := numerator.next()) is not None:
            self.sink.emit(f"Reading: {book.name}")
            count += 1
        return count


def run_scenario(sink: OutputSink) -> None:
    """Read a small library twice with two separate numerators."""
    library = Library(
        [Book("War and Peace"), Book("Fathers and Sons"), Book("The Cherry Orchard")]
    )
    reader = Reader(sink)
    reader.see_books(library)

    numerator = library.create_numerator()
    while numerator.next() is not None:
        pass
    sink.emit(f"Exhausted numerator returns: {numerator.next()}")
    sink.emit(f"Books read again: {reader.see_books(library)}")

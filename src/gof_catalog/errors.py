"""
Errors raised by the catalog.

Expected negative outcomes (an unhandled payment request, a denied proxy
access, an exhausted iterator) are return values and never appear here.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidArgumentError(CatalogError, ValueError):
    """
    A caller broke an operation's contract.

    Raised for inputs an operation cannot accept, such as restoring a
    memento from a missing snapshot or requesting an unknown flyweight.
    """

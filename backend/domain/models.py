"""
Core domain models for the books API.
These are framework-agnostic and can be used across all layers.
"""
from dataclasses import dataclass, replace
from typing import Optional
import uuid


@dataclass
class Book:
    """A book in the catalogue."""
    id: str
    title: str
    author: str

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())


@dataclass
class BookChanges:
    """
    Values to write onto an existing book.

    A field left as None is absent and keeps the stored value.
    Setting both fields is a full replace.
    """
    title: Optional[str] = None
    author: Optional[str] = None


def merge_book(book: Book, changes: BookChanges) -> Book:
    """Return a copy of `book` with every present field of `changes` applied.

    Present fields overwrite, absent ones retain. The id never changes.
    """
    return replace(
        book,
        title=changes.title if changes.title is not None else book.title,
        author=changes.author if changes.author is not None else book.author,
    )

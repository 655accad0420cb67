"""
Book repository backed by SQLAlchemy/SQLite.
"""
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.models import Book, BookChanges, merge_book
from repositories.models import BookORM

logger = logging.getLogger(__name__)


class BookNotFoundError(LookupError):
    """Raised when an update or delete targets a book that does not exist."""

    def __init__(self, book_id: str):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


class DuplicateBookError(ValueError):
    """Raised when inserting a book whose id is already stored."""

    def __init__(self, book_id: str):
        super().__init__(f"Book already exists: {book_id}")
        self.book_id = book_id


def _book_from_orm(orm: BookORM) -> Book:
    return Book(id=orm.id, title=orm.title, author=orm.author)


class BooksRepository:
    """CRUD operations for books."""

    def list_books(self, session: Session) -> List[Book]:
        books = session.query(BookORM).all()
        return [_book_from_orm(b) for b in books]

    def get_book(self, session: Session, book_id: str) -> Optional[Book]:
        orm = session.get(BookORM, book_id)
        if not orm:
            return None
        return _book_from_orm(orm)

    def search_by_title(self, session: Session, text: str) -> List[Book]:
        # instr() is case-sensitive, unlike LIKE on SQLite
        books = session.query(BookORM).filter(func.instr(BookORM.title, text) > 0).all()
        return [_book_from_orm(b) for b in books]

    def list_by_author(self, session: Session, author: str) -> List[Book]:
        books = session.query(BookORM).filter(BookORM.author == author).all()
        return [_book_from_orm(b) for b in books]

    def count_books(self, session: Session) -> int:
        return session.query(func.count(BookORM.id)).scalar() or 0

    def create_book(self, session: Session, book: Book) -> Book:
        orm = BookORM(id=book.id, title=book.title, author=book.author)
        session.add(orm)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.warning("Rejected duplicate book id %s", book.id)
            raise DuplicateBookError(book.id) from exc
        session.refresh(orm)
        logger.info("Created book %s", orm.id)
        return _book_from_orm(orm)

    def update_book(self, session: Session, book_id: str, changes: BookChanges) -> Book:
        orm = session.get(BookORM, book_id)
        if not orm:
            raise BookNotFoundError(book_id)
        merged = merge_book(_book_from_orm(orm), changes)
        orm.title = merged.title
        orm.author = merged.author
        session.add(orm)
        session.commit()
        session.refresh(orm)
        logger.info("Updated book %s", book_id)
        return _book_from_orm(orm)

    def delete_book(self, session: Session, book_id: str) -> Book:
        orm = session.get(BookORM, book_id)
        if not orm:
            raise BookNotFoundError(book_id)
        deleted = _book_from_orm(orm)
        session.delete(orm)
        session.commit()
        logger.info("Deleted book %s", book_id)
        return deleted

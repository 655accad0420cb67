"""
Books API routes.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from db import get_session
from domain.models import Book, BookChanges
from repositories import BookNotFoundError, BooksRepository

router = APIRouter()
books_repo = BooksRepository()
logger = logging.getLogger(__name__)


class BookCreate(BaseModel):
    title: str
    author: str


class BookPatch(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None


class BookResponse(BaseModel):
    id: str
    title: str
    author: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(id=book.id, title=book.title, author=book.author)


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Book not found")


@router.get("", response_model=List[BookResponse])
async def list_books(session: Session = Depends(get_session)):
    """List all books."""
    return [book_to_response(b) for b in books_repo.list_books(session)]


@router.get("/count", response_model=int)
async def count_books(session: Session = Depends(get_session)):
    """Return the number of stored books."""
    return books_repo.count_books(session)


@router.get("/search/{title}", response_model=List[BookResponse])
async def search_books(title: str, session: Session = Depends(get_session)):
    """Find books whose title contains the given text."""
    books = books_repo.search_by_title(session, title)
    if not books:
        raise HTTPException(status_code=404, detail="No books match this title")
    return [book_to_response(b) for b in books]


@router.get("/author/{author}", response_model=List[BookResponse])
async def books_by_author(author: str, session: Session = Depends(get_session)):
    """Find books written by exactly this author."""
    books = books_repo.list_by_author(session, author)
    if not books:
        raise HTTPException(status_code=404, detail="No books by this author")
    return [book_to_response(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str, session: Session = Depends(get_session)):
    """Get a book by ID."""
    book = books_repo.get_book(session, book_id)
    if not book:
        raise _not_found()
    return book_to_response(book)


@router.post("", response_model=BookResponse)
async def create_book(data: BookCreate, session: Session = Depends(get_session)):
    """Create a new book. Any id in the body is ignored."""
    book = Book(id=Book.generate_id(), title=data.title, author=data.author)
    saved = books_repo.create_book(session, book)
    return book_to_response(saved)


@router.put("/{book_id}", response_model=BookResponse)
async def replace_book(book_id: str, data: BookCreate, session: Session = Depends(get_session)):
    """Replace the title and author of an existing book."""
    changes = BookChanges(title=data.title, author=data.author)
    try:
        updated = books_repo.update_book(session, book_id, changes)
    except BookNotFoundError:
        raise _not_found()
    return book_to_response(updated)


@router.patch("/{book_id}", response_model=BookResponse)
async def patch_book(book_id: str, data: BookPatch, session: Session = Depends(get_session)):
    """Update only the fields present in the body."""
    changes = BookChanges(**data.model_dump(exclude_unset=True))
    try:
        updated = books_repo.update_book(session, book_id, changes)
    except BookNotFoundError:
        raise _not_found()
    return book_to_response(updated)


@router.delete("/{book_id}", response_model=BookResponse)
async def delete_book(book_id: str, session: Session = Depends(get_session)):
    """Delete a book and return it."""
    try:
        deleted = books_repo.delete_book(session, book_id)
    except BookNotFoundError:
        logger.info("Delete requested for missing book %s", book_id)
        raise _not_found()
    return book_to_response(deleted)

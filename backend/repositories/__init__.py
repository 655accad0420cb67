from .books import BookNotFoundError, BooksRepository, DuplicateBookError
from . import models

__all__ = ["BooksRepository", "BookNotFoundError", "DuplicateBookError", "models"]

"""CRUD operations for bookmark entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Bookmark

bookmark_crud: FastCRUD = FastCRUD(Bookmark)

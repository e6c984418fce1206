"""CRUD operations for track entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Track

track_crud: FastCRUD = FastCRUD(Track)

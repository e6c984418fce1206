"""CRUD operations for anchor entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Anchor

anchor_crud: FastCRUD = FastCRUD(Anchor)

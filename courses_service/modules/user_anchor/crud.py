"""CRUD operations for user anchor entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import UserAnchor

user_anchor_crud: FastCRUD = FastCRUD(UserAnchor)

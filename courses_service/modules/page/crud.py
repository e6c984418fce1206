"""CRUD operations for page entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Page

page_crud: FastCRUD = FastCRUD(Page)

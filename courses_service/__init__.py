"""Courses domain service: documents, pages, tracks and their annotations."""

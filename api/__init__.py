"""
FastAPI application for the Middle-earth Books service.

This module provides:
- GET /api/books, the projected upstream book list
- The Home and Search pages
- A health check
"""

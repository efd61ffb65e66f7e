"""FastAPI REST API for paint quotations.

This module provides a REST API for room areas, full quotations and
estimate validation.

Usage:
    uvicorn paintquote.web:app --reload
"""

from paintquote.web.app import app, create_app

__all__ = ["app", "create_app"]

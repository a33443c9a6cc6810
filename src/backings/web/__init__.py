"""FastAPI REST API for backing analysis.

This module provides a REST API for analyzing backing layouts, validating
layout documents, and exporting material schedules.

Usage:
    uvicorn backings.web:app --reload
"""

from backings.web.app import app, create_app

__all__ = ["app", "create_app"]

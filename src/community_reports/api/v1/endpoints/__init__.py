# src/community_reports/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .reports import router as reports_router

__all__ = ["reports_router"]

# src/community_reports/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import reports_router

__all__ = ["reports_router"]

"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from lumina_finance.config import settings
from lumina_finance.domain.models import SitePolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_site_policy() -> SitePolicy:
    """Provide the site finance policy"""
    return settings.site_policy()

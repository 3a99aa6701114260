"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from gameplan_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_max_term_periods() -> int:
    """Provide the longest loan term the calculator will accept"""
    return settings.max_term_periods

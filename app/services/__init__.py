"""Services for the checker."""

from .checker import CheckerService, get_checker

__all__ = ["CheckerService", "get_checker"]

"""Route handlers."""

from .check import router as check_router
from .detect import router as detect_router
from .health import router as health_router
from .root import router as root_router

__all__ = ["root_router", "health_router", "detect_router", "check_router"]

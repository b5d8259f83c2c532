"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that map HTTP
requests onto application use cases.
"""

from .status_controller import router as status_router

__all__ = ["status_router"]

"""
Application Layer Package

This package contains the application-specific use cases. It drives the
domain ports and shapes their results for the presentation layer.
"""

# Re-export submodules
from official_status.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]

"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate domain ports and
convert their results into DTOs.
"""

from .status_use_cases import CheckOfficialStatusUseCase

__all__ = ["CheckOfficialStatusUseCase"]

"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .status_dto import StatusResultDTO

__all__ = ["StatusResultDTO"]

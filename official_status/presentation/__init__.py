"""
Presentation Layer Package

This package contains the HTTP surface of the application.
"""

from official_status.presentation import controllers

__all__ = ["controllers"]

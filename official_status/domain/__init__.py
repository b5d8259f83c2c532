"""
Domain Layer Package

This package contains the core rules of the application: the health
vocabulary, probe failure variants and indicator classification. It has
no dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from official_status.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]

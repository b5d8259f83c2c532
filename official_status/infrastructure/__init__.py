"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as HTTP calls to
third-party status pages and log sinks.
"""

from official_status.infrastructure import services

__all__ = ["services"]

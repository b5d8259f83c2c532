"""
Ports Package - Domain Layer

Interfaces the domain expects infrastructure to implement.
"""

from .status_probe import IErrorLogger, IStatusProbe

__all__ = ["IStatusProbe", "IErrorLogger"]

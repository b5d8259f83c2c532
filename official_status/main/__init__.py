"""
Main module - Main/Composition Root Layer

This module wires settings, the dependency container and the entry points
(FastAPI app and command line) of the application.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]

"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from official_status.application.use_cases.status_use_cases import (
    CheckOfficialStatusUseCase,
)
from official_status.infrastructure.services.error_logger import StructlogErrorLogger
from official_status.infrastructure.services.status_page_probe import StatusPageProbe

from .config import AppSettings


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    error_logger = providers.Singleton(StructlogErrorLogger)

    status_probe = providers.Singleton(
        StatusPageProbe,
        endpoint=config.status.endpoint,
        error_logger=error_logger,
        timeout_ms=config.status.timeout_ms.as_int(),
    )

    # Application (use cases)
    check_official_status_use_case = providers.Factory(
        CheckOfficialStatusUseCase,
        status_probe=status_probe,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container

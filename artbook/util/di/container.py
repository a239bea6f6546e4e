"""Dependency injection containers."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from artbook.util.di import CLIENT_PROVIDERS, PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the API server container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def create_client_container() -> AsyncContainer:
    """Build the container for processes that talk to the API as a client."""
    provider_instances = [
        get_provider(base, use_mock=False)() for base in CLIENT_PROVIDERS
    ]
    return make_async_container(*provider_instances)


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)

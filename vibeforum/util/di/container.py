"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from vibeforum.util.di import PROVIDERS, Component, get_provider
from vibeforum.util.di.base import ProviderBase


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry of ``PROVIDERS``.

    Args:
        mocked: Mockable components that should use their mock implementation

    Returns:
        Provider instances, in registration order
    """
    providers = []
    for base in PROVIDERS:
        use_mock = base.__mock_component__ in mocked
        providers.append(get_provider(base, use_mock=use_mock)())
    return providers


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.
    """
    # FastapiProvider exposes the incoming Request in the REQUEST scope
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI application."""
    setup_dishka(container, app)

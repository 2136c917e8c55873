"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from attend.util.di import COMPONENTS, PROVIDERS, Component


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the DI container.

    Settings are loaded from environment variables when first resolved.

    Args:
        mocked: Components to back with in-memory implementations. Their
            mock providers must already be imported.

    Returns:
        Container that also serves FastAPI requests

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the application."""
    setup_dishka(container, app)

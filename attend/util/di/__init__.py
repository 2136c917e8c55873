"""Dependency injection module."""

from attend.util.di.application import ProdApplicationProvider
from attend.util.di.base import COMPONENTS, Component, ProviderBase
from attend.util.di.core import ProdConfigProvider
from attend.util.di.domain import ProdDomainProvider
from attend.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Concrete providers first, then component bases resolved per container
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]

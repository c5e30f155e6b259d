"""Dependency injection module."""

from typing import Type

from gate.util.di.application import ProdApplicationProvider
from gate.util.di.base import Component, ProviderBase
from gate.util.di.core import ProdConfigProvider
from gate.util.di.domain import ProdDomainProvider
from gate.util.di.infrastructure import (
    ClockProvider,
    EmailProvider,
    ProdClockProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)
from gate.util.error import DependencyInjectionError

# Container build order; mockable bases resolve to an implementation
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    ClockProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider class from ``PROVIDERS``.

    Args:
        base: Concrete provider or mockable component base
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class, not instantiated

    Raises:
        DependencyInjectionError: If the component lacks the requested implementation
    """
    if not base.is_mockable():
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    raise DependencyInjectionError(base.__mock_component__ or base.__name__, use_mock)


def mockable_components() -> set[str]:
    """Names of every component that has a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdPersistenceProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ClockProvider",
    "EmailProvider",
    "ProdClockProvider",
    "ProdEmailProvider",
]

"""Dependency injection wiring.

Providers come in two kinds. Concrete providers (config, domain,
application) are used as they are. A mockable component such as
persistence is an abstract provider whose subclasses are the production
and the in-memory implementation; `get_provider` picks one of them.
"""

from typing import Type

from redditclone.util.di.application import ProdApplicationProvider
from redditclone.util.di.base import Component, ProviderBase
from redditclone.util.di.core import ProdConfigProvider
from redditclone.util.di.domain import ProdDomainProvider
from redditclone.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the in-memory implementation of a mockable component

    Returns:
        The entry itself when it has no implementations, otherwise the
        implementation whose __is_mock__ matches use_mock

    Raises:
        ValueError: If the component lacks the requested implementation
    """
    implementations = {
        getattr(impl, "__is_mock__", False): impl for impl in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]

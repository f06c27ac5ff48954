"""Provider base class shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have a production and an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider carrying mock-selection metadata.

    Attributes:
        __mock_component__: Name of the swappable component, None for
            providers that are always used as they are
        __is_mock__: True on the in-memory implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

"""DI provider metadata.

A component is a swappable slice of the container. Its base provider names
it with ``__mock_component__``; the production and in-memory implementations
subclass that base and set ``__is_mock__``.
"""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence"]
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is an in-memory implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the provider class to instantiate for this base.

        Providers without subclasses are used as they are.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        implementations = cls.__subclasses__()
        if not implementations:
            return cls

        for impl in implementations:
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )

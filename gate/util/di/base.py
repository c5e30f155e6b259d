"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests can swap for a mock
Component = Literal["email", "clock"]


class ProviderBase(Provider):
    """Common base of every provider in the container.

    A provider without subclasses is concrete and used as is. A mockable
    component names itself in ``__mock_component__`` and has one production
    and one mock subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether implementations are chosen among subclasses."""
        return bool(cls.__subclasses__())

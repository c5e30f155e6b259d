"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases turn expected domain failures into response models; anything
    else propagates to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

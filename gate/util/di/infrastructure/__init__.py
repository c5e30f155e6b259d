"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .email import EmailProvider
from .persistence import ProdPersistenceProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .email import ProdEmailProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "EmailProvider",
    "ProdClockProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]

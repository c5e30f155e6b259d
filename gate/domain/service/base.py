"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the invite lifecycle rules that span both the
    invite and the throttle mappings.
    """

    pass

"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or inconsistent for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    def __init__(self, component: str, use_mock: bool) -> None:
        self.component = component
        self.use_mock = use_mock
        kind = "mock" if use_mock else "production"
        super().__init__(f"No {kind} implementation for {component}")

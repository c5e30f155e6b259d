"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider rejected a request."""

    def __init__(self, provider: str, status_code: int, detail: str = "") -> None:
        self.provider = provider
        self.status_code = status_code
        self.detail = detail
        message = f"{provider} returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

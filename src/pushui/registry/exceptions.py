"""Exceptions raised while talking to the component registry."""


class RegistryError(Exception):
    """Base class for registry failures."""


class RegistryFetchError(RegistryError):
    """Raised when a registry URL cannot be fetched.

    status_code is None when no HTTP response was received at all.
    """

    def __init__(self, url: str, status_code: int | None, detail: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            message = f"Failed to fetch {url}: {detail}"
        elif detail:
            message = f"Failed to fetch {url}: {status_code} {detail}"
        else:
            message = f"Failed to fetch {url}: {status_code}"
        super().__init__(message)


class RegistryValidationError(RegistryError):
    """Raised when the registry manifest does not match the expected schema."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Invalid registry manifest at {url}: {detail}")

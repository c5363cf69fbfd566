"""Custom exceptions for the DashX client."""


class DashXClientError(Exception):
    """Base exception for all DashX client errors."""


class DashXConfigurationError(DashXClientError):
    """Raised when a required credential or environment value is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"DashX client is missing required configuration: {', '.join(missing)}"
        )


class DashXInvalidLocatorError(DashXClientError, ValueError):
    """Raised when a resource locator lacks its '{type}/{id}' separator."""

    def __init__(self, locator: str, expected: str):
        self.locator = locator
        self.expected = expected
        super().__init__(f"URN must be of form: {expected} (got {locator!r})")


class DashXGraphQLError(DashXClientError):
    """Raised when the API responds with a root-level errors envelope.

    The envelope's ``errors`` value is kept verbatim on ``.errors``.
    """

    def __init__(self, errors: object):
        self.errors = errors
        if isinstance(errors, list):
            messages = [
                e.get("message", str(e)) if isinstance(e, dict) else str(e)
                for e in errors
            ]
            message = f"GraphQL errors: {'; '.join(messages)}"
        else:
            message = f"GraphQL errors: {errors}"
        super().__init__(message)

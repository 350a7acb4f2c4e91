"""Error types raised while loading config and registering records."""


class NotionRegisterError(Exception):
    """Base class for every failure the CLI reports."""


class MissingConfigError(NotionRegisterError):
    """Required environment values are absent or empty."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"{' and '.join(missing)} must be set")


class PayloadError(NotionRegisterError):
    """The request body could not be serialized."""


class RequestBuildError(NotionRegisterError):
    """The HTTP request could not be assembled, e.g. a non-ASCII token."""


class TransportError(NotionRegisterError):
    """The request never produced an HTTP response."""


class NotionAPIError(NotionRegisterError):
    """Notion answered with a status other than 200.

    The raw body is kept as text; it is usually JSON but is not parsed.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status: {status_code}): {body}")

from __future__ import annotations


class VKAuthError(Exception):
    """Base class for errors raised by the VK OAuth client."""


class BadCodeError(VKAuthError):
    """The redirect request carried no authorization code (denied or blank)."""

    def __init__(self, message: str = "bad code"):
        super().__init__(message)


class BadResponseError(VKAuthError):
    """The server answered with an unexpected response shape."""

    def __init__(self, message: str = "bad server response"):
        super().__init__(message)

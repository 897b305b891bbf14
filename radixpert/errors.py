"""Relay error taxonomy.

Every error carries a user-readable ``message`` and the HTTP status it maps
to when it reaches the relay surface.
"""


class RadixpertError(Exception):
    """Base class for errors produced by the relays."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputValidationError(RadixpertError):
    """A required request field is missing."""

    status_code = 400


class ConfigurationError(RadixpertError):
    """A required credential is not configured."""


class UpstreamError(RadixpertError):
    """The inference endpoint answered with an explicit error."""


class TransportError(RadixpertError):
    """The inference endpoint could not be reached or its answer parsed."""

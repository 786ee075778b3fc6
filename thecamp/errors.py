from __future__ import annotations


class TheCampError(Exception):
    """Base class for every error raised by the thecamp client."""

    pass


class TransportError(TheCampError):
    """Raised when a request cannot be completed (network, timeout, HTTP status)."""

    pass


class DecodeError(TheCampError):
    """Raised when a response body or nested field is not valid JSON."""

    pass


class ProtocolError(TheCampError):
    """Raised for well-formed JSON that breaks the API contract.

    Covers non-success result codes, missing or wrong-shaped fields and
    invalid arguments such as an unknown sort order.
    """

    pass


class InvalidStateError(TheCampError):
    """Raised when a letters iterator is used out of order."""

    pass

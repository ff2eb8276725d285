"""Error hierarchy shared by the codec, the schema engine and the transport.

Every error derives from `EthEventError` (itself a `ValueError`), so callers can
catch one type for anything that went wrong while encoding, decoding or querying.
"""

from __future__ import annotations


class EthEventError(ValueError):
    """Base class for all ethevent errors."""


class CodecOverflowError(EthEventError):
    """Value does not fit the requested bit width or byte length."""


class TooLongError(EthEventError):
    """Input exceeds a fixed-width field before padding."""


class TruncatedError(EthEventError):
    """Not enough input left for a fixed-width chunk."""


class UnrecognizedTypeError(EthEventError):
    """Type tag (or type spelling) is not supported."""


class InvalidValueError(EthEventError):
    """Value has the wrong Python type, non-hex digits or an out-of-domain value."""


class MalformedLogError(EthEventError):
    """A JSON-RPC log or result is missing expected fields."""


class SignatureMismatchError(EthEventError):
    """A log's topic zero does not belong to the decoded event."""


class RPCError(EthEventError):
    """The node answered with a JSON-RPC error or an unreadable response."""

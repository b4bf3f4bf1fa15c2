"""Exception hierarchy for binarycoder.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BinaryCoderError for easy catching of any binarycoder error.

Encoding and decoding have disjoint taxonomies: every encoder failure is an
EncodeError and every decoder failure is a DecodeError.
"""

from __future__ import annotations


class BinaryCoderError(Exception):
    """Base exception for all binarycoder errors."""

    pass


class EncodeError(BinaryCoderError):
    """Raised when writing values to a byte sink fails."""

    pass


class InvalidValueError(EncodeError):
    """Raised when a value cannot be represented by its codec.

    Examples:
        - 256 pushed as UInt8
        - A float too large for Float16
        - A non-integer pushed through an integer codec
    """

    pass


class InsufficientSpaceError(EncodeError):
    """Raised when the sink accepted fewer bytes than it was given."""

    pass


class EncodeStreamError(EncodeError):
    """Raised when the sink reported a definite failure.

    Attributes:
        cause: The sink's own exception, or None if the sink gave no detail
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnexpectedSinkBehaviorError(EncodeError):
    """Raised when the sink returned a result outside its contract.

    Examples:
        - Reported writing more bytes than it was given
        - Returned None or a negative count other than -1
    """

    pass


class DecodeError(BinaryCoderError):
    """Raised when reading values from a byte source fails."""

    pass


class NoMoreDataError(DecodeError):
    """Raised when the source is cleanly exhausted but at least one byte was expected."""

    pass


class InsufficientDataError(DecodeError):
    """Raised when fewer bytes are available than a read requires.

    Examples:
        - Short read from the source
        - Read request larger than the decoder's remaining budget
        - Sub-region size larger than the remaining budget
    """

    pass


class DataCorruptedError(DecodeError):
    """Raised when decoded content fails validation.

    Examples:
        - Checksum mismatch in a checksummed section
        - Trailing bytes after a value decoded with exact=True
        - A discriminant outside the range a decodable type accepts
    """

    pass


class DecodeStreamError(DecodeError):
    """Raised when the source reported a definite failure.

    Attributes:
        cause: The source's own exception, or None if the source gave no detail
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnexpectedSourceBehaviorError(DecodeError):
    """Raised when the source returned a result outside its contract."""

    pass

# =============================================================================
# antifragile -- CONVEXITY CLASSIFICATION ENGINE
# File:   antifragile/core/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exception hierarchy for classification conversions and record loading.
# All exceptions are pure value objects: no side effects, no logging,
# no external references, no I/O of any kind.
#
# EXCEPTION HIERARCHY
# -------------------
#   TriadError(ValueError)                 -- base; never raised directly
#     InvalidTriadValue(TriadError)        -- discrete value outside {0, 1, 2}
#     ParseTriadError(TriadError)          -- unrecognised textual token
#     RecordFormatError(TriadError)        -- malformed serialized record
#
# ValueError is the base so that callers using the usual Python idiom
# (`except ValueError`) around conversions keep working.
#
# MESSAGE CONTRACT
# ----------------
# Every exception message is:
#   - Deterministic: identical inputs -> identical message string.
#   - ASCII-safe: no Unicode outside the basic Latin block.
#   - Non-empty.
# ParseTriadError never echoes the rejected input. The accepted domain is a
# closed set of three tokens; the message lists them instead.
#
# =============================================================================

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class TriadError(ValueError):
    """
    Base class for all classification exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        value:    The offending value, or None when the error is opaque
                  (ParseTriadError) or relational (RecordFormatError).
        message:  Human-readable description. Always non-empty.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "TriadError: message must be a non-empty string"
            )
        super().__init__(message)
        self.value:   Any = value
        self.message: str = message

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriadError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.value == other.value
            and self.message == other.message
        )


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class InvalidTriadValue(TriadError):
    """
    Raised when a discrete value does not map to a classification.

    Valid values are exactly the ranks 0, 1 and 2. Anything else, including
    integers outside the byte range and non-integer objects, is rejected.
    The offending value is kept on the exception for programmatic
    inspection.

    Message format:
        "invalid triad value: <value> (expected 0, 1, or 2)"
    """

    def __init__(self, value: Any) -> None:
        message = (
            "invalid triad value: "
            + str(value)
            + " (expected 0, 1, or 2)"
        )
        super().__init__(message=message, value=value)


class ParseTriadError(TriadError):
    """
    Raised when a string is not one of the three classification tokens.

    Opaque by construction: takes no arguments and carries no diagnostics
    about the rejected input.
    """

    def __init__(self) -> None:
        super().__init__(
            message=(
                'invalid triad string (expected "antifragile", '
                '"fragile", or "robust")'
            )
        )


class RecordFormatError(TriadError):
    """
    Raised by the record loader when a serialized classification record is
    structurally valid JSON but violates the record contract: unknown
    format version, or a token and rank that disagree.

    Message format:
        "record format error: <detail>"
    """

    def __init__(self, detail: str, value: Any = None) -> None:
        if not isinstance(detail, str) or not detail:
            raise ValueError(
                "RecordFormatError: detail must be a non-empty string"
            )
        super().__init__(message="record format error: " + detail, value=value)
        self.detail: str = detail


# =============================================================================
# MODULE __all__
# =============================================================================

__all__ = [
    "TriadError",
    "InvalidTriadValue",
    "ParseTriadError",
    "RecordFormatError",
]

"""Exceptions raised while building curves.

Every error is raised synchronously from the build and carries a single
descriptive message. Validation errors are also ``ValueError`` so callers that
only care about bad input can catch the builtin.
"""


class CurveError(Exception):
    """Base class for all curve errors."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Curve: {message}")


class InvalidRange(CurveError, ValueError):
    """A key point coordinate lies outside [0, 1]."""


class NonMonotonic(CurveError, ValueError):
    """Key points are not strictly increasing on the x-axis at grid resolution."""


class DegenerateCurve(CurveError, ValueError):
    """Exactly one key point was given."""


class MalformedInput(CurveError, ValueError):
    """Caller supplied arguments of the wrong shape or value."""


class UnsupportedFormat(MalformedInput):
    """Sample format is float or outside the 8-16 bit integer range."""


class InvalidFormat(CurveError, ValueError):
    """Curve file bytes do not follow the expected layout."""


class TruncatedFile(InvalidFormat):
    """Curve file ended before a complete record could be read."""


class IOFailure(CurveError, OSError):
    """Curve file could not be opened or read."""


class OutOfMemory(CurveError, MemoryError):
    """Spline buffers could not be allocated."""

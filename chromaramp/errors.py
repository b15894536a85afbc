"""Exception and warning types raised by chromaramp."""


class EmptyGradientError(ValueError):
    """Raised when a gradient is built from zero control points."""

    def __init__(self, message: str = "a Gradient must contain at least one color"):
        super().__init__(message)


class UnsortedStopsWarning(UserWarning):
    """Control point positions are not in non-decreasing order.

    The points are kept as given; lookups on such a gradient are unspecified.
    """


__all__ = ["EmptyGradientError", "UnsortedStopsWarning"]

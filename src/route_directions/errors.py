"""Errors raised by the route model.

All of them are ValueErrors so tool handlers can report them the same way
they report any other bad input.
"""


class RouteError(ValueError):
    """Base class for route model precondition failures."""


class OutOfRangeError(RouteError):
    """A coordinate lies outside the valid latitude/longitude bounds."""


class NameMismatchError(RouteError):
    """A segment's name differs from the feature it is appended to."""


class DisconnectedError(RouteError):
    """A segment does not start where the feature or route ends."""

"""Taiga exception hierarchy.

Centralised base classes so callers can catch decision-core failures
without resorting to bare ``except Exception`` blocks.
"""


class TaigaError(Exception):
    """Root of all Taiga domain exceptions."""


class ConfigurationError(TaigaError):
    """Invalid or missing configuration (e.g. an incomplete value table)."""


class DecisionError(TaigaError):
    """Errors while computing a creature's decision."""


class InvalidVisibilityError(DecisionError, ValueError):
    """A visibility snapshot violates its contract.

    Raised for non-positive world extents or cells/units positioned outside
    the declared width and height.
    """


class UnknownSpeciesError(TaigaError, LookupError):
    """No decision engine is registered for the requested species."""

"""Custom exception hierarchy for grid generation."""


class CrosswordGridError(Exception):
    """Base exception for the crossgrid package."""


class GridConfigError(CrosswordGridError, ValueError):
    """Raised when a configuration value is not a usable number."""


class ValidationError(CrosswordGridError):
    """Raised when the grid integrity checks fail."""

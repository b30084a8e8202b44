class ForecastError(Exception):
    """Base class for all season forecast errors."""


class InsufficientDataError(ForecastError):
    """Raised when there is not enough data to produce a projection."""


class InvalidParameterError(ForecastError):
    """Raised when a caller supplies a degenerate or out-of-range model parameter."""


class ForecastConfigError(ForecastError):
    """Raised when model configuration is invalid."""

"""
Custom exception hierarchy for geohash-index.

All custom exceptions inherit from GeohashIndexError for easy catching.
Expected outcomes (a polar neighbor, an overflowing increment, a refused
circle expansion) are return values, not exceptions.
"""
from typing import Iterable, Optional


class GeohashIndexError(Exception):
    """Base exception for all geohash-index errors."""
    pass


class ConfigurationError(GeohashIndexError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Example:
        >>> raise ConfigurationError("Invalid config: codec.default_precision must be <= 12")
    """
    pass


class DataValidationError(GeohashIndexError):
    """Data validation errors.

    Raised when tabular input fails validation checks.

    Attributes:
        invalid_rows: Number of rows that failed validation
        details: Dictionary with validation error details
    """

    def __init__(self, message: str, invalid_rows: int = 0, details: dict = None):
        super().__init__(message)
        self.invalid_rows = invalid_rows
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.invalid_rows > 0:
            return f"{base} (invalid_rows={self.invalid_rows})"
        return base


class GeometryError(GeohashIndexError):
    """Geometric value errors.

    Raised when a box or coordinate is not a valid place on the globe.

    Example:
        >>> raise GeometryError("Box north 10.0 is below south 20.0")
    """
    pass


class InvalidCoordinateError(GeometryError):
    """Latitude or longitude outside its valid range."""

    def __init__(self, latitude: float, longitude: float):
        super().__init__(
            f"Coordinates out of range: latitude={latitude} must be in [-90, 90], "
            f"longitude={longitude} must be in [-180, 180]"
        )
        self.latitude = latitude
        self.longitude = longitude


class InvalidGeohashError(GeohashIndexError):
    """Structurally invalid geohash.

    Raised for an empty code where a character is required, or for a
    range whose endpoints differ in length.

    Attributes:
        geohash: The offending code, when there is a single one
    """

    def __init__(self, message: str, geohash: Optional[str] = None):
        super().__init__(message)
        self.geohash = geohash


class InvalidDigitError(InvalidGeohashError):
    """A character outside the geohash alphabet, or a digit value outside 0..31.

    Example:
        >>> raise InvalidDigitError("a")
    """

    def __init__(self, digit):
        super().__init__(f"Invalid geohash digit: {digit!r}")
        self.digit = digit


class InvalidDirectionError(GeohashIndexError):
    """Unknown direction, or one not supported by the called operation.

    Attributes:
        direction: The direction that was passed
        allowed: Values the operation accepts
    """

    def __init__(self, direction, allowed: Iterable[str] = ()):
        self.direction = direction
        self.allowed = tuple(allowed)
        message = f"Unsupported geohash direction {direction!r}"
        if self.allowed:
            message += f", expected one of {list(self.allowed)}"
        super().__init__(message)


class InvalidPrecisionError(GeohashIndexError):
    """Precision or expansion amount outside its valid range.

    Example:
        >>> raise InvalidPrecisionError("Precision must be >= 1, got 0")
    """
    pass

"""
Tests for custom exceptions.
"""
import pytest
from geohash_index.utils.exceptions import (
    GeohashIndexError,
    ConfigurationError,
    DataValidationError,
    GeometryError,
    InvalidCoordinateError,
    InvalidGeohashError,
    InvalidDigitError,
    InvalidDirectionError,
    InvalidPrecisionError,
)


def test_base_exception():
    """Test base exception."""
    with pytest.raises(GeohashIndexError):
        raise GeohashIndexError("Base error")


def test_configuration_error():
    """Test configuration error."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("Invalid config")

    # Should also be catchable as base class
    with pytest.raises(GeohashIndexError):
        raise ConfigurationError("Invalid config")


def test_data_validation_error():
    """Test data validation error with details."""
    error = DataValidationError(
        "Validation failed",
        invalid_rows=3,
        details={'column': 'latitude'}
    )

    assert error.invalid_rows == 3
    assert error.details['column'] == 'latitude'
    assert "invalid_rows=3" in str(error)


def test_data_validation_error_without_rows():
    error = DataValidationError("Validation failed")
    assert str(error) == "Validation failed"
    assert error.details == {}


def test_invalid_coordinate_error():
    """Coordinate errors carry the values and are geometry errors."""
    error = InvalidCoordinateError(95.0, 10.0)

    assert error.latitude == 95.0
    assert error.longitude == 10.0
    assert "95.0" in str(error)
    assert isinstance(error, GeometryError)


def test_invalid_digit_error():
    """Digit errors are geohash errors."""
    error = InvalidDigitError('a')

    assert error.digit == 'a'
    assert "'a'" in str(error)
    assert isinstance(error, InvalidGeohashError)


def test_invalid_geohash_error():
    error = InvalidGeohashError("Empty geohash", geohash='')
    assert error.geohash == ''


def test_invalid_direction_error():
    error = InvalidDirectionError('up', ['n', 's'])

    assert error.direction == 'up'
    assert error.allowed == ('n', 's')
    assert "['n', 's']" in str(error)


def test_all_inherit_from_base():
    """Test that all custom exceptions inherit from base."""
    exceptions = [
        ConfigurationError("test"),
        DataValidationError("test"),
        GeometryError("test"),
        InvalidCoordinateError(0, 0),
        InvalidGeohashError("test"),
        InvalidDigitError('a'),
        InvalidDirectionError('x'),
        InvalidPrecisionError("test"),
    ]

    for exc in exceptions:
        assert isinstance(exc, GeohashIndexError)

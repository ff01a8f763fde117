"""
Exception classes for fluorophore data access.

Spectral data problems (invalid curves, disabled entries, unparsable numbers)
degrade locally and are never raised. These exceptions cover misuse and
missing data sources:
- ConfigurationError: A data source is unknown, missing or malformed
- CatalogNotLoadedError: The catalog was queried before load()
"""

from __future__ import annotations


class FluorDataError(Exception):
    """Base exception for fluorophore data errors."""

    pass


class ConfigurationError(FluorDataError):
    """
    Raised when a data source cannot be provided.

    Examples:
        - Unknown data source name
        - Data file does not exist
        - YAML document is not a mapping
    """

    pass


class CatalogNotLoadedError(FluorDataError):
    """Raised when a fluorophore catalog is queried before it was loaded."""

    pass

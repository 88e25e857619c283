"""Custom exception hierarchy for the crossword grid model."""


class CrosswordError(Exception):
    """Base exception for grid failures."""


class ConfigurationError(CrosswordError):
    """Raised when a grid is built with inconsistent dimensions or layout."""


class SerializationError(CrosswordError):
    """Raised when a serialized grid payload cannot be decoded."""

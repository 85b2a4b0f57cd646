"""
Domain exceptions for journeys app.
"""


class JourneyServiceError(Exception):
    """Base exception for journey service errors."""
    pass


class JourneyNotFoundError(JourneyServiceError):
    """Raised when a journey does not exist in the owner's archive."""
    pass


class InvalidJourneyNameError(JourneyServiceError):
    """Raised when a journey name is empty."""
    pass

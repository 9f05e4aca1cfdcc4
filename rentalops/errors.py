"""Exception types raised by the scheduling core and its service layer."""


class RentalOpsError(Exception):
    """Base exception for all rentalops errors."""


class ParseError(RentalOpsError, ValueError):
    """Raised when a reservation boundary is not a valid ISO-8601 date-time."""


class InvalidUrgencyError(RentalOpsError, ValueError):
    """Raised when an urgency value is outside the four known tiers."""


class ConfigurationError(RentalOpsError):
    """Raised when settings (e.g. a timezone name) cannot be resolved."""

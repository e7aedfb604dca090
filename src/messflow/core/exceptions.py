class DomainError(Exception):
    """Base exception for MessFlow errors."""


class ValidationError(DomainError):
    """Raised when user input (filters, settings, uploads) is invalid."""


class TelemetryError(DomainError):
    """Raised when the telemetry feed cannot be fetched or decoded."""

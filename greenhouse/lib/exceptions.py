"""Custom exceptions for the greenhouse monitor."""


class GreenhouseError(Exception):
    """Base exception for all application errors."""


class SetpointsError(GreenhouseError):
    """Raised when a setpoint file cannot be decoded."""

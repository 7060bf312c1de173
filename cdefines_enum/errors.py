# errors.py


class ConfigError(ValueError):
    """Raised when an enum configuration is missing keys or has bad values."""


class GenerationError(RuntimeError):
    """Raised when the define text cannot be turned into an enum."""
